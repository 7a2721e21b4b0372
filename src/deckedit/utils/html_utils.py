"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return _html_escape(value, quote=True)


__all__ = ["escape_html", "escape_attribute"]
