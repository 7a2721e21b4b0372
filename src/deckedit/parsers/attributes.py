#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/parsers/attributes.py
"""Element attribute extraction."""

from __future__ import annotations

from typing import Any, Optional

from deckedit.constants import EDITABLE_SLOT_ATTRIBUTE
from deckedit.parsers.style import parse_style_declarations


def _attribute_value(value: Any) -> str:
    # Multi-valued attributes (class, rel, ...) arrive as lists from bs4
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    if value is None:
        return ""
    return str(value)


def extract_attributes(element: Any, editable_attribute: str = EDITABLE_SLOT_ATTRIBUTE) -> dict[str, str]:
    """Copy an element's attributes into a plain mapping.

    Parameters
    ----------
    element : Any
        BeautifulSoup ``Tag``; anything without ``attrs`` yields ``{}``
    editable_attribute : str, default "contenteditable"
        Attribute set to ``"true"`` when the element has a ``slot`` attribute

    Returns
    -------
    dict
        Attribute values in source order, excluding ``style`` which is
        exposed through :func:`extract_style`

    """
    attrs = getattr(element, "attrs", None)
    if not attrs:
        return {}

    result = {name: _attribute_value(value) for name, value in attrs.items() if name != "style"}

    if "slot" in attrs:
        result[editable_attribute] = "true"

    return result


def extract_style(element: Any) -> Optional[dict[str, Optional[str]]]:
    """Return the parsed ``style`` attribute of an element, or ``None``."""
    attrs = getattr(element, "attrs", None)
    if not attrs or "style" not in attrs:
        return None
    return parse_style_declarations(_attribute_value(attrs["style"]))
