#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/parsers/style.py
"""Inline style declaration parsing.

Converts the value of a ``style`` attribute into an ordered mapping of
property to value, and back.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def parse_style_declarations(declarations: Optional[str]) -> dict[str, Optional[str]] | None:
    """Parse an inline style declaration string.

    Parameters
    ----------
    declarations : str or None
        Raw ``style`` attribute value, e.g. ``"color: red; font-weight:bold"``

    Returns
    -------
    dict or None
        Property to value mapping in input order, ``None`` for empty input.
        A declaration without ``:`` maps its property to ``None``. Blank
        declarations and declarations with an empty property are skipped;
        the last of duplicate properties wins.

    Examples
    --------
        >>> parse_style_declarations("color: red; font-weight:bold")
        {'color': 'red', 'font-weight': 'bold'}
        >>> parse_style_declarations("background: url(http://x/y.png)")
        {'background': 'url(http://x/y.png)'}

    """
    if not declarations:
        return None

    result: dict[str, Optional[str]] = {}

    for declaration in declarations.split(";"):
        if not declaration.strip():
            continue

        prop, sep, value = declaration.partition(":")
        prop = prop.strip()
        if not prop:
            logger.debug("Skipping style declaration without property: %r", declaration)
            continue

        result[prop] = value.strip() if sep else None

    return result


def format_style_declarations(style: Optional[Mapping[str, Optional[str]]]) -> str:
    """Join a style map back into a declaration string.

    Properties whose value is ``None`` are written without a value.
    """
    if not style:
        return ""
    return "; ".join(prop if value is None else f"{prop}: {value}" for prop, value in style.items())


def get_style_property(declarations: Optional[str], prop: str) -> Optional[str]:
    """Return one property from a declaration string, ``None`` if absent or empty."""
    style = parse_style_declarations(declarations)
    if not style:
        return None
    value = style.get(prop)
    return value or None
