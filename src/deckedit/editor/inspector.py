#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/editor/inspector.py
"""Selection formatting introspection.

:func:`compute_format_state` walks from the selection anchor up to the
nearest structural container and reports which formatting is active. It is
a pure function of the tree: it reads nodes and returns a fresh
:class:`FormatState`, never keeping references to either.

Accumulation rules during the walk:

- bold, italic, underline, ordered and unordered list: true as soon as any
  inspected ancestor has them
- alignment and color: the first value found, nearest the anchor, wins

The container ends the walk. It is only consulted for the title flag
(headings disable the bold and list affordances) and for the color.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import AbstractSet, Any, Iterable, Optional

from deckedit.constants import TITLE_TAGS
from deckedit.editor.document import is_document_root, is_element, is_text_node
from deckedit.editor.enums import ContentAlign
from deckedit.parsers.style import parse_style_declarations

logger = logging.getLogger(__name__)

_NUMERIC_WEIGHT = re.compile(r"^\d+$")


@dataclass(frozen=True)
class FormatState:
    """Formatting active at the selection anchor."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    alignment: ContentAlign = ContentAlign.LEFT
    ordered_list: bool = False
    unordered_list: bool = False
    color: Optional[str] = None
    title_disabled: bool = False


DEFAULT_FORMAT_STATE = FormatState()


def normalize_containers(containers: str | Iterable[str]) -> frozenset[str]:
    """Accept ``"h1,div"`` or an iterable of names; return lower-cased names."""
    if isinstance(containers, str):
        containers = containers.split(",")
    return frozenset(name.strip().lower() for name in containers if name and name.strip())


def _style(node: Any) -> dict[str, Optional[str]]:
    return parse_style_declarations(node.get("style")) or {}


def _name(node: Any) -> str:
    return node.name.lower()


def is_container(containers: AbstractSet[str], node: Any) -> bool:
    """True when ``node`` is an element named in ``containers``."""
    return is_element(node) and _name(node) in containers


def is_bold(node: Any) -> bool:
    weight = (_style(node).get("font-weight") or "").lower()
    if weight in ("bold", "bolder"):
        return True
    if _NUMERIC_WEIGHT.match(weight) and int(weight) >= 600:
        return True
    return _name(node) in ("b", "strong")


def is_italic(node: Any) -> bool:
    if (_style(node).get("font-style") or "").lower() in ("italic", "oblique"):
        return True
    return _name(node) in ("i", "em")


def is_underline(node: Any) -> bool:
    decoration = (_style(node).get("text-decoration") or _style(node).get("text-decoration-line") or "").lower()
    if "underline" in decoration:
        return True
    return _name(node) == "u"


def is_list(node: Any, list_tag: str) -> bool:
    return _name(node) == list_tag


def get_content_alignment(node: Any) -> Optional[ContentAlign]:
    """Alignment set on ``node`` itself, ``None`` if none."""
    return ContentAlign.from_style(_style(node).get("text-align"))


def find_color(node: Any) -> Optional[str]:
    """Foreground color set on ``node``: style first, then ``<font color>``."""
    color = _style(node).get("color")
    if color:
        return color
    if _name(node) == "font" and node.get("color"):
        return node.get("color")
    return None


def is_link(anchor_node: Any) -> bool:
    """True when the anchor (or the parent of an anchor text node) is ``<a>``."""
    if anchor_node is None:
        return False
    node = anchor_node.parent if is_text_node(anchor_node) else anchor_node
    return is_element(node) and _name(node) == "a"


def compute_format_state(containers: str | Iterable[str], anchor_node: Any) -> FormatState:
    """Compute the formatting active at ``anchor_node``.

    Parameters
    ----------
    containers : str or Iterable[str]
        Structural container tag names (comma separated string accepted)
    anchor_node : Any
        Node where the selection starts; text nodes are replaced by their
        parent element

    Returns
    -------
    FormatState
        Defaults when ``anchor_node`` is ``None`` or has no element to start
        from

    """
    names = normalize_containers(containers)

    node = anchor_node
    if node is not None and is_text_node(node):
        node = node.parent

    if node is None or not is_element(node):
        return DEFAULT_FORMAT_STATE

    bold = italic = underline = ordered_list = unordered_list = False
    alignment: Optional[ContentAlign] = None
    color: Optional[str] = None
    title_disabled = False

    while node is not None and is_element(node) and not is_document_root(node):
        if is_container(names, node):
            title_disabled = _name(node) in TITLE_TAGS
            if color is None:
                color = find_color(node)
            break

        bold = bold or is_bold(node)
        italic = italic or is_italic(node)
        underline = underline or is_underline(node)
        if alignment is None:
            alignment = get_content_alignment(node)
        ordered_list = ordered_list or is_list(node, "ol")
        unordered_list = unordered_list or is_list(node, "ul")
        if color is None:
            color = find_color(node)

        node = node.parent

    state = FormatState(
        bold=bold,
        italic=italic,
        underline=underline,
        alignment=alignment or ContentAlign.LEFT,
        ordered_list=ordered_list,
        unordered_list=unordered_list,
        color=color,
        title_disabled=title_disabled,
    )
    logger.debug("Format state at %r: %s", getattr(anchor_node, "name", anchor_node), state)
    return state


def is_anchor_image(anchor_event: Any, img_anchor: str) -> bool:
    """True when the pointer event that anchors the toolbar hit an image anchor tag."""
    target = getattr(anchor_event, "target", None)
    return is_element(target) and _name(target) == img_anchor.lower()
