#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/renderers/html.py
"""Serialized tree to HTML rendering.

This module provides the HtmlRenderer class which rebuilds markup from a
serialized tree, the way a host slide component reconstructs an equivalent
element tree in its own rendering context.

"""

from __future__ import annotations

import logging
from typing import Iterable

from deckedit.ast import ElementNode, NodeVisitor, SerializedNode, TextNode
from deckedit.parsers.style import format_style_declarations
from deckedit.utils.html_utils import escape_attribute, escape_html

logger = logging.getLogger(__name__)

# Elements that never have content or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


class HtmlRenderer(NodeVisitor):
    """Render serialized nodes to HTML.

    Parameters
    ----------
    escape_text : bool, default True
        Escape ``<``, ``>`` and ``&`` in text nodes. Text in serialized trees
        is stored verbatim, so escaping happens here.

    Examples
    --------
        >>> from deckedit.parsers import serialize_fragment
        >>> HtmlRenderer().render_to_string(serialize_fragment("<b>Hi</b> there"))
        '<b>Hi</b> there'

    """

    def __init__(self, escape_text: bool = True):
        """Initialize the renderer."""
        self.escape_text = escape_text
        self._output: list[str] = []

    def render_to_string(self, nodes: SerializedNode | Iterable[SerializedNode]) -> str:
        """Render a node, or a sequence of sibling nodes, to a string."""
        self._output = []
        if isinstance(nodes, (TextNode, ElementNode)):
            nodes.accept(self)
        else:
            for node in nodes:
                node.accept(self)
        return "".join(self._output)

    def visit_text(self, node: TextNode) -> None:
        """Render a TextNode."""
        self._output.append(escape_html(node.content, enabled=self.escape_text))

    def visit_element(self, node: ElementNode) -> None:
        """Render an ElementNode with its attributes, style and children."""
        parts = [node.tag]
        for name, value in node.attributes.items():
            parts.append(f'{name}="{escape_attribute(value)}"')
        style = format_style_declarations(node.style)
        if style:
            parts.append(f'style="{escape_attribute(style)}"')

        self._output.append(f"<{' '.join(parts)}>")

        if node.tag in VOID_ELEMENTS:
            if node.text:
                logger.debug("Dropping text content of void element <%s>", node.tag)
            return

        for child in node.children:
            child.accept(self)
        self._output.append(f"</{node.tag}>")


def render_html(nodes: SerializedNode | Iterable[SerializedNode]) -> str:
    """Render serialized nodes to HTML with default settings."""
    return HtmlRenderer().render_to_string(nodes)
