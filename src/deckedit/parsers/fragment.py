#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/parsers/fragment.py
"""Markup fragment to serialized tree converter.

Walks a BeautifulSoup tree recursively and produces the ordered, typed
``TextNode`` / ``ElementNode`` tree described in :mod:`deckedit.ast.nodes`.
The input tree is never mutated.

"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from deckedit.ast import ElementNode, SerializedNode, TextNode
from deckedit.constants import DEPS_HTML, DEPS_HTML_PARSER, FRAGMENT_ROOT_TAG
from deckedit.exceptions import DependencyError, InvalidOptionsError
from deckedit.options.fragment import FragmentOptions
from deckedit.parsers.attributes import extract_attributes, extract_style
from deckedit.utils.decorators import check_dependencies, debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


class FragmentSerializer:
    """Convert markup fragments into serialized trees.

    Parameters
    ----------
    options : FragmentOptions or None, default = None
        Serialization options

    Examples
    --------
        >>> serializer = FragmentSerializer()
        >>> root = serializer.parse_markup("<b>Hi</b> there")
        >>> serializer.serialize(root, is_root=True)
        [ElementNode(tag='b', ...), TextNode(content=' there')]

    """

    def __init__(self, options: FragmentOptions | None = None):
        """Initialize the serializer with options."""
        if options is not None and not isinstance(options, FragmentOptions):
            raise InvalidOptionsError(
                component_name="FragmentSerializer",
                expected_type=FragmentOptions,
                received_type=type(options),
            )
        self.options: FragmentOptions = options or FragmentOptions()

    @requires_dependencies("html", DEPS_HTML)
    def parse_markup(self, markup: str) -> Any:
        """Parse a markup string with the configured tree builder.

        The markup is parsed as the content of a wrapper element, which is
        returned as the fragment root: its children are the top-level nodes
        of ``markup`` whatever document structure the tree builder adds.

        Raises
        ------
        DependencyError
            If the configured tree builder is not installed

        """
        from bs4 import BeautifulSoup
        from bs4.exceptions import FeatureNotFound

        check_dependencies(f"{self.options.html_parser} tree builder", DEPS_HTML_PARSER[self.options.html_parser])

        wrapped = f"<{FRAGMENT_ROOT_TAG}>{markup or ''}</{FRAGMENT_ROOT_TAG}>"
        try:
            # Keep attribute values as the raw strings found in the markup
            soup = BeautifulSoup(wrapped, self.options.html_parser, multi_valued_attributes=None)
        except FeatureNotFound as e:
            raise DependencyError(
                component_name="html",
                missing_packages=[(self.options.html_parser, "")],
                message=f"Selected html_parser not available: {e}",
            ) from e

        return soup.find(FRAGMENT_ROOT_TAG)

    def serialize(self, node: Any, is_root: bool = False) -> Union[SerializedNode, list[SerializedNode], None]:
        """Serialize a node and its subtree.

        Parameters
        ----------
        node : Any
            BeautifulSoup node (``Tag`` or ``NavigableString``)
        is_root : bool, default False
            When true, ``node`` is the fragment wrapper: the list of its
            serialized children is returned instead of an element

        Returns
        -------
        SerializedNode, list of SerializedNode, or None
            ``None`` for a missing node or for non-content markup such as
            comments and doctypes

        """
        from bs4.element import NavigableString, PreformattedString, Tag

        if node is None:
            return None

        if isinstance(node, PreformattedString):
            logger.debug("Skipping %s node", type(node).__name__)
            return None

        if isinstance(node, NavigableString):
            return TextNode(content=str(node))

        if not isinstance(node, Tag):
            logger.debug("Skipping unsupported node type %s", type(node).__name__)
            return None

        if node.contents:
            children: list[SerializedNode] = []
            for child in node.contents:
                result = self.serialize(child, is_root=False)
                if result is not None:
                    children.append(result)  # type: ignore[arg-type]

            return children if is_root else self._build_element(node, children)

        return [] if is_root else self._build_element(node, [TextNode(content=node.get_text())])

    def serialize_markup(self, markup: str) -> list[SerializedNode]:
        """Parse ``markup`` and return the serialized top-level nodes."""
        root = self.parse_markup(markup)
        with debug_timer(logger, "Serializing fragment"):
            result = self.serialize(root, is_root=True)
        return result if isinstance(result, list) else []

    def _build_element(self, node: Any, children: list[SerializedNode]) -> ElementNode:
        return ElementNode(
            tag=node.name.lower(),
            attributes=extract_attributes(node, self.options.editable_slot_attribute),
            style=extract_style(node),
            children=tuple(children),
        )


def serialize_fragment(markup: str, options: Optional[FragmentOptions] = None) -> list[SerializedNode]:
    """Serialize a markup string into its ordered top-level nodes.

    Parameters
    ----------
    markup : str
        Rich-text markup, e.g. ``"<b>Hi</b> there"``
    options : FragmentOptions, optional
        Serialization options

    Returns
    -------
    list of SerializedNode
        Serialized children of the fragment, in document order

    """
    return FragmentSerializer(options).serialize_markup(markup)
