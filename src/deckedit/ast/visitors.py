#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/ast/visitors.py
"""Visitor pattern implementation for serialized tree traversal.

Visitors keep algorithms such as rendering or collection separate from the
node classes themselves.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator

from deckedit.ast.nodes import ElementNode, SerializedNode, TextNode


class NodeVisitor(ABC):
    """Abstract base class for serialized node visitors.

    Examples
    --------
        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     def visit_element(self, node):
        ...         for child in node.children:
        ...             child.accept(self)

    """

    @abstractmethod
    def visit_text(self, node: TextNode) -> Any:
        """Visit a TextNode."""
        pass

    @abstractmethod
    def visit_element(self, node: ElementNode) -> Any:
        """Visit an ElementNode."""
        pass


def walk(nodes: SerializedNode | list[SerializedNode] | tuple[SerializedNode, ...]) -> Iterator[SerializedNode]:
    """Yield every node in document order (pre-order)."""
    stack = list(reversed(nodes)) if isinstance(nodes, (list, tuple)) else [nodes]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, ElementNode):
            stack.extend(reversed(node.children))


def find_elements(
    nodes: SerializedNode | list[SerializedNode] | tuple[SerializedNode, ...],
    predicate: Callable[[ElementNode], bool],
) -> list[ElementNode]:
    """Return every element matching ``predicate`` in document order."""
    return [node for node in walk(nodes) if isinstance(node, ElementNode) and predicate(node)]
