#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/ast/nodes.py
"""Serialized node classes for markup fragments.

A serialized tree is the typed, immutable mirror of a markup fragment: an
ordered tree of ``ElementNode`` and ``TextNode`` values carrying normalized
attributes and parsed inline style maps. Trees are produced fresh on every
parse call and never share identity with the markup they came from, so they
can be handed to a different rendering context and rebuilt there.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

    - TextNode: verbatim character data
    - ElementNode: tag, attributes, optional style map, ordered children

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

StyleMap = Mapping[str, Optional[str]]


class Node(ABC):
    """Base class for all serialized nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass(frozen=True)
class TextNode(Node):
    """Character data, taken verbatim from the source markup.

    Parameters
    ----------
    content : str
        The text, neither trimmed nor escaped

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class ElementNode(Node):
    """An element with its attributes, style map and children.

    Parameters
    ----------
    tag : str
        Lower-cased tag name
    attributes : Mapping[str, str]
        Attributes copied verbatim, without ``style``
    style : Mapping[str, str or None] or None
        Parsed inline style declarations, ``None`` when the element has no
        (or an empty) ``style`` attribute
    children : tuple of SerializedNode
        Children in document order

    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    style: Optional[StyleMap] = None
    children: tuple[SerializedNode, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the mappings and the children sequence."""
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        if self.style is not None:
            object.__setattr__(self, "style", MappingProxyType(dict(self.style)))
        object.__setattr__(self, "children", tuple(self.children))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_element``."""
        return visitor.visit_element(self)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value."""
        return self.attributes.get(name, default)

    @property
    def text(self) -> str:
        """Concatenated text of all descendant text nodes."""
        return "".join(child.content if isinstance(child, TextNode) else child.text for child in self.children)


SerializedNode = Union[TextNode, ElementNode]

