"""deckedit - inline rich-text editing toolbar and slide markup serializer.

deckedit has two halves that share one document model:

- an inline editor toolbar (:class:`InlineEditor`) that follows the text
  selection of a host document, reports the formatting state of the selected
  text and applies formatting commands to it;
- a serializer that turns the rich-text markup stored for a slide into a
  typed tree of :class:`TextNode` / :class:`ElementNode` values, rooted at
  the tag of the slide's template.

Requirements
------------
- Python 3.10+
- beautifulsoup4 (``lxml`` or ``html5lib`` tree builders are optional)

Examples
--------
Serialize a markup fragment:

    >>> from deckedit import serialize_fragment
    >>> nodes = serialize_fragment("<b>Hi</b> there")
    >>> [type(node).__name__ for node in nodes]
    ['ElementNode', 'TextNode']

Build a slide element:

    >>> from deckedit import parse_slide
    >>> slide = parse_slide({"id": "s1", "template": "title", "content": "<h1 slot='title'>Hello</h1>"})
    >>> slide.tag
    'deckgo-slide-title'

See Also
--------
deckedit.editor : inline editor toolbar
deckedit.ast : serialized node definitions and utilities

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "deckedit requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from deckedit.ast import ElementNode, SerializedNode, TextNode
from deckedit.editor import InlineEditor, SoupDocument, ToolbarMode, Viewport
from deckedit.exceptions import DeckEditError, DependencyError, InvalidOptionsError, ParsingError, ValidationError
from deckedit.options import FragmentOptions, InlineEditorOptions, SlideOptions
from deckedit.parsers import (
    FragmentSerializer,
    Slide,
    SlideElementBuilder,
    SlideTemplate,
    parse_slide,
    parse_style_declarations,
    serialize_fragment,
)
from deckedit.renderers import render_html

__all__ = [
    "__version__",
    "DeckEditError",
    "DependencyError",
    "ElementNode",
    "FragmentOptions",
    "FragmentSerializer",
    "InlineEditor",
    "InlineEditorOptions",
    "InvalidOptionsError",
    "ParsingError",
    "SerializedNode",
    "Slide",
    "SlideElementBuilder",
    "SlideOptions",
    "SlideTemplate",
    "SoupDocument",
    "TextNode",
    "ToolbarMode",
    "ValidationError",
    "Viewport",
    "parse_slide",
    "parse_style_declarations",
    "render_html",
    "serialize_fragment",
]
