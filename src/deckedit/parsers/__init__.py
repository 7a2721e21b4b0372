#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markup fragment, style and slide parsers."""

from deckedit.parsers.attributes import extract_attributes, extract_style
from deckedit.parsers.fragment import FragmentSerializer, serialize_fragment
from deckedit.parsers.slides import Slide, SlideElementBuilder, SlideTemplate, parse_slide
from deckedit.parsers.style import format_style_declarations, get_style_property, parse_style_declarations

__all__ = [
    "FragmentSerializer",
    "Slide",
    "SlideElementBuilder",
    "SlideTemplate",
    "extract_attributes",
    "extract_style",
    "format_style_declarations",
    "get_style_property",
    "parse_slide",
    "parse_style_declarations",
    "serialize_fragment",
]
