#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/options/fragment.py
"""Configuration options for markup fragment and slide serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from deckedit.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_SLIDE_TAGS,
    EDITABLE_SLOT_ATTRIBUTE,
    HTML_PARSERS,
)
from deckedit.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class FragmentOptions(CloneFrozenMixin):
    """Options for serializing a markup fragment into a node tree.

    Parameters
    ----------
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder used to parse markup strings. ``lxml`` and
        ``html5lib`` must be installed separately.
    editable_slot_attribute : str, default "contenteditable"
        Attribute added (with value ``"true"``) to every element carrying a
        ``slot`` attribute.

    """

    html_parser: str = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser: html.parser, lxml or html5lib", "importance": "advanced"},
    )
    editable_slot_attribute: str = field(
        default=EDITABLE_SLOT_ATTRIBUTE,
        metadata={"help": "Attribute marking slotted elements as editable", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the configured tree builder."""
        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {', '.join(HTML_PARSERS)}, got {self.html_parser!r}")
        if not self.editable_slot_attribute:
            raise ValueError("editable_slot_attribute must not be empty")


@dataclass(frozen=True)
class SlideOptions(FragmentOptions):
    """Options for building slide root elements.

    Parameters
    ----------
    slide_tags : Mapping[str, str]
        Slide template name (case-insensitive) to root tag of the host slide
        component. Templates missing from this table are unknown.

    """

    slide_tags: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SLIDE_TAGS)),
        metadata={"help": "Template name to slide component tag", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the template table after the base checks."""
        super().__post_init__()
        for template, tag in self.slide_tags.items():
            if not template or not tag:
                raise ValueError(f"slide_tags entries must be non-empty, got {template!r} -> {tag!r}")
