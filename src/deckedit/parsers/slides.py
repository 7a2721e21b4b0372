#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/parsers/slides.py
"""Slide content to slide element conversion.

A stored slide keeps its body as free-form rich-text markup plus a few
slide-level attributes. :class:`SlideElementBuilder` turns it into a single
``ElementNode`` rooted at the template-specific slide component tag, ready
for a host presentation component to rebuild.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from deckedit.ast import ElementNode, SerializedNode
from deckedit.exceptions import InvalidOptionsError
from deckedit.options.fragment import SlideOptions
from deckedit.parsers.fragment import FragmentSerializer
from deckedit.parsers.style import parse_style_declarations
from deckedit.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class SlideTemplate(str, Enum):
    """Slide templates known to the default tag table."""

    TITLE = "title"
    CONTENT = "content"
    SPLIT = "split"
    GIF = "gif"


@dataclass
class Slide:
    """A stored slide.

    Parameters
    ----------
    id : str or None
        Slide identifier, emitted as the ``slide_id`` attribute
    template : str or None
        Template name, matched case-insensitively
    content : str or None
        Rich-text markup of the slide body
    attributes : dict
        Slide-level attributes; ``style`` and ``src`` are used

    """

    id: Optional[str] = None
    template: Optional[str] = None
    content: Optional[str] = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Slide":
        """Build a slide from its stored (JSON) form."""
        attributes = data.get("attributes") or {}
        return cls(
            id=data.get("id"),
            template=data.get("template"),
            content=data.get("content"),
            attributes=dict(attributes) if isinstance(attributes, Mapping) else {},
        )


class SlideElementBuilder:
    """Build slide root elements from stored slide content.

    Parameters
    ----------
    options : SlideOptions or None, default = None
        Template table and fragment serialization options

    """

    def __init__(self, options: SlideOptions | None = None):
        """Initialize the builder with options."""
        if options is not None and not isinstance(options, SlideOptions):
            raise InvalidOptionsError(
                component_name="SlideElementBuilder",
                expected_type=SlideOptions,
                received_type=type(options),
            )
        self.options: SlideOptions = options or SlideOptions()
        self._serializer = FragmentSerializer(self.options)
        self._slide_tags = {name.lower(): tag for name, tag in self.options.slide_tags.items()}

    def slide_tag(self, template: SlideTemplate | str | None) -> Optional[str]:
        """Return the root tag for ``template``, ``None`` when unknown."""
        if not template:
            return None
        if isinstance(template, SlideTemplate):
            template = template.value
        return self._slide_tags.get(str(template).strip().lower())

    def build(
        self,
        template: SlideTemplate | str | None,
        content: Optional[str],
        attributes: Optional[Mapping[str, Any]] = None,
        slide_id: Optional[str] = None,
    ) -> ElementNode | None:
        """Build the root element of a slide.

        Parameters
        ----------
        template : str or None
            Slide template name
        content : str or None
            Slide body markup
        attributes : Mapping, optional
            Slide-level attributes; ``style`` is parsed into the root style
            map and ``src`` is passed through
        slide_id : str, optional
            Identifier emitted as ``slide_id``

        Returns
        -------
        ElementNode or None
            ``None`` when the template is missing or unknown

        """
        tag = self.slide_tag(template)
        if tag is None:
            logger.debug("Unknown slide template %r, nothing to build", template)
            return None

        with debug_timer(logger, f"Building {tag}"):
            children: list[SerializedNode] = self._serializer.serialize_markup(content) if content else []

        attributes = attributes or {}
        root_attributes: dict[str, str] = {}
        if slide_id is not None:
            root_attributes["slide_id"] = str(slide_id)
        if attributes.get("src"):
            root_attributes["src"] = str(attributes["src"])

        style = parse_style_declarations(attributes.get("style")) if attributes.get("style") else None

        return ElementNode(tag=tag, attributes=root_attributes, style=style, children=tuple(children))

    def build_slide(self, slide: Slide | Mapping[str, Any] | None) -> ElementNode | None:
        """Build the root element of a stored slide."""
        if slide is None:
            return None
        if not isinstance(slide, Slide):
            slide = Slide.from_dict(slide)
        return self.build(slide.template, slide.content, slide.attributes, slide_id=slide.id)


def parse_slide(slide: Slide | Mapping[str, Any] | None, options: Optional[SlideOptions] = None) -> ElementNode | None:
    """Convert a stored slide into its root ``ElementNode``.

    Returns ``None`` for a missing slide or an unknown template.
    """
    return SlideElementBuilder(options).build_slide(slide)
