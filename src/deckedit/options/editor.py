#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/options/editor.py
"""Configuration options for the inline editor toolbar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from deckedit.constants import (
    DEFAULT_CONTAINERS,
    DEFAULT_DISPLAY_DEBOUNCE,
    DEFAULT_IMAGE_ACTIVATION_DELAY,
    DEFAULT_IMG_ANCHOR,
    DEFAULT_IMG_PROPERTY_CSS_FLOAT,
    DEFAULT_IMG_PROPERTY_WIDTH,
    DEFAULT_PALETTE,
    DEFAULT_STICKY_SCROLL_INTERVAL,
    DEFAULT_TOOLBAR_HEIGHT,
    DEFAULT_TOOLBAR_TAG,
    DEFAULT_TOOLBAR_WIDTH,
)
from deckedit.options.base import CloneFrozenMixin


def split_names(value: str | None) -> tuple[str, ...]:
    """Split a comma separated list of names, dropping blanks."""
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


@dataclass(frozen=True)
class InlineEditorOptions(CloneFrozenMixin):
    """Configuration for an ``InlineEditor``.

    Parameters
    ----------
    attach_to : Tag or None, default None
        Element whose pointer events start a selection. ``None`` listens on
        the whole document.
    containers : str, default "h1,h2,h3,h4,h5,h6,div"
        Comma separated structural container tags.
    mobile : bool or None, default None
        Force mobile layout; ``None`` uses the viewport's detection.
    sticky_desktop, sticky_mobile : bool, default False
        Use the sticky toolbar on desktop / mobile viewports.
    img_editable : bool, default False
        Offer the image toolbar when an image anchor is clicked.
    img_anchor : str, default "img"
        Tag name recognized as an image anchor.
    img_property_width, img_property_css_float : str
        Style properties the image sub-widget edits.
    list : bool, default True
        Offer ordered/unordered list actions.
    custom_actions : str or None
        Comma separated identifiers of custom action buttons.

    """

    attach_to: Optional[Any] = field(
        default=None,
        metadata={"help": "Element whose pointer events start a selection (default: document)", "importance": "core"},
    )
    containers: str = field(
        default=DEFAULT_CONTAINERS,
        metadata={"help": "Comma separated structural container tags", "importance": "core"},
    )
    mobile: Optional[bool] = field(
        default=None,
        metadata={"help": "Force mobile layout; auto-detected when unset", "importance": "advanced"},
    )
    sticky_desktop: bool = field(default=False, metadata={"help": "Sticky toolbar on desktop", "importance": "core"})
    sticky_mobile: bool = field(default=False, metadata={"help": "Sticky toolbar on mobile", "importance": "core"})
    img_editable: bool = field(default=False, metadata={"help": "Enable the image toolbar", "importance": "core"})
    img_anchor: str = field(default=DEFAULT_IMG_ANCHOR, metadata={"help": "Image anchor tag name"})
    img_property_width: str = field(default=DEFAULT_IMG_PROPERTY_WIDTH, metadata={"help": "Image width property"})
    img_property_css_float: str = field(
        default=DEFAULT_IMG_PROPERTY_CSS_FLOAT, metadata={"help": "Image float property"}
    )
    list: bool = field(default=True, metadata={"help": "Offer list actions", "importance": "core"})
    custom_actions: Optional[str] = field(
        default=None,
        metadata={"help": "Comma separated custom action identifiers", "importance": "advanced"},
    )
    palette: tuple[tuple[str, str], ...] = field(
        default=DEFAULT_PALETTE,
        metadata={"help": "Colors offered by the color picker as (hex, label) pairs"},
    )
    toolbar_tag: str = field(
        default=DEFAULT_TOOLBAR_TAG,
        metadata={"help": "Tag name of the toolbar element in the host document", "importance": "advanced"},
    )
    toolbar_width: int = field(default=DEFAULT_TOOLBAR_WIDTH, metadata={"help": "Toolbar width in pixels"})
    toolbar_height: int = field(default=DEFAULT_TOOLBAR_HEIGHT, metadata={"help": "Toolbar height in pixels"})
    display_debounce: float = field(
        default=DEFAULT_DISPLAY_DEBOUNCE,
        metadata={"help": "Seconds before an activated toolbar is shown", "importance": "advanced"},
    )
    sticky_scroll_interval: float = field(
        default=DEFAULT_STICKY_SCROLL_INTERVAL,
        metadata={"help": "Scroll sampling interval of the sticky toolbar, in seconds", "importance": "advanced"},
    )
    image_activation_delay: float = field(
        default=DEFAULT_IMAGE_ACTIVATION_DELAY,
        metadata={"help": "Delay before the image toolbar opens, in seconds", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and names.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not self.container_names:
            raise ValueError("containers must name at least one tag")
        if not self.img_anchor:
            raise ValueError("img_anchor must not be empty")
        if self.toolbar_width < 0 or self.toolbar_height < 0:
            raise ValueError(
                f"toolbar size must be non-negative, got {self.toolbar_width}x{self.toolbar_height}"
            )
        for name in ("display_debounce", "sticky_scroll_interval", "image_activation_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    @property
    def container_names(self) -> frozenset[str]:
        """Lower-cased container tag names."""
        return frozenset(name.lower() for name in split_names(self.containers))

    @property
    def custom_action_names(self) -> tuple[str, ...]:
        """Custom action identifiers in declaration order."""
        return split_names(self.custom_actions)
