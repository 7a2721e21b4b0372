#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Enumerations shared by the editor components."""

from __future__ import annotations

from enum import Enum


class ToolbarMode(str, Enum):
    """Command panel shown by an activated toolbar."""

    SELECTION = "selection"
    LINK = "link"
    COLOR = "color"
    IMAGE = "image"
    ALIGNMENT = "alignment"


class ContentAlign(str, Enum):
    """Text alignment, with the ``execCommand`` name that applies it."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"

    @property
    def command(self) -> str:
        """Name of the justify command for this alignment."""
        return _JUSTIFY_COMMANDS[self]

    @classmethod
    def from_style(cls, value: str | None) -> "ContentAlign | None":
        """Map a ``text-align`` value to an alignment, ``None`` if unrecognized."""
        if not value:
            return None
        value = value.strip().lower()
        if value in ("start", "left"):
            return cls.LEFT
        if value in ("end", "right"):
            return cls.RIGHT
        if value == "center":
            return cls.CENTER
        if value == "justify":
            return cls.JUSTIFY
        return None


_JUSTIFY_COMMANDS = {
    ContentAlign.LEFT: "justifyLeft",
    ContentAlign.CENTER: "justifyCenter",
    ContentAlign.RIGHT: "justifyRight",
    ContentAlign.JUSTIFY: "justifyFull",
}


class EditorState(str, Enum):
    """Lifecycle state of the toolbar."""

    IDLE = "idle"
    ACTIVATED = "activated"
