#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options dataclasses for the deckedit components."""

from deckedit.options.base import CloneFrozenMixin
from deckedit.options.editor import InlineEditorOptions
from deckedit.options.fragment import FragmentOptions, SlideOptions

__all__ = ["CloneFrozenMixin", "FragmentOptions", "InlineEditorOptions", "SlideOptions"]
