#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/editor/positioner.py
"""Floating toolbar placement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from deckedit.constants import DESKTOP_TOP_OFFSET, MOBILE_TOP_OFFSET, STICKY_SCROLL_PROPERTY
from deckedit.editor.events import AnchorEvent, unify_event
from deckedit.editor.timers import CoalescingTimer, Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolbarPosition:
    """Top-left corner of the toolbar, in pixels."""

    top: float
    left: float

    def to_style(self) -> dict[str, str]:
        return {"top": f"{self.top:g}px", "left": f"{self.left:g}px"}


@dataclass(frozen=True)
class ToolbarSize:
    width: float
    height: float = 0


def position(
    anchor_event: Optional[AnchorEvent],
    toolbar_size: ToolbarSize,
    mobile: bool,
    sticky: bool,
    viewport_width: float,
) -> Optional[ToolbarPosition]:
    """Compute where the toolbar goes for the triggering pointer event.

    Parameters
    ----------
    anchor_event : PointerEvent or TouchEvent or None
        Event that started the selection
    toolbar_size : ToolbarSize
        Rendered toolbar size
    mobile : bool
        Mobile layout uses a larger offset below the pointer
    sticky : bool
        Sticky toolbars are not placed at coordinates; see
        :class:`StickyScrollTracker`
    viewport_width : float
        Width available to the toolbar; ``0`` disables clamping

    Returns
    -------
    ToolbarPosition or None
        ``None`` in sticky mode or without an anchor event

    """
    if sticky or anchor_event is None:
        return None

    left, top = unify_event(anchor_event)
    top += MOBILE_TOP_OFFSET if mobile else DESKTOP_TOP_OFFSET

    if viewport_width > 0 and left > viewport_width - toolbar_size.width:
        left = viewport_width - toolbar_size.width

    return ToolbarPosition(top=top, left=left)


class StickyScrollTracker:
    """Publish the scroll offset of a sticky toolbar as a style property.

    Samples are coalesced: during momentum scrolling only the last scroll
    of a burst is published, ``interval`` seconds after it.

    Parameters
    ----------
    scheduler : Scheduler
        Timer source
    interval : float
        Sampling delay in seconds
    read_scroll : Callable[[], float]
        Returns the current vertical scroll offset
    publish : Callable[[str, str], None]
        Receives ``(property_name, value)``

    """

    def __init__(
        self,
        scheduler: Scheduler,
        interval: float,
        read_scroll: Callable[[], float],
        publish: Callable[[str, str], None],
    ):
        self._read_scroll = read_scroll
        self._publish = publish
        self._timer = CoalescingTimer(scheduler, interval, self._sample)

    def update(self) -> None:
        self._timer.schedule()

    def stop(self) -> None:
        self._timer.cancel()

    def _sample(self) -> None:
        value = f"{self._read_scroll():g}px"
        logger.debug("Sticky toolbar scroll offset %s", value)
        self._publish(STICKY_SCROLL_PROPERTY, value)
