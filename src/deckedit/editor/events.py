#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/editor/events.py
"""Events consumed and notifications emitted by the inline editor.

Input side
----------
Host events (pointer/touch down, selection change, scroll, resize) and
sub-widget signals (color picked, link modified, image modified, custom
action) are modelled as small dataclasses. The editor queues them in an
:class:`EventQueue` and handles them one at a time.

Output side
-----------
:class:`EditorNotification` values are passed to a
:data:`NotificationCallback`, in the same way conversion progress is
reported through a progress callback.

Listeners
---------
:class:`EventTarget` keeps per-type listener lists for the host document
and the viewport; :class:`ListenerScope` records registrations so they can
be removed together.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional, Union

logger = logging.getLogger(__name__)


# ============================================================================
# Host input events
# ============================================================================


@dataclass(frozen=True)
class PointerEvent:
    """A mouse button press.

    Parameters
    ----------
    target : Any
        Node the event was dispatched to
    client_x, client_y : float
        Viewport coordinates of the pointer

    """

    target: Any
    client_x: float = 0
    client_y: float = 0
    type: str = "mousedown"


@dataclass(frozen=True)
class TouchPoint:
    """One contact point of a touch event."""

    client_x: float
    client_y: float


@dataclass(frozen=True)
class TouchEvent:
    """A touch start; coordinates come from the first changed touch."""

    target: Any
    changed_touches: tuple[TouchPoint, ...] = ()
    type: str = "touchstart"


AnchorEvent = Union[PointerEvent, TouchEvent]


def unify_event(event: AnchorEvent) -> tuple[float, float]:
    """Return the ``(client_x, client_y)`` of a pointer or touch event."""
    if isinstance(event, TouchEvent):
        if not event.changed_touches:
            return 0, 0
        touch = event.changed_touches[0]
        return touch.client_x, touch.client_y
    return event.client_x, event.client_y


# ============================================================================
# Editor events
# ============================================================================


@dataclass(frozen=True)
class PointerDown:
    """Pointer or touch pressed on the document or attachment root."""

    event: AnchorEvent


@dataclass(frozen=True)
class SelectionChange:
    """The document selection changed."""


@dataclass(frozen=True)
class Scroll:
    """The viewport scrolled."""


@dataclass(frozen=True)
class Resize:
    """The viewport was resized."""


@dataclass(frozen=True)
class CommandRequested:
    """A toolbar button was pressed.

    Parameters
    ----------
    command : str
        Format command (``bold``, ``justifyCenter``, ``insertOrderedList``, ...)
        or toolbar action (``link``, ``color``, ``alignment``)

    """

    command: str
    value: Optional[str] = None


@dataclass(frozen=True)
class ColorPicked:
    """The color sub-widget picked a color."""

    hex: Optional[str]


@dataclass(frozen=True)
class LinkModified:
    """The link sub-widget finished; the toolbar resets."""

    clear_selection: bool = True


@dataclass(frozen=True)
class LinkCreated:
    """The link sub-widget created an anchor element."""

    element: Any


@dataclass(frozen=True)
class ImageModified:
    """The image sub-widget changed an image-bearing node."""

    element: Any = None


@dataclass(frozen=True)
class CustomActionTriggered:
    """A custom action button was pressed."""

    action: str


EditorEvent = Union[
    PointerDown,
    SelectionChange,
    Scroll,
    Resize,
    CommandRequested,
    ColorPicked,
    LinkModified,
    LinkCreated,
    ImageModified,
    CustomActionTriggered,
]


class EventQueue:
    """FIFO of editor events awaiting processing."""

    def __init__(self) -> None:
        self._events: deque[EditorEvent] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def put(self, event: EditorEvent) -> None:
        self._events.append(event)

    def get(self) -> Optional[EditorEvent]:
        """Pop the oldest event, ``None`` when empty."""
        return self._events.popleft() if self._events else None

    def clear(self) -> None:
        self._events.clear()


# ============================================================================
# Output notifications
# ============================================================================

NotificationType = Literal["sticky_toolbar_activated", "img_did_change", "link_created", "custom_action"]


@dataclass(frozen=True)
class CustomActionDetail:
    """Payload of a ``custom_action`` notification."""

    action: str
    selection: Any
    anchor_link: Any


@dataclass
class EditorNotification:
    """A notification emitted by the editor.

    Parameters
    ----------
    type : NotificationType
        - "sticky_toolbar_activated": detail is a bool
        - "img_did_change": detail is the changed node
        - "link_created": detail is the new anchor element
        - "custom_action": detail is a :class:`CustomActionDetail`
    detail : Any
        Notification payload

    """

    type: NotificationType
    detail: Any = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.type.upper()}] {self.detail!r}"


NotificationCallback = Callable[[EditorNotification], None]
"""Type alias for notification callbacks.

Callbacks should not raise; exceptions are logged and ignored.
"""


# ============================================================================
# Listener registration
# ============================================================================

Listener = Callable[[Any], None]


class EventTarget:
    """Per-type listener registry.

    Listeners may be bound to a ``root``: subclasses decide through
    :meth:`_listener_applies` whether an event reaches it.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[tuple[Listener, Any]]] = {}

    def add_event_listener(self, event_type: str, listener: Listener, root: Any = None) -> None:
        entries = self._listeners.setdefault(event_type, [])
        if not any(existing == listener and existing_root is root for existing, existing_root in entries):
            entries.append((listener, root))

    def remove_event_listener(self, event_type: str, listener: Listener, root: Any = None) -> None:
        entries = self._listeners.get(event_type, [])
        self._listeners[event_type] = [
            (existing, existing_root)
            for existing, existing_root in entries
            if not (existing == listener and existing_root is root)
        ]

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event_type: str, event: Any = None) -> int:
        """Call every applicable listener of ``event_type``.

        Returns
        -------
        int
            Number of listeners called

        """
        called = 0
        # Listeners may remove themselves while being called
        for listener, root in list(self._listeners.get(event_type, [])):
            if self._listener_applies(root, event):
                listener(event)
                called += 1
        return called

    def _listener_applies(self, root: Any, event: Any) -> bool:
        return True


class ListenerScope:
    """Registrations made together and removed together."""

    def __init__(self) -> None:
        self._entries: list[tuple[EventTarget, str, Listener, Any]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, target: EventTarget, event_type: str, listener: Listener, root: Any = None) -> None:
        target.add_event_listener(event_type, listener, root)
        self._entries.append((target, event_type, listener, root))

    def close(self) -> None:
        """Remove every registration made through this scope."""
        while self._entries:
            target, event_type, listener, root = self._entries.pop()
            target.remove_event_listener(event_type, listener, root)

    def __enter__(self) -> "ListenerScope":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
