#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Selection-driven inline editor toolbar and its host document model."""

from deckedit.editor.document import (
    AnchorLink,
    HostDocument,
    Range,
    Selection,
    SoupDocument,
    Viewport,
)
from deckedit.editor.enums import ContentAlign, EditorState, ToolbarMode
from deckedit.editor.events import (
    ColorPicked,
    CommandRequested,
    CustomActionDetail,
    CustomActionTriggered,
    EditorNotification,
    EventQueue,
    EventTarget,
    ImageModified,
    LinkCreated,
    LinkModified,
    ListenerScope,
    NotificationCallback,
    PointerDown,
    PointerEvent,
    Resize,
    Scroll,
    SelectionChange,
    TouchEvent,
    TouchPoint,
)
from deckedit.editor.inspector import DEFAULT_FORMAT_STATE, FormatState, compute_format_state
from deckedit.editor.positioner import StickyScrollTracker, ToolbarPosition, ToolbarSize, position
from deckedit.editor.timers import CoalescingTimer, GuardedScheduler, ManualScheduler, Scheduler
from deckedit.editor.toolbar import ActionButton, InlineEditor

__all__ = [
    "ActionButton",
    "AnchorLink",
    "CoalescingTimer",
    "ColorPicked",
    "CommandRequested",
    "ContentAlign",
    "CustomActionDetail",
    "CustomActionTriggered",
    "DEFAULT_FORMAT_STATE",
    "EditorNotification",
    "EditorState",
    "EventQueue",
    "EventTarget",
    "GuardedScheduler",
    "FormatState",
    "HostDocument",
    "ImageModified",
    "InlineEditor",
    "LinkCreated",
    "LinkModified",
    "ListenerScope",
    "ManualScheduler",
    "NotificationCallback",
    "PointerDown",
    "PointerEvent",
    "Range",
    "Resize",
    "Scheduler",
    "Scroll",
    "Selection",
    "SelectionChange",
    "SoupDocument",
    "StickyScrollTracker",
    "ToolbarMode",
    "ToolbarPosition",
    "ToolbarSize",
    "TouchEvent",
    "TouchPoint",
    "Viewport",
    "compute_format_state",
    "position",
]
