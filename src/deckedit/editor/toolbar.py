#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/editor/toolbar.py
"""Selection-driven inline editor toolbar.

:class:`InlineEditor` owns all mutable toolbar state: the held selection and
anchor link, the computed :class:`FormatState`, the current
:class:`ToolbarMode` and the toolbar position. Host events arrive through
listeners registered on the host document and viewport, are queued, and are
handled one at a time by a dispatch table.

States
------
- IDLE: no selection held, toolbar hidden (``active_mode`` is ``None``)
- ACTIVATED(mode): toolbar shown with the panel of ``mode``

``reset()`` is the only way back to IDLE and may be called at any time.

Delayed effects (showing the toolbar after a debounce, opening the image
toolbar, sampling the sticky scroll offset) re-check the current state when
they fire and do nothing if a reset or another activation got there first.

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Generator, Optional

from deckedit.editor.document import AnchorLink, HostDocument, Selection, Viewport, contains, is_element
from deckedit.editor.enums import ContentAlign, EditorState, ToolbarMode
from deckedit.editor.events import (
    AnchorEvent,
    ColorPicked,
    CommandRequested,
    CustomActionDetail,
    CustomActionTriggered,
    EditorEvent,
    EditorNotification,
    EventQueue,
    ImageModified,
    LinkCreated,
    LinkModified,
    ListenerScope,
    NotificationCallback,
    PointerDown,
    Resize,
    Scroll,
    SelectionChange,
)
from deckedit.editor.inspector import (
    DEFAULT_FORMAT_STATE,
    FormatState,
    compute_format_state,
    is_anchor_image,
    is_link,
)
from deckedit.editor.positioner import StickyScrollTracker, ToolbarPosition, ToolbarSize, position
from deckedit.editor.timers import CoalescingTimer, GuardedScheduler, ManualScheduler, Scheduler
from deckedit.exceptions import InvalidOptionsError
from deckedit.options.editor import InlineEditorOptions

logger = logging.getLogger(__name__)

INLINE_STYLE_COMMANDS = frozenset({"bold", "italic", "underline"})
LIST_COMMANDS = frozenset({"insertOrderedList", "insertUnorderedList"})
JUSTIFY_COMMANDS = {align.command: align for align in ContentAlign}


@dataclass(frozen=True)
class ActionButton:
    """One button of the rendered toolbar panel."""

    action: str
    active: bool = False
    disabled: bool = False
    value: Optional[str] = None
    style: dict[str, str] = field(default_factory=dict)


class InlineEditor:
    """Inline rich-text editing toolbar.

    Parameters
    ----------
    document : HostDocument
        Host document holding the content, the selection and the focus
    viewport : Viewport, optional
        Host viewport; a 1024px desktop viewport by default
    options : InlineEditorOptions, optional
        Toolbar configuration
    scheduler : Scheduler, optional
        Source of delayed callbacks. Defaults to a :class:`ManualScheduler`,
        whose callbacks only run when its clock is advanced; pass an
        ``asyncio`` loop to run in real time.
    notification_callback : NotificationCallback, optional
        Receives :class:`EditorNotification` values

    Examples
    --------
        >>> from deckedit.editor import InlineEditor, PointerEvent, SoupDocument
        >>> doc = SoupDocument('<div contenteditable="true">Hello <i>world</i></div>')
        >>> editor = InlineEditor(doc)
        >>> editor.attach()
        >>> doc.focus(doc.soup.div)
        >>> _ = doc.dispatch_pointer(PointerEvent(target=doc.soup.i, client_x=20, client_y=30))
        >>> doc.select_text("world")
        >>> editor.active_mode, editor.format_state.italic
        (<ToolbarMode.SELECTION: 'selection'>, True)

    """

    _EVENT_HANDLERS = {
        PointerDown: "_handle_pointer_down",
        SelectionChange: "_handle_selection_change",
        Scroll: "_handle_scroll",
        Resize: "_handle_resize",
        CommandRequested: "_handle_command",
        ColorPicked: "_handle_color_picked",
        LinkModified: "_handle_link_modified",
        LinkCreated: "_handle_link_created",
        ImageModified: "_handle_image_modified",
        CustomActionTriggered: "_handle_custom_action",
    }

    def __init__(
        self,
        document: HostDocument,
        viewport: Optional[Viewport] = None,
        options: Optional[InlineEditorOptions] = None,
        scheduler: Optional[Scheduler] = None,
        notification_callback: Optional[NotificationCallback] = None,
    ):
        """Initialize an idle, detached toolbar."""
        if options is not None and not isinstance(options, InlineEditorOptions):
            raise InvalidOptionsError(
                component_name="InlineEditor",
                expected_type=InlineEditorOptions,
                received_type=type(options),
            )
        self.options: InlineEditorOptions = options or InlineEditorOptions()
        self.document = document
        self.viewport = viewport or Viewport()
        self.scheduler: Scheduler = scheduler or ManualScheduler()
        self.notification_callback = notification_callback

        self.attach_to: Any = self.options.attach_to
        self.mobile: bool = self.options.mobile if self.options.mobile is not None else self.viewport.mobile
        self.containers = self.options.container_names
        self.toolbar_size = ToolbarSize(self.options.toolbar_width, self.options.toolbar_height)

        self.tools_activated = False
        self.display_tools_activated = False
        self.mode = ToolbarMode.SELECTION
        self.format_state: FormatState = DEFAULT_FORMAT_STATE
        self.link = False
        self.selection: Optional[Selection] = None
        self.anchor_link: Optional[AnchorLink] = None
        self.anchor_event: Optional[AnchorEvent] = None
        self.position: Optional[ToolbarPosition] = None
        self.style_properties: dict[str, str] = {}

        self._queue = EventQueue()
        self._processing = False
        self._sticky_notified = False
        self._attach_scope = ListenerScope()
        self._sticky_scope = ListenerScope()
        # Delayed callbacks fail like event handlers: logged, then reset
        self._timers = GuardedScheduler(self.scheduler, self._delayed_callback_failed)
        self._display_timer = CoalescingTimer(self._timers, self.options.display_debounce, self._show_tools)
        self._sticky_tracker = StickyScrollTracker(
            self._timers,
            self.options.sticky_scroll_interval,
            lambda: self.viewport.scroll_y,
            self._set_style_property,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditorState:
        return EditorState.ACTIVATED if self.tools_activated else EditorState.IDLE

    @property
    def active_mode(self) -> Optional[ToolbarMode]:
        """Mode of the activated toolbar, ``None`` while idle."""
        return self.mode if self.tools_activated else None

    @property
    def is_sticky(self) -> bool:
        mobile = self.viewport.mobile
        return (self.options.sticky_desktop and not mobile) or (self.options.sticky_mobile and mobile)

    @property
    def is_attached(self) -> bool:
        return len(self._attach_scope) > 0

    # ------------------------------------------------------------------
    # Listener lifecycle
    # ------------------------------------------------------------------

    def attach(self) -> None:
        """Start listening for pointer and selection events."""
        if self.is_attached:
            return
        self._attach_scope.add(self.document, "mousedown", self._on_pointer, self.attach_to)
        self._attach_scope.add(self.document, "touchstart", self._on_pointer, self.attach_to)
        self._attach_scope.add(self.document, "selectionchange", self._on_selection_change)
        logger.debug("Inline editor attached to %s", getattr(self.attach_to, "name", "document"))

    def detach(self) -> None:
        """Stop listening and return to IDLE."""
        self._attach_scope.close()
        self.reset(False)
        self._queue.clear()

    @contextmanager
    def attached(self) -> Generator["InlineEditor", None, None]:
        """Context manager keeping the editor attached for the block."""
        self.attach()
        try:
            yield self
        finally:
            self.detach()

    def set_attach_to(self, root: Any) -> None:
        """Move pointer listening to ``root``; ``None`` is ignored."""
        if root is None:
            return
        was_attached = self.is_attached
        self._attach_scope.close()
        self.attach_to = root
        if was_attached:
            self.attach()

    def _on_pointer(self, event: AnchorEvent) -> None:
        self.dispatch(PointerDown(event))

    def _on_selection_change(self, _event: Any) -> None:
        self.dispatch(SelectionChange())

    def _on_scroll(self, _event: Any) -> None:
        self.dispatch(Scroll())

    def _on_resize(self, _event: Any) -> None:
        self.dispatch(Resize())

    # ------------------------------------------------------------------
    # Event queue
    # ------------------------------------------------------------------

    def post(self, event: EditorEvent) -> None:
        """Queue an event without processing it."""
        self._queue.put(event)

    def process_events(self) -> int:
        """Handle queued events in order until the queue is empty.

        Events posted while handling (e.g. the selection change caused by a
        reset clearing the selection) are handled in the same run.

        Returns
        -------
        int
            Number of events handled; 0 when called re-entrantly

        """
        if self._processing:
            return 0

        self._processing = True
        handled = 0
        try:
            event = self._queue.get()
            while event is not None:
                self._handle(event)
                handled += 1
                event = self._queue.get()
        finally:
            self._processing = False
        return handled

    def dispatch(self, event: EditorEvent) -> int:
        """Queue ``event`` and process the queue."""
        self.post(event)
        return self.process_events()

    def _handle(self, event: EditorEvent) -> None:
        handler_name = self._EVENT_HANDLERS.get(type(event))
        if handler_name is None:
            logger.warning("No handler for editor event %r", event)
            return

        try:
            getattr(self, handler_name)(event)
        except Exception as e:
            # A faulty host or sub-widget must not leave the toolbar half-activated
            logger.warning(f"Handling {type(event).__name__} failed, resetting toolbar: {e}", exc_info=True)
            self.reset(False)

    def _delayed_callback_failed(self, error: Exception) -> None:
        logger.warning(f"Delayed toolbar callback failed, resetting toolbar: {error}", exc_info=True)
        self.reset(False)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _handle_pointer_down(self, event: PointerDown) -> None:
        anchor_event = event.event

        if self.tools_activated:
            if self.mode is ToolbarMode.IMAGE:
                if not self._is_toolbar(anchor_event.target):
                    self.reset(False)
                    self.anchor_event = anchor_event
            else:
                self.anchor_event = anchor_event
            return

        self.anchor_event = anchor_event
        self._display_image_actions(anchor_event)

    def _handle_selection_change(self, _event: SelectionChange) -> None:
        active = self.document.active_element
        if active is not None and not self._is_container(active):
            if not self._is_toolbar(active):
                self.reset(False)
            return

        if self.mode is ToolbarMode.IMAGE:
            if not is_anchor_image(self.anchor_event, self.options.img_anchor):
                self.reset(False)
            return

        self._display_tools()

    def _handle_scroll(self, _event: Scroll) -> None:
        if self.tools_activated and self.is_sticky:
            self._sticky_tracker.update()

    def _handle_resize(self, _event: Resize) -> None:
        # Sticky offsets are stale after a resize
        self.reset(True, True)

    def _handle_command(self, event: CommandRequested) -> None:
        command = event.command
        if command in INLINE_STYLE_COMMANDS:
            self.exec_format(command)
        elif command in JUSTIFY_COMMANDS:
            self.justify_content(JUSTIFY_COMMANDS[command])
        elif command in LIST_COMMANDS:
            self.toggle_list(command)
        elif command == "foreColor":
            self.select_color(event.value)
        elif command == "link":
            self.toggle_link()
        elif command == "color":
            self.open_color_picker()
        elif command == "alignment":
            self.open_alignment_actions()
        else:
            logger.warning("Unknown toolbar command %r", command)

    def _handle_color_picked(self, event: ColorPicked) -> None:
        self.select_color(event.hex)

    def _handle_link_modified(self, event: LinkModified) -> None:
        self.reset(event.clear_selection)

    def _handle_link_created(self, event: LinkCreated) -> None:
        self._emit("link_created", event.element)

    def _handle_image_modified(self, event: ImageModified) -> None:
        if event.element is not None:
            self._emit("img_did_change", event.element)
        self.reset(True)

    def _handle_custom_action(self, event: CustomActionTriggered) -> None:
        self.custom_action(event.action)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    def _display_image_actions(self, anchor_event: AnchorEvent) -> None:
        if not self.options.img_editable:
            return
        if not is_anchor_image(anchor_event, self.options.img_anchor):
            return

        self.reset(True)
        self._timers.call_later(
            self.options.image_activation_delay, lambda: self._activate_image_toolbar(anchor_event)
        )

    def _activate_image_toolbar(self, anchor_event: AnchorEvent) -> None:
        if self.tools_activated or self.anchor_event is not anchor_event:
            logger.debug("Image toolbar activation superseded")
            return

        self.mode = ToolbarMode.IMAGE
        self.format_state = replace(DEFAULT_FORMAT_STATE, color=None)
        self._set_tools_activated(True)
        self._set_toolbar_anchor_position()

    def _display_tools(self) -> None:
        selection = self.document.get_selection()

        if self.anchor_event is None:
            self.reset(False)
            return

        if self.attach_to is not None and not contains(self.attach_to, self.anchor_event.target):
            self.reset(False)
            return

        if selection is None or not selection.to_string().strip():
            self.reset(False)
            return

        self.format_state = compute_format_state(self.containers, selection.anchor_node)
        self.link = is_link(selection.anchor_node)
        self.mode = ToolbarMode.SELECTION
        self.selection = selection
        self._set_tools_activated(True)

        if selection.range_count > 0:
            self.anchor_link = AnchorLink(
                range=selection.get_range_at(0),
                text=selection.to_string(),
                element=self.document.active_element,
            )
            self._set_toolbar_anchor_position()

        logger.debug("Toolbar activated for %r", selection.to_string())

    def _set_tools_activated(self, activated: bool) -> None:
        self.tools_activated = activated

        if activated:
            self._display_timer.schedule()
        else:
            self._display_timer.cancel()
            self.display_tools_activated = False

        if self.is_sticky and self._sticky_notified is not activated:
            self._sticky_notified = activated
            self._emit("sticky_toolbar_activated", activated)

    def _show_tools(self) -> None:
        if self.tools_activated:
            self.display_tools_activated = True

    def _set_toolbar_anchor_position(self) -> None:
        if self.is_sticky:
            self._track_sticky_position()
            return

        self.position = position(self.anchor_event, self.toolbar_size, self.mobile, False, self.viewport.width)

    def _track_sticky_position(self) -> None:
        if self.anchor_event is None:
            return

        self._sticky_tracker.update()
        if not len(self._sticky_scope):
            self._sticky_scope.add(self.viewport, "scroll", self._on_scroll)
            self._sticky_scope.add(self.viewport, "resize", self._on_resize)

    def _set_style_property(self, name: str, value: str) -> None:
        if self.tools_activated:
            self.style_properties[name] = value

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self, clear_selection: bool = False, blur_active_element: bool = False) -> None:
        """Return to IDLE.

        Parameters
        ----------
        clear_selection : bool, default False
            Also clear the document selection
        blur_active_element : bool, default False
            Also blur the focused element

        """
        if clear_selection:
            self.document.clear_selection()

        self._set_tools_activated(False)

        self.selection = None
        self.mode = ToolbarMode.SELECTION
        self.anchor_link = None
        self.link = False
        self.format_state = DEFAULT_FORMAT_STATE
        self.position = None

        self._sticky_scope.close()
        self._sticky_tracker.stop()

        if blur_active_element:
            self.document.blur_active_element()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _has_text_selection(self) -> bool:
        return self.selection is not None and self.selection.range_count > 0 and len(self.selection.to_string()) > 0

    def _refresh_format_state(self) -> None:
        if self.selection is None or self.selection.range_count <= 0:
            return
        anchor = self.selection.anchor_node
        self.format_state = compute_format_state(self.containers, anchor)
        self.link = is_link(anchor)

    def exec_format(self, command: str, value: Optional[str] = None) -> bool:
        """Apply a format command to the held selection.

        Returns
        -------
        bool
            False when no text selection is held or the host ignored it

        """
        if not self._has_text_selection():
            logger.debug("Ignoring %s without a text selection", command)
            return False

        applied = self.document.exec_command(command, value)
        if applied:
            self._refresh_format_state()
        return applied

    def style_bold(self) -> bool:
        return self.exec_format("bold")

    def style_italic(self) -> bool:
        return self.exec_format("italic")

    def style_underline(self) -> bool:
        return self.exec_format("underline")

    def justify_content(self, align: ContentAlign) -> bool:
        return self.exec_format(align.command)

    def toggle_list(self, command: str) -> bool:
        """Toggle an ordered or unordered list, then reset.

        The list mutation restructures the document under the anchor, so the
        toolbar always resets, whether or not the command applied.
        """
        try:
            return self.exec_format(command)
        finally:
            self.reset(True)

    def toggle_link(self) -> None:
        """Unlink the anchor ``<a>`` or open the link panel."""
        if self.link:
            self._remove_link()
            self.reset(True)
        else:
            self.mode = ToolbarMode.LINK

    def _remove_link(self) -> None:
        if self.selection is None:
            return

        node = self.selection.anchor_node
        if node is None or node.parent is None:
            return
        if not is_element(node):
            node = node.parent
        if node.name.lower() != "a":
            return

        self.document.replace_with_text(node)

    def open_color_picker(self) -> None:
        self.mode = ToolbarMode.COLOR

    def open_alignment_actions(self) -> None:
        self.mode = ToolbarMode.ALIGNMENT

    def select_color(self, hex_color: Optional[str]) -> None:
        """Apply a picked color to the held selection, then reset."""
        if self.selection is None or not hex_color:
            return

        self.format_state = replace(self.format_state, color=hex_color)

        if not self._has_text_selection():
            return

        self.document.exec_command("foreColor", hex_color)
        self.reset(True)

    def custom_action(self, action: str) -> None:
        """Notify the host that a custom action button was pressed."""
        if action not in self.options.custom_action_names:
            logger.debug("Custom action %r is not configured", action)
        self._emit("custom_action", CustomActionDetail(action, self.selection, self.anchor_link))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def css_classes(self) -> list[str]:
        classes = ["inline-editor-tools"]
        if self.display_tools_activated:
            classes.append("inline-editor-tools-activated")
        if self.mobile:
            classes.append("inline-editor-tools-mobile")
        if self.is_sticky:
            classes.append("inline-editor-tools-sticky")
        return classes

    def render_actions(self) -> list[ActionButton]:
        """Buttons of the panel for the current mode.

        The link and image modes delegate to sub-widgets (see
        :meth:`sub_widget_props`) and have no buttons of their own.
        """
        if self.mode is ToolbarMode.SELECTION:
            return self._render_selection_actions()
        if self.mode is ToolbarMode.ALIGNMENT:
            return [
                ActionButton(align.command, active=self.format_state.alignment is align)
                for align in (ContentAlign.LEFT, ContentAlign.CENTER, ContentAlign.RIGHT)
            ]
        if self.mode is ToolbarMode.COLOR:
            return [
                ActionButton("foreColor", active=self.format_state.color == hex_color, value=hex_color)
                for hex_color, _label in self.options.palette
            ]
        return []

    def _render_selection_actions(self) -> list[ActionButton]:
        state = self.format_state
        buttons = [
            ActionButton("bold", active=state.bold, disabled=state.title_disabled),
            ActionButton("italic", active=state.italic),
            ActionButton("underline", active=state.underline),
            ActionButton(
                "alignment",
                active=state.alignment in (ContentAlign.LEFT, ContentAlign.CENTER, ContentAlign.RIGHT),
                value=state.alignment.value,
            ),
            ActionButton("color", style={"background-color": state.color} if state.color else {}),
        ]
        if self.options.list:
            buttons.append(
                ActionButton("insertOrderedList", active=state.ordered_list, disabled=state.title_disabled)
            )
            buttons.append(
                ActionButton("insertUnorderedList", active=state.unordered_list, disabled=state.title_disabled)
            )
        buttons.append(ActionButton("link", active=self.link))
        buttons.extend(ActionButton("custom", value=name) for name in self.options.custom_action_names)
        return buttons

    def sub_widget_props(self) -> dict[str, Any]:
        """Inputs of the sub-widget shown in the current mode, ``{}`` if none."""
        if self.mode is ToolbarMode.LINK:
            return {"toolbar_mode": self.mode, "anchor_link": self.anchor_link, "selection": self.selection}
        if self.mode is ToolbarMode.COLOR:
            return {"palette": self.options.palette}
        if self.mode is ToolbarMode.IMAGE:
            return {
                "anchor_event": self.anchor_event,
                "img_property_width": self.options.img_property_width,
                "img_property_css_float": self.options.img_property_css_float,
                "containers": self.options.containers,
                "img_anchor": self.options.img_anchor,
                "mobile": self.mobile,
            }
        return {}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_container(self, node: Any) -> bool:
        return is_element(node) and node.name.lower() in self.containers

    def _is_toolbar(self, node: Any) -> bool:
        toolbar_tag = self.options.toolbar_tag.lower()
        current = node
        while current is not None:
            if is_element(current) and current.name.lower() == toolbar_tag:
                return True
            current = getattr(current, "parent", None)
        return False

    def _emit(self, notification_type: str, detail: Any) -> None:
        if not self.notification_callback:
            return

        try:
            self.notification_callback(EditorNotification(type=notification_type, detail=detail))  # type: ignore[arg-type]
        except Exception as e:
            logger.warning(f"Notification callback raised exception: {e}", exc_info=True)
