#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/editor/document.py
"""Host document model for the inline editor.

The editor only talks to its host through :class:`HostDocument` and
:class:`Viewport`. :class:`SoupDocument` is a host backed by a BeautifulSoup
tree: it keeps a live selection and an active element, dispatches
``mousedown``/``touchstart``/``selectionchange`` to registered listeners and
implements the formatting commands the toolbar issues, for selections
contained in a single text node.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from deckedit.constants import DEFAULT_CONTAINERS, DEFAULT_HTML_PARSER, DOCUMENT_ROOT_TAGS
from deckedit.editor.events import AnchorEvent, EventTarget, Listener
from deckedit.options.editor import split_names
from deckedit.parsers.style import format_style_declarations, parse_style_declarations

logger = logging.getLogger(__name__)

INLINE_TAGS = frozenset({"a", "b", "strong", "i", "em", "u", "span", "font", "small", "sub", "sup", "code"})


def is_text_node(node: Any) -> bool:
    """True for character data (comments and doctypes excluded)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_element(node: Any) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def is_document_root(node: Any) -> bool:
    """True for the document itself and for ``html``/``body``."""
    if isinstance(node, BeautifulSoup):
        return True
    name = getattr(node, "name", None)
    return isinstance(name, str) and name.lower() in DOCUMENT_ROOT_TAGS


def contains(root: Any, node: Any) -> bool:
    """True when ``node`` is ``root`` or one of its descendants."""
    if root is None or node is None:
        return False
    if node is root:
        return True
    return any(parent is root for parent in getattr(node, "parents", ()))


@dataclass(frozen=True)
class Range:
    """A selected run of characters inside one node.

    Parameters
    ----------
    node : Any
        Text node (or element, in which case its text is used)
    start_offset, end_offset : int
        Character offsets, ``start_offset <= end_offset``

    """

    node: Any
    start_offset: int
    end_offset: int

    @property
    def collapsed(self) -> bool:
        return self.start_offset >= self.end_offset

    @property
    def text(self) -> str:
        source = str(self.node) if is_text_node(self.node) else self.node.get_text()
        return source[self.start_offset : self.end_offset]


class Selection:
    """Live document selection.

    The host document replaces the range as commands mutate the tree, so
    ``anchor_node`` always reflects the current document.
    """

    def __init__(self) -> None:
        self._range: Optional[Range] = None

    @property
    def range_count(self) -> int:
        return 1 if self._range is not None else 0

    def get_range_at(self, index: int) -> Range:
        if self._range is None or index != 0:
            raise IndexError(f"No range at index {index}")
        return self._range

    @property
    def anchor_node(self) -> Any:
        return self._range.node if self._range is not None else None

    @property
    def is_collapsed(self) -> bool:
        return self._range is None or self._range.collapsed

    @property
    def text(self) -> str:
        return self._range.text if self._range is not None else ""

    def to_string(self) -> str:
        return self.text

    def set_range(self, range_: Optional[Range]) -> None:
        self._range = range_

    def remove_all_ranges(self) -> None:
        self._range = None

    def __repr__(self) -> str:
        return f"Selection({self.text!r})"


@dataclass(frozen=True)
class AnchorLink:
    """Selection snapshot captured when the toolbar activates.

    Parameters
    ----------
    range : Range
        The selected range
    text : str
        Selected text at activation time
    element : Any
        Element holding focus at activation time

    """

    range: Range
    text: str
    element: Any


@runtime_checkable
class HostDocument(Protocol):
    """What the inline editor needs from its host document."""

    active_element: Any

    def get_selection(self) -> Optional[Selection]: ...

    def clear_selection(self) -> None: ...

    def blur_active_element(self) -> None: ...

    def exec_command(self, command: str, value: Optional[str] = None) -> bool: ...

    def replace_with_text(self, element: Any) -> Any: ...

    def add_event_listener(self, event_type: str, listener: Listener, root: Any = None) -> None: ...

    def remove_event_listener(self, event_type: str, listener: Listener, root: Any = None) -> None: ...


class Viewport(EventTarget):
    """Visible area of the host window.

    Parameters
    ----------
    inner_width : float
        Layout viewport width in pixels
    screen_width : float, optional
        Device screen width; used instead of ``inner_width`` on iOS
    scroll_y : float
        Vertical scroll offset
    mobile, ios : bool
        Device detection results

    """

    def __init__(
        self,
        inner_width: float = 1024,
        screen_width: Optional[float] = None,
        scroll_y: float = 0,
        mobile: bool = False,
        ios: bool = False,
    ):
        super().__init__()
        self.inner_width = inner_width
        self.screen_width = screen_width if screen_width is not None else inner_width
        self.scroll_y = scroll_y
        self.mobile = mobile
        self.ios = ios

    @property
    def width(self) -> float:
        """Width the toolbar must fit into."""
        return self.screen_width if self.ios else self.inner_width

    def scroll_to(self, scroll_y: float) -> None:
        self.scroll_y = scroll_y
        self.dispatch_event("scroll")

    def resize(self, inner_width: float, screen_width: Optional[float] = None) -> None:
        self.inner_width = inner_width
        if screen_width is not None:
            self.screen_width = screen_width
        self.dispatch_event("resize")


class SoupDocument(EventTarget):
    """Host document backed by a BeautifulSoup tree.

    Parameters
    ----------
    markup : str
        Document markup
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder
    containers : str or Iterable[str]
        Structural containers; block formatting (alignment, lists) applies
        to the child of the nearest container that holds the selection

    Examples
    --------
        >>> doc = SoupDocument('<div contenteditable="true">Hello world</div>')
        >>> doc.focus(doc.soup.div)
        >>> doc.select_text("world")
        >>> doc.exec_command("bold")
        True
        >>> doc.to_html()
        '<div contenteditable="true">Hello <b>world</b></div>'

    """

    def __init__(
        self,
        markup: str = "",
        html_parser: str = DEFAULT_HTML_PARSER,
        containers: str | Iterable[str] = DEFAULT_CONTAINERS,
    ):
        super().__init__()
        self.soup = BeautifulSoup(markup, html_parser, multi_valued_attributes=None)
        names = split_names(containers) if isinstance(containers, str) else tuple(containers)
        self.containers = frozenset(name.lower() for name in names)
        self.active_element: Any = None
        self._selection = Selection()

    # ------------------------------------------------------------------
    # Focus and selection
    # ------------------------------------------------------------------

    def focus(self, element: Any) -> None:
        self.active_element = element

    def blur_active_element(self) -> None:
        self.active_element = None

    def get_selection(self) -> Selection:
        return self._selection

    def select(self, node: Any, start: int = 0, end: Optional[int] = None) -> None:
        """Select characters ``start:end`` of ``node`` and notify listeners."""
        length = len(str(node)) if is_text_node(node) else len(node.get_text())
        end = length if end is None else min(end, length)
        start = max(0, min(start, end))
        self._selection.set_range(Range(node, start, end))
        self.dispatch_event("selectionchange")

    def select_text(self, text: str, root: Any = None) -> None:
        """Select the first occurrence of ``text`` inside a single text node.

        Raises
        ------
        ValueError
            If no text node contains ``text``

        """
        for node in (root or self.soup).find_all(string=True):
            if not is_text_node(node):
                continue
            index = str(node).find(text)
            if index >= 0:
                self.select(node, index, index + len(text))
                return
        raise ValueError(f"Text not found in document: {text!r}")

    def collapse_selection(self) -> None:
        """Collapse the selection to its start, as a plain click does."""
        if self._selection.range_count:
            current = self._selection.get_range_at(0)
            self.select(current.node, current.start_offset, current.start_offset)

    def clear_selection(self) -> None:
        if self._selection.range_count:
            self._selection.remove_all_ranges()
            self.dispatch_event("selectionchange")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def dispatch_pointer(self, event: AnchorEvent) -> int:
        """Deliver a ``mousedown``/``touchstart`` to the listeners it reaches."""
        return self.dispatch_event(event.type, event)

    def _listener_applies(self, root: Any, event: Any) -> bool:
        if root is None:
            return True
        return contains(root, getattr(event, "target", None))

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------

    def contains(self, root: Any, node: Any) -> bool:
        return contains(root, node)

    def is_container(self, node: Any) -> bool:
        return is_element(node) and node.name.lower() in self.containers

    def to_html(self) -> str:
        return str(self.soup)

    def replace_with_text(self, element: Any) -> Any:
        """Replace ``element`` by a text node holding its text content."""
        if not is_element(element) or element.parent is None:
            return None
        text = NavigableString(element.get_text())
        had_selection = contains(element, self._selection.anchor_node)
        element.replace_with(text)
        if had_selection:
            self._selection.set_range(Range(text, 0, len(text)))
        return text

    # ------------------------------------------------------------------
    # Formatting commands
    # ------------------------------------------------------------------

    _COMMANDS = {
        "bold": ("_toggle_inline", ("b", "strong")),
        "italic": ("_toggle_inline", ("i", "em")),
        "underline": ("_toggle_inline", ("u",)),
        "justifyLeft": ("_justify", "left"),
        "justifyCenter": ("_justify", "center"),
        "justifyRight": ("_justify", "right"),
        "justifyFull": ("_justify", "justify"),
        "insertOrderedList": ("_toggle_list", "ol"),
        "insertUnorderedList": ("_toggle_list", "ul"),
    }

    def exec_command(self, command: str, value: Optional[str] = None) -> bool:
        """Apply a formatting command to the current selection.

        Returns
        -------
        bool
            False when the command is unknown or there is nothing to format

        """
        if self._selection.is_collapsed or not is_text_node(self._selection.anchor_node):
            return False

        if command == "foreColor":
            return self._fore_color(value)

        entry = self._COMMANDS.get(command)
        if entry is None:
            logger.debug("Unsupported command %r", command)
            return False

        handler_name, argument = entry
        return getattr(self, handler_name)(argument)

    def _split_selected(self) -> NavigableString:
        # Isolate the selected characters in their own text node
        current = self._selection.get_range_at(0)
        node = current.node
        text = str(node)
        if current.start_offset == 0 and current.end_offset == len(text):
            return node

        selected = NavigableString(text[current.start_offset : current.end_offset])
        node.replace_with(selected)
        if current.start_offset > 0:
            selected.insert_before(NavigableString(text[: current.start_offset]))
        if current.end_offset < len(text):
            selected.insert_after(NavigableString(text[current.end_offset :]))
        self._selection.set_range(Range(selected, 0, len(selected)))
        return selected

    def _toggle_inline(self, names: tuple[str, ...]) -> bool:
        node = self._selection.anchor_node
        parent = node.parent
        if is_element(parent) and parent.name.lower() in names:
            parent.unwrap()
            return True

        selected = self._split_selected()
        selected.wrap(self.soup.new_tag(names[0]))
        return True

    def _fore_color(self, value: Optional[str]) -> bool:
        if not value:
            return False
        selected = self._split_selected()
        selected.wrap(self.soup.new_tag("font", attrs={"color": value}))
        return True

    def _block_of(self, node: Any) -> Any:
        # Child of the nearest container (or body) on the path to node
        child = node
        for parent in node.parents:
            if self.is_container(parent) or is_document_root(parent):
                break
            child = parent

        if is_text_node(child) or (is_element(child) and child.name.lower() in INLINE_TAGS):
            child = child.wrap(self.soup.new_tag("p"))
        return child

    def _justify(self, align: str) -> bool:
        block = self._block_of(self._selection.anchor_node)
        style = parse_style_declarations(block.get("style")) or {}
        style["text-align"] = align
        block["style"] = format_style_declarations(style)
        return True

    def _toggle_list(self, list_tag: str) -> bool:
        node = self._selection.anchor_node
        for parent in node.parents:
            if self.is_container(parent) or is_document_root(parent):
                break
            if parent.name == "li" and is_element(parent.parent) and parent.parent.name == list_tag:
                list_element = parent.parent
                parent.unwrap()
                if list_element.find("li", recursive=False) is None:
                    list_element.unwrap()
                return True

        block = self._block_of(node)
        item = block.wrap(self.soup.new_tag("li"))
        item.wrap(self.soup.new_tag(list_tag))
        return True
