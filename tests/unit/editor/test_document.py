"""Unit tests for the BeautifulSoup-backed host document."""

import pytest

from deckedit.editor.document import SoupDocument, Viewport, contains, is_document_root
from deckedit.editor.events import PointerEvent


def _doc(markup: str) -> SoupDocument:
    document = SoupDocument(markup)
    document.focus(document.soup.find(attrs={"contenteditable": True}))
    return document


@pytest.mark.unit
class TestSelection:
    """Tests for selection handling."""

    def test_select_text(self) -> None:
        """Test selecting text inside one text node."""
        document = _doc('<div contenteditable="true">Hello world</div>')
        document.select_text("world")

        selection = document.get_selection()
        assert selection.to_string() == "world"
        assert selection.range_count == 1
        assert str(selection.anchor_node) == "Hello world"
        assert not selection.is_collapsed

    def test_select_text_not_found(self) -> None:
        """Test that selecting missing text raises."""
        with pytest.raises(ValueError):
            _doc("<div>Hello</div>").select_text("bye")

    def test_collapse_and_clear(self) -> None:
        """Test collapsing and clearing the selection."""
        document = _doc("<div>Hello</div>")
        events = []
        document.add_event_listener("selectionchange", events.append)

        document.select_text("ell")
        document.collapse_selection()
        assert document.get_selection().is_collapsed
        assert document.get_selection().range_count == 1

        document.clear_selection()
        document.clear_selection()
        assert document.get_selection().range_count == 0
        assert len(events) == 3

    def test_pointer_listeners_scoped_to_root(self) -> None:
        """Test that rooted pointer listeners ignore events outside their root."""
        document = SoupDocument("<div id='a'><p>in</p></div><p id='b'>out</p>")
        received = []
        document.add_event_listener("mousedown", received.append, root=document.soup.div)

        document.dispatch_pointer(PointerEvent(target=document.soup.find(id="b")))
        document.dispatch_pointer(PointerEvent(target=document.soup.div.p))

        assert len(received) == 1


@pytest.mark.unit
class TestCommands:
    """Tests for exec_command."""

    def test_bold_toggle(self) -> None:
        """Test wrapping and unwrapping bold."""
        document = _doc('<div contenteditable="true">Hello world</div>')
        document.select_text("world")

        assert document.exec_command("bold") is True
        assert document.to_html() == '<div contenteditable="true">Hello <b>world</b></div>'
        assert document.get_selection().anchor_node.parent.name == "b"

        assert document.exec_command("bold") is True
        assert document.soup.find("b") is None
        assert document.soup.div.get_text() == "Hello world"

    def test_italic_and_underline(self) -> None:
        """Test the other inline commands."""
        document = _doc('<div contenteditable="true">abc</div>')
        document.select_text("b")
        document.exec_command("italic")
        document.exec_command("underline")

        assert document.to_html() == '<div contenteditable="true">a<i><u>b</u></i>c</div>'

    def test_collapsed_selection_is_ignored(self) -> None:
        """Test that commands need selected text."""
        document = _doc('<div contenteditable="true">abc</div>')
        document.select_text("b")
        document.collapse_selection()

        assert document.exec_command("bold") is False

    def test_unknown_command(self) -> None:
        """Test that unsupported commands report failure."""
        document = _doc('<div contenteditable="true">abc</div>')
        document.select_text("abc")
        assert document.exec_command("strikeThrough") is False

    def test_justify(self) -> None:
        """Test alignment on the block holding the selection."""
        document = _doc('<div contenteditable="true"><p style="color: red">abc</p></div>')
        document.select_text("abc")

        assert document.exec_command("justifyCenter") is True
        assert document.soup.p["style"] == "color: red; text-align: center"

    def test_justify_wraps_bare_text(self) -> None:
        """Test that bare text in a container gets a paragraph to align."""
        document = _doc('<div contenteditable="true">abc</div>')
        document.select_text("abc")
        document.exec_command("justifyRight")

        assert document.to_html() == '<div contenteditable="true"><p style="text-align: right">abc</p></div>'

    def test_list_toggle(self) -> None:
        """Test creating and removing a list."""
        document = _doc('<div contenteditable="true"><p>abc</p></div>')
        document.select_text("abc")

        document.exec_command("insertOrderedList")
        assert document.to_html() == '<div contenteditable="true"><ol><li><p>abc</p></li></ol></div>'

        document.exec_command("insertOrderedList")
        assert document.to_html() == '<div contenteditable="true"><p>abc</p></div>'

    def test_fore_color(self) -> None:
        """Test the legacy color command."""
        document = _doc('<div contenteditable="true">abc</div>')
        document.select_text("b")

        assert document.exec_command("foreColor", "#ff0000") is True
        assert document.soup.font["color"] == "#ff0000"
        assert document.exec_command("foreColor", None) is False

    def test_replace_with_text(self) -> None:
        """Test unlinking an anchor element."""
        document = _doc('<div contenteditable="true">go <a href="#">here</a></div>')
        document.select_text("here")

        text = document.replace_with_text(document.soup.a)

        assert document.to_html() == '<div contenteditable="true">go here</div>'
        assert document.get_selection().anchor_node is text


@pytest.mark.unit
class TestViewportAndHelpers:
    """Tests for Viewport and tree helpers."""

    def test_viewport_width(self) -> None:
        """Test that iOS uses the screen width."""
        assert Viewport(inner_width=980, screen_width=375).width == 980
        assert Viewport(inner_width=980, screen_width=375, ios=True).width == 375

    def test_viewport_events(self) -> None:
        """Test scroll and resize notifications."""
        viewport = Viewport()
        events = []
        viewport.add_event_listener("scroll", events.append)
        viewport.add_event_listener("resize", events.append)

        viewport.scroll_to(120)
        viewport.resize(800)

        assert viewport.scroll_y == 120
        assert viewport.inner_width == 800
        assert len(events) == 2

    def test_contains_and_root(self) -> None:
        """Test ancestry helpers."""
        document = SoupDocument("<div><p>x</p></div>")
        assert contains(document.soup.div, document.soup.p.string)
        assert not contains(document.soup.p, document.soup.div)
        assert not contains(None, document.soup.p)
        assert is_document_root(document.soup)
        assert not is_document_root(document.soup.div)
