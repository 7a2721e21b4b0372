#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/editor/test_inspector.py
"""Unit tests for formatting state computation.

Tests cover:
- Text anchors start the walk at their parent element
- OR accumulation of bold/italic/underline and list membership
- First-found alignment and color
- Container start nodes and container ancestors
- Document root termination

"""

import pytest
from bs4 import BeautifulSoup

from deckedit.editor.enums import ContentAlign
from deckedit.editor.events import PointerEvent
from deckedit.editor.inspector import (
    DEFAULT_FORMAT_STATE,
    FormatState,
    compute_format_state,
    is_anchor_image,
    is_bold,
    is_link,
    normalize_containers,
)

CONTAINERS = "h1,h2,h3,h4,h5,h6,div"


def _text(markup: str, text: str):
    soup = BeautifulSoup(markup, "html.parser")
    return soup.find(string=lambda s: text in s)


@pytest.mark.unit
class TestComputeFormatState:
    """Tests for compute_format_state."""

    def test_italic_inside_colored_container(self) -> None:
        """Test the container color lookup after an inline walk."""
        anchor = _text('<div style="color:blue"><i>word</i></div>', "word")

        state = compute_format_state({"div"}, anchor)

        assert state.italic is True
        assert state.color == "blue"
        assert state.bold is False
        assert state.alignment is ContentAlign.LEFT
        assert state.title_disabled is False

    def test_container_is_not_a_formatting_ancestor(self) -> None:
        """Test that inline formatting on the container itself is not read."""
        anchor = _text('<div style="font-weight: bold; text-align: center"><i>word</i></div>', "word")

        state = compute_format_state("div", anchor)

        assert state.bold is False
        assert state.alignment is ContentAlign.LEFT

    def test_none_anchor(self) -> None:
        """Test that a missing anchor yields the defaults."""
        assert compute_format_state(CONTAINERS, None) == DEFAULT_FORMAT_STATE

    def test_or_accumulation(self) -> None:
        """Test that flags set anywhere on the walk stay set."""
        anchor = _text("<div><ul><li><b><u><em>x</em></u></b></li></ul></div>", "x")

        state = compute_format_state(CONTAINERS, anchor)

        assert (state.bold, state.italic, state.underline) == (True, True, True)
        assert state.unordered_list is True
        assert state.ordered_list is False

    def test_nested_lists(self) -> None:
        """Test list membership through nested ordered and unordered lists."""
        anchor = _text("<div><ol><li><ul><li>x</li></ul></li></ol></div>", "x")

        state = compute_format_state(CONTAINERS, anchor)

        assert state.ordered_list is True
        assert state.unordered_list is True

    def test_first_alignment_wins(self) -> None:
        """Test that the nearest alignment is reported."""
        anchor = _text('<div><p style="text-align: right"><span style="text-align:center">x</span></p></div>', "x")
        assert compute_format_state(CONTAINERS, anchor).alignment is ContentAlign.CENTER

    def test_first_color_wins_and_style_beats_font(self) -> None:
        """Test color precedence on the walk and on one element."""
        anchor = _text('<div><span style="color: red"><font color="green">x</font></span></div>', "x")
        assert compute_format_state(CONTAINERS, anchor).color == "green"

        anchor = _text('<div><font color="green" style="color: red">x</font></div>', "x")
        assert compute_format_state(CONTAINERS, anchor).color == "red"

    def test_style_based_formatting(self) -> None:
        """Test formatting expressed through inline styles."""
        anchor = _text(
            '<div><span style="font-weight: 700; font-style: oblique; text-decoration: underline wavy">x</span></div>',
            "x",
        )

        state = compute_format_state(CONTAINERS, anchor)

        assert (state.bold, state.italic, state.underline) == (True, True, True)

    def test_anchor_directly_in_title_container(self) -> None:
        """Test a text anchor whose parent is a heading container."""
        anchor = _text('<h1 style="color: purple; font-weight: bold">Title</h1>', "Title")

        state = compute_format_state(CONTAINERS, anchor)

        assert state == FormatState(color="purple", title_disabled=True)

    def test_formatting_inside_title(self) -> None:
        """Test that the title flag is set when the walk reaches a heading."""
        anchor = _text("<h2><b>Bold title</b></h2>", "Bold")

        state = compute_format_state(CONTAINERS, anchor)

        assert state.bold is True
        assert state.title_disabled is True

    def test_walk_stops_at_document_root(self) -> None:
        """Test that a walk without containers ends at body/html."""
        anchor = _text('<html><body style="color: red"><p><i>x</i></p></body></html>', "x")

        state = compute_format_state(CONTAINERS, anchor)

        assert state.italic is True
        assert state.color is None

    def test_walk_stops_at_nearest_container(self) -> None:
        """Test that formatting above the nearest container is ignored."""
        anchor = _text("<b><div><span>x</span></div></b>", "x")
        assert compute_format_state(CONTAINERS, anchor).bold is False

    def test_result_is_fresh_per_call(self) -> None:
        """Test that repeated calls do not share state."""
        bold = _text("<div><b>x</b></div>", "x")
        plain = _text("<div><span>y</span></div>", "y")

        assert compute_format_state(CONTAINERS, bold).bold is True
        assert compute_format_state(CONTAINERS, plain).bold is False


@pytest.mark.unit
class TestHelpers:
    """Tests for the node predicates."""

    @pytest.mark.parametrize(
        "markup, expected",
        [
            ("<b>x</b>", True),
            ("<strong>x</strong>", True),
            ('<span style="font-weight: bolder">x</span>', True),
            ('<span style="font-weight: 600">x</span>', True),
            ('<span style="font-weight: 400">x</span>', False),
            ('<span style="font-weight: normal">x</span>', False),
        ],
    )
    def test_is_bold(self, markup, expected) -> None:
        """Test bold detection."""
        assert is_bold(BeautifulSoup(markup, "html.parser").find()) is expected

    def test_is_link(self) -> None:
        """Test link detection from text and element anchors."""
        soup = BeautifulSoup('<p><a href="#">x</a> y</p>', "html.parser")
        assert is_link(soup.a.string) is True
        assert is_link(soup.a) is True
        assert is_link(soup.p.contents[1]) is False
        assert is_link(None) is False

    def test_is_anchor_image(self) -> None:
        """Test image anchor detection on pointer events."""
        soup = BeautifulSoup('<p><img src="a.png"> text</p>', "html.parser")
        assert is_anchor_image(PointerEvent(target=soup.img), "img") is True
        assert is_anchor_image(PointerEvent(target=soup.p), "img") is False
        assert is_anchor_image(None, "img") is False

    def test_normalize_containers(self) -> None:
        """Test container name normalization."""
        assert normalize_containers(" H1 ,div,,") == frozenset({"h1", "div"})
        assert normalize_containers(["SECTION"]) == frozenset({"section"})
