"""Unit tests for slide element building."""

from types import MappingProxyType

import pytest

from deckedit.ast import ElementNode, TextNode
from deckedit.constants import HTML_PARSERS
from deckedit.exceptions import InvalidOptionsError
from deckedit.options import FragmentOptions, SlideOptions
from deckedit.parsers.slides import Slide, SlideElementBuilder, SlideTemplate, parse_slide


@pytest.mark.unit
class TestSlideTag:
    """Tests for template to tag resolution."""

    @pytest.mark.parametrize(
        "template, tag",
        [
            ("title", "deckgo-slide-title"),
            ("content", "deckgo-slide-content"),
            ("split", "deckgo-slide-split"),
            ("gif", "deckgo-slide-gif"),
            ("TITLE", "deckgo-slide-title"),
            (" Split ", "deckgo-slide-split"),
            (SlideTemplate.GIF, "deckgo-slide-gif"),
        ],
    )
    def test_known_templates(self, template, tag) -> None:
        """Test the default template table, case-insensitively."""
        assert SlideElementBuilder().slide_tag(template) == tag

    @pytest.mark.parametrize("template", [None, "", "chart", "youtube"])
    def test_unknown_templates(self, template) -> None:
        """Test that unknown or missing templates have no tag."""
        assert SlideElementBuilder().slide_tag(template) is None

    def test_custom_template_table(self) -> None:
        """Test a configured template table."""
        options = SlideOptions(slide_tags=MappingProxyType({"Chart": "deckgo-slide-chart"}))
        builder = SlideElementBuilder(options)
        assert builder.slide_tag("chart") == "deckgo-slide-chart"
        assert builder.slide_tag("title") is None


@pytest.mark.unit
class TestBuild:
    """Tests for SlideElementBuilder.build."""

    def test_title_slide(self) -> None:
        """Test a complete title slide."""
        element = SlideElementBuilder().build(
            "title",
            '<h1 slot="title">Hello</h1><p slot="content">World</p>',
            {"style": "background: black; color: white", "src": "bg.png"},
            slide_id="abc",
        )

        assert element.tag == "deckgo-slide-title"
        assert element.attributes == {"slide_id": "abc", "src": "bg.png"}
        assert element.style == {"background": "black", "color": "white"}
        assert [child.tag for child in element.children] == ["h1", "p"]
        assert element.children[0].attributes == {"slot": "title", "contenteditable": "true"}

    def test_unknown_template_returns_none(self) -> None:
        """Test that unknown templates build nothing."""
        assert SlideElementBuilder().build("chart", "<p>x</p>", {}) is None
        assert SlideElementBuilder().build(None, "<p>x</p>", {}) is None

    def test_without_content_or_attributes(self) -> None:
        """Test a slide with no body and no attributes."""
        element = SlideElementBuilder().build("content", None)

        assert element == ElementNode(tag="deckgo-slide-content", attributes={}, style=None, children=())

    def test_empty_src_is_not_emitted(self) -> None:
        """Test that src is only passed through when set."""
        element = SlideElementBuilder().build("gif", "x", {"src": ""})
        assert "src" not in element.attributes
        assert element.children == (TextNode("x"),)

    def test_empty_style_gives_none(self) -> None:
        """Test that an empty style attribute leaves style unset."""
        assert SlideElementBuilder().build("split", "x", {"style": ""}).style is None

    def test_other_slide_attributes_ignored(self) -> None:
        """Test that only style and src are taken from slide attributes."""
        element = SlideElementBuilder().build("title", "x", {"class": "dark", "src": "a.gif"})
        assert element.attributes == {"src": "a.gif"}

    def test_wrong_options_type(self) -> None:
        """Test that plain fragment options are rejected."""
        with pytest.raises(InvalidOptionsError):
            SlideElementBuilder(FragmentOptions())


@pytest.mark.unit
class TestParseSlide:
    """Tests for Slide and parse_slide."""

    def test_from_stored_dict(self) -> None:
        """Test building from the stored JSON form of a slide."""
        element = parse_slide(
            {
                "id": "s1",
                "template": "content",
                "content": "<h2 slot='title'>Agenda</h2>",
                "attributes": {"style": "color: red"},
            }
        )

        assert element.tag == "deckgo-slide-content"
        assert element.get("slide_id") == "s1"
        assert element.style == {"color": "red"}
        assert element.children[0].text == "Agenda"

    def test_from_slide_dataclass(self) -> None:
        """Test building from a Slide value."""
        slide = Slide(id="s2", template="gif", content="<p>Loop</p>")
        element = parse_slide(slide)
        assert element.tag == "deckgo-slide-gif"
        assert element.get("slide_id") == "s2"

    def test_missing_slide(self) -> None:
        """Test that a missing slide builds nothing."""
        assert parse_slide(None) is None

    def test_from_dict_tolerates_bad_attributes(self) -> None:
        """Test that non-mapping attributes are dropped."""
        slide = Slide.from_dict({"template": "title", "attributes": ["style"]})
        assert slide.attributes == {}
        assert slide.id is None


@pytest.mark.unit
@pytest.mark.parametrize("html_parser", HTML_PARSERS)
def test_slide_children_with_each_tree_builder(html_parser) -> None:
    """Test that slide children are the content's top-level nodes for every tree builder."""
    if html_parser != "html.parser":
        pytest.importorskip(html_parser)

    element = parse_slide(
        {"id": "s1", "template": "content", "content": "<h2>Hi</h2> there"},
        SlideOptions(html_parser=html_parser),
    )

    assert element.tag == "deckgo-slide-content"
    assert [getattr(child, "tag", None) for child in element.children] == ["h2", None]
    assert element.children[1] == TextNode(" there")
