"""Unit tests for the options dataclasses."""

import dataclasses

import pytest

from deckedit.constants import DEFAULT_SLIDE_TAGS
from deckedit.options import FragmentOptions, InlineEditorOptions, SlideOptions
from deckedit.options.editor import split_names


@pytest.mark.unit
class TestInlineEditorOptions:
    """Tests for InlineEditorOptions."""

    def test_defaults(self) -> None:
        """Test the default configuration."""
        options = InlineEditorOptions()

        assert options.container_names == frozenset({"h1", "h2", "h3", "h4", "h5", "h6", "div"})
        assert options.attach_to is None
        assert options.mobile is None
        assert options.list is True
        assert options.img_editable is False
        assert options.img_anchor == "img"
        assert options.custom_action_names == ()
        assert options.display_debounce == pytest.approx(0.3)
        assert options.sticky_scroll_interval == pytest.approx(0.05)

    def test_names_are_split_and_normalized(self) -> None:
        """Test comma separated container and custom action names."""
        options = InlineEditorOptions(containers=" H1, section ,, ", custom_actions="share, , delete")

        assert options.container_names == frozenset({"h1", "section"})
        assert options.custom_action_names == ("share", "delete")

    def test_frozen_and_create_updated(self) -> None:
        """Test immutability and cloning with changes."""
        options = InlineEditorOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.list = False  # type: ignore[misc]

        updated = options.create_updated(list=False, sticky_mobile=True)
        assert updated.list is False
        assert updated.sticky_mobile is True
        assert options.list is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"containers": " , "},
            {"img_anchor": ""},
            {"toolbar_width": -1},
            {"display_debounce": -0.1},
            {"image_activation_delay": -1},
        ],
    )
    def test_invalid_values(self, overrides) -> None:
        """Test validation in __post_init__."""
        with pytest.raises(ValueError):
            InlineEditorOptions(**overrides)

    def test_fields_have_help(self) -> None:
        """Test that every field documents itself."""
        for field in dataclasses.fields(InlineEditorOptions):
            assert field.metadata.get("help"), field.name

    def test_field_help(self) -> None:
        """Test the field documentation map, in declaration order."""
        help_map = InlineEditorOptions.field_help()

        assert list(help_map) == [field.name for field in dataclasses.fields(InlineEditorOptions)]
        assert help_map["sticky_mobile"] == "Sticky toolbar on mobile"

    def test_create_updated_validates(self) -> None:
        """Test that copies are validated like new instances."""
        with pytest.raises(ValueError):
            InlineEditorOptions().create_updated(toolbar_width=-1)
        with pytest.raises(TypeError):
            InlineEditorOptions().create_updated(colour="red")


@pytest.mark.unit
class TestFragmentOptions:
    """Tests for FragmentOptions and SlideOptions."""

    def test_unknown_parser(self) -> None:
        """Test that only known tree builders are accepted."""
        with pytest.raises(ValueError, match="html_parser"):
            FragmentOptions(html_parser="xml")

    def test_empty_editable_attribute(self) -> None:
        """Test that the editable marker attribute must be named."""
        with pytest.raises(ValueError):
            FragmentOptions(editable_slot_attribute="")

    def test_slide_tags_default(self) -> None:
        """Test the default template table."""
        assert dict(SlideOptions().slide_tags) == DEFAULT_SLIDE_TAGS

    def test_slide_tags_validated(self) -> None:
        """Test that empty template table entries are rejected."""
        with pytest.raises(ValueError):
            SlideOptions(slide_tags={"title": ""})

    def test_split_names(self) -> None:
        """Test the shared name splitter."""
        assert split_names(None) == ()
        assert split_names("a, b,,c ") == ("a", "b", "c")
