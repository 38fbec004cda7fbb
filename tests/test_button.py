"""Tests for ButtonComponent."""

import pytest

from tabler_components import ButtonComponent, ButtonVariant, ComponentArgumentError, Markup

from .helpers import assert_contains, parse_html


def _anchor(button):
    return parse_html(button.render()).a


class TestButtonClasses:
    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({}, "btn btn-primary"),
            ({"color": "danger"}, "btn btn-danger"),
            ({"color": ""}, "btn"),
            ({"color": None}, "btn"),
            ({"size": "sm"}, "btn btn-primary btn-sm"),
            ({"size": "lg", "color": "success"}, "btn btn-success btn-lg"),
            ({"variant": "ghost"}, "btn btn-ghost-primary"),
            ({"variant": ButtonVariant.GHOST, "color": "secondary"}, "btn btn-ghost-secondary"),
            ({"variant": "solid"}, "btn btn-primary"),
            ({"full_width": True}, "btn btn-primary w-100"),
            ({"class_": "ms-auto"}, "ms-auto btn btn-primary"),
            (
                {"class_": "ms-auto", "size": "sm", "full_width": True},
                "ms-auto btn btn-primary btn-sm w-100",
            ),
        ],
    )
    def test_classes(self, kwargs, expected) -> None:
        assert ButtonComponent("Go", **kwargs).classes() == expected

    def test_unknown_variant(self) -> None:
        with pytest.raises(ComponentArgumentError, match="Unknown button variant"):
            ButtonComponent("Go", variant="outline")

    def test_icon_only_button(self, icons) -> None:
        assert ButtonComponent("", icon="search").classes() == "btn btn-primary btn-icon"
        assert ButtonComponent(None, icon="search").classes() == "btn btn-primary btn-icon"

    def test_labelled_icon_button(self, icons) -> None:
        assert ButtonComponent("Back", icon="arrow-left").classes() == "btn btn-primary"


class TestButtonRender:
    def test_exact_markup(self) -> None:
        button = ButtonComponent("Save", url="/save", color="success")
        assert button.render() == '<a href="/save" class="btn btn-success">Save</a>'

    def test_default_url(self) -> None:
        assert _anchor(ButtonComponent("Go"))["href"] == "#"

    def test_label_escaped(self) -> None:
        assert_contains(ButtonComponent("<Save>").render(), "&lt;Save&gt;")

    def test_markup_label_trusted(self) -> None:
        assert_contains(ButtonComponent(Markup("<b>Save</b>")).render(), "<b>Save</b>")

    def test_extra_attributes(self) -> None:
        anchor = _anchor(
            ButtonComponent(
                "Delete",
                url="/items/1",
                data={"turbo_method": "delete", "turbo_confirm": "Sure?"},
                aria_label="Delete item",
                target="_blank",
            )
        )
        assert anchor["data-turbo-method"] == "delete"
        assert anchor["data-turbo-confirm"] == "Sure?"
        assert anchor["aria-label"] == "Delete item"
        assert anchor["target"] == "_blank"

    def test_content_follows_label(self) -> None:
        button = ButtonComponent("Inbox").with_content(Markup('<span class="badge">4</span>'))
        assert button.render().endswith('Inbox<span class="badge">4</span></a>')

    def test_icon_before_label(self, icons) -> None:
        anchor = _anchor(ButtonComponent("Back", url="/", icon="arrow-left"))
        svg = anchor.find("svg")
        assert svg is not None
        assert svg["width"] == "20"
        assert "me-2" in svg["class"]
        assert "icon-tabler-arrow-left" in svg["class"]
        assert anchor.get_text() == "Back"
        assert str(anchor).index("<svg") < str(anchor).index("Back")

    def test_icon_only_has_no_margin(self, icons) -> None:
        anchor = _anchor(ButtonComponent("", icon="settings"))
        svg = anchor.find("svg")
        assert "me-2" not in svg["class"]
        assert "btn-icon" in anchor["class"]

    def test_missing_icon_renders_placeholder(self, icons) -> None:
        html = ButtonComponent("Oops", icon="zz-unknown").render()
        assert_contains(html, "<title>Icon not found: zz-unknown</title>", "Oops")

    def test_no_icon_tag_without_icon(self) -> None:
        assert ButtonComponent("Go").icon_tag() is None
