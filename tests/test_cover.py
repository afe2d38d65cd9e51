"""Tests for the Cover builder and the RenderedCover handle.

WHY: The builder is the main entry point for renderers, the CLI and the API.
Option validation, colour presets and the width-dependent font size have to
behave the same no matter which surface drives them.

HOW: Tests chain builder calls, render, and inspect the handle's fields.
"""

import logging

import pytest

from coverize.core.cover import Cover, RenderedCover, background_css, compute_font_size
from coverize.presets import COLOR_PRESETS, DEFAULT_GRADIENT, find_preset


class TestComputeFontSize:
    @pytest.mark.parametrize("width,size,expected", [
        (200, "regular", 1.0),
        (100, "regular", 0.5),
        (10, "regular", 0.3),
        (1000, "regular", 2.5),
        (400, "large", 3.0),
        (200, "small", 0.5),
        (300, "regular", 1.5),
    ])
    def test_values(self, width, size, expected):
        assert compute_font_size(width, size) == pytest.approx(expected)

    def test_unknown_size_uses_regular(self):
        assert compute_font_size(200, "gigantic") == 1.0


class TestBackground:
    def test_gradient(self):
        assert background_css(("#fff", "#000")) == "linear-gradient(165deg, #fff -25%, #000 125%)"

    def test_flat(self):
        assert background_css(("teal",)) == "teal"

    def test_default(self):
        assert background_css(()) == DEFAULT_GRADIENT


class TestCoverBuilder:
    def test_gatsby_handle(self, gatsby_cover):
        assert isinstance(gatsby_cover, RenderedCover)
        assert [l.text for l in gatsby_cover.title_lines] == ["The", "Great", "Gatsby"]
        assert [l.text for l in gatsby_cover.author_lines] == ["F. Scott Fitzgerald"]
        assert gatsby_cover.colors == COLOR_PRESETS[3]
        assert gatsby_cover.effects == {"realism": True, "texture": False, "depth": False}
        assert gatsby_cover.font_size_rem == 1.0
        assert gatsby_cover.width == 200

    def test_setters_chain(self):
        cover = Cover()
        assert cover.title("A") is cover
        assert cover.author("B") is cover
        assert cover.color(1) is cover
        assert cover.effects(depth=True) is cover
        assert cover.options(font="serif") is cover
        assert cover.image("cover.png") is cover

    def test_preset_background(self):
        cover = Cover().color(0)
        assert cover.background_css() == "linear-gradient(165deg, #e6fdf5 -25%, #2c3861 125%)"

    def test_two_colours(self):
        handle = Cover().title("X").color("red", "blue").render()
        assert handle.colors == ("red", "blue")
        assert handle.background == "linear-gradient(165deg, red -25%, blue 125%)"

    def test_single_colour(self):
        assert Cover().color("#123456").background_css() == "#123456"

    def test_no_colour_is_default_gradient(self):
        assert Cover().title("X").render().background == DEFAULT_GRADIENT

    def test_out_of_range_preset_warns_and_clears(self, caplog):
        cover = Cover().color(2)
        with caplog.at_level(logging.WARNING, logger="coverize.core.cover"):
            cover.color(99)
        assert "Color preset 99 not found" in caplog.text
        assert cover.background_css() == DEFAULT_GRADIENT

    def test_negative_preset_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="coverize.core.cover"):
            Cover().color(-1)
        assert "Valid presets are 0-11" in caplog.text

    def test_size_shortcut(self):
        handle = Cover().title("X").size("large").render(width=200)
        assert handle.options["size"] == "large"
        assert handle.font_size_rem == 1.5

    def test_image_kept(self):
        handle = Cover().title("X").image("https://example.com/a.jpg").render()
        assert handle.image == "https://example.com/a.jpg"

    def test_render_snapshot_is_independent(self):
        cover = Cover().title("Moby Dick").effects(texture=True)
        handle = cover.render()
        cover.title("Other").effects(texture=False).color(1)
        assert handle.title == "Moby Dick"
        assert handle.effects["texture"] is True
        assert handle.colors == ()

    def test_empty_cover_renders_no_lines(self):
        assert Cover().render().lines == []


class TestCoverValidation:
    @pytest.mark.parametrize("opts", [
        {"font": "comic"},
        {"emphasis": "italic"},
        {"size": "huge"},
        {"ratio": 0},
        {"ratio": -1.5},
        {"ratio": "tall"},
        {"ratio": True},
        {"ratio": float("nan")},
        {"ratio": float("inf")},
        {"colour": "red"},
    ])
    def test_bad_options(self, opts):
        with pytest.raises(ValueError):
            Cover().options(**opts)

    def test_unknown_effect(self):
        with pytest.raises(ValueError, match="Unknown effect 'sparkle'"):
            Cover().effects(sparkle=True)

    @pytest.mark.parametrize("width", [0, -10, float("inf"), float("nan")])
    def test_render_rejects_bad_width(self, width):
        with pytest.raises(ValueError, match="width must be positive"):
            Cover().title("X").render(width=width)

    def test_non_string_title_raises_type_error(self):
        with pytest.raises(TypeError):
            Cover().title(123).render()

    def test_find_preset(self):
        assert find_preset("honey chapel") == 3
        with pytest.raises(ValueError, match="Unknown color preset"):
            find_preset("Neon Dream")


class TestResize:
    def test_resize_updates_font_size(self, gatsby_cover):
        assert gatsby_cover.resize(400) == 2.0
        assert gatsby_cover.width == 400
        assert gatsby_cover.font_size_rem == 2.0

    def test_resize_clamps(self, gatsby_cover):
        assert gatsby_cover.resize(5000) == 2.5
        assert gatsby_cover.resize(1) == 0.3

    @pytest.mark.parametrize("width", [0, -50, float("inf"), float("nan")])
    def test_unusable_width_keeps_previous_size(self, gatsby_cover, width):
        gatsby_cover.resize(300)
        assert gatsby_cover.resize(width) == 1.5
        assert gatsby_cover.width == 300
