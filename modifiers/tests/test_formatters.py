"""Tests for the resize, border and flags formatters."""

from modifiers.formatters import border, flags_value, resize
from modifiers.value_objects import BorderSpec, ResizeSpec


class TestResize:
    """Tests for resize()."""

    def test_all_options(self):
        assert resize({"type": "crop", "width": 10, "height": 20}) == "c_crop,w_10,h_20"

    def test_only_type_and_height(self):
        assert resize({"type": "crop", "height": 20}) == "c_crop,h_20"

    def test_only_type_and_string_width(self):
        assert resize({"type": "crop", "width": "10"}) == "c_crop,w_10"

    def test_no_crop_when_only_width_and_height(self):
        assert resize({"width": 10, "height": 10}) == "w_10,h_10"

    def test_type_alone(self):
        assert resize(ResizeSpec(type="thumb")) == "c_thumb"

    def test_empty(self):
        assert resize({}) == ""
        assert resize(None) == ""
        assert resize("w_10") == ""


class TestBorder:
    """Tests for border()."""

    def test_default_type_and_color_if_only_width(self):
        assert border({"width": 10}) == "bo_10px_solid_black"

    def test_all_options(self):
        assert border({"type": "dotted", "color": "blue", "width": 10}) == (
            "bo_10px_dotted_blue"
        )

    def test_string_passthrough(self):
        assert border("4px_inset_red") == "bo_4px_inset_red"

    def test_border_spec(self):
        assert border(BorderSpec(width=3, color="#fff")) == "bo_3px_solid_#fff"

    def test_missing_width(self):
        assert border({"color": "blue"}) is None

    def test_unsupported_value(self):
        assert border(None) is None
        assert border(10) is None


class TestFlags:
    """Tests for flags_value()."""

    def test_string(self):
        assert flags_value("lossy") == "lossy"

    def test_list(self):
        assert flags_value(["attachment", "lossy"]) == "attachment.lossy"

    def test_empty_list(self):
        assert flags_value([]) is None
