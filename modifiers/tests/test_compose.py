"""Tests for composing option sets into modification lists.

Covers:
- Primary step ordering (resize first, then table order)
- Chained steps as nested groups
- Field table filtering
- Resize field priority
"""

import logging

from modifiers import OptionSet, get_border, get_modifications, get_resize, modify


class TestModify:
    """Tests for modify()."""

    def test_returns_valid_mapping(self):
        """Test that resize comes first, followed by generic fields."""
        options = {
            "width": 500,
            "height": 500,
            "aspectRatio": "16:9",
            "crop": "scale",
        }

        assert modify(options) == ["c_scale,w_500,h_500", "ar_16:9"]

    def test_returns_modifications_with_chained(self, chained_options):
        """Test that chained steps become nested groups in input order."""
        assert modify(chained_options) == [
            "c_scale,w_500,h_500",
            "ar_16:9",
            ["br_12", "e_grayscale"],
            ["bo_1px_dashed_#fff", "e_pixelate"],
        ]

    def test_top_level_border_gets_defaults(self):
        """Test that a width-only border is filled in with solid black."""
        assert "bo_10px_solid_black" in modify({"border": {"width": 10}})

    def test_top_level_border_follows_table_order(self):
        """Test that border lands between aspect ratio and effect."""
        options = {"effect": "sepia", "border": "2px_solid_red", "aspectRatio": "1:1"}

        assert modify(options) == ["ar_1:1", "bo_2px_solid_red", "e_sepia"]

    def test_empty_options(self):
        """Test that no options produce no modifications."""
        assert modify({}) == []
        assert modify(None) == []

    def test_chained_resize_fields_are_ignored(self):
        """Test that size fields inside a chained step produce nothing."""
        options = {
            "width": 100,
            "chaining": [{"width": 20, "crop": "fill", "effect": "blur"}],
        }

        assert modify(options) == ["w_100", ["e_blur"]]

    def test_empty_chained_step_is_skipped(self, caplog):
        """Test that a chained step without tokens is omitted."""
        options = {"effect": "blur", "chaining": [{"unknown": 1}, {"quality": 80}]}

        with caplog.at_level(logging.DEBUG, logger="modifiers.compose"):
            result = modify(options)

        assert result == ["e_blur", ["q_80"]]
        assert "Skipping empty chained step 0" in caplog.text

    def test_malformed_chaining_is_dropped(self):
        """Test that non-sequence chaining degrades to no chained steps."""
        assert modify({"effect": "blur", "chaining": "e_sepia"}) == ["e_blur"]
        assert modify({"effect": "blur", "chaining": [42, {"angle": 90}]}) == [
            "e_blur",
            ["a_90"],
        ]

    def test_nested_chaining_is_not_followed(self):
        """Test that chaining inside a chained step is ignored."""
        options = {
            "chaining": [{"effect": "blur", "chaining": [{"effect": "sepia"}]}],
        }

        assert modify(options) == [["e_blur"]]

    def test_top_level_bit_rate_and_effect_stay_in_primary_step(self):
        """Test that bitRate and effect at top level join the primary step."""
        assert modify({"bitRate": 12, "effect": "blur"}) == ["br_12", "e_blur"]

    def test_chained_crop_is_logged_as_ignored(self, caplog):
        """Test that a crop inside a chained step is dropped with a log record."""
        options = {"chaining": [{"crop": "fill", "effect": "blur"}]}

        with caplog.at_level(logging.DEBUG, logger="modifiers.compose"):
            result = modify(options)

        assert result == [["e_blur"]]
        assert "Ignoring resize fields in chained step 0" in caplog.text

    def test_accepts_option_set(self):
        """Test that typed option sets compose the same as mappings."""
        options = OptionSet(
            width=500,
            aspect_ratio="16:9",
            chaining=(OptionSet(effect="grayscale"),),
        )

        assert modify(options) == ["w_500", "ar_16:9", ["e_grayscale"]]

    def test_is_repeatable(self, chained_options):
        """Test that identical input yields identical output."""
        assert modify(chained_options) == modify(chained_options)


class TestGetBorder:
    """Tests for get_border()."""

    def test_default_color_and_type_if_only_width(self):
        """Test defaults are applied when only width is given."""
        assert get_border({"border": {"width": 10}}) == "bo_10px_solid_black"

    def test_string_border_is_passed_through(self):
        """Test a raw string border only gains the prefix."""
        assert get_border({"border": "10px_dotted_black"}) == "bo_10px_dotted_black"

    def test_missing_border(self):
        """Test that no border field yields no token."""
        assert get_border({"width": 10}) is None

    def test_border_without_width(self):
        """Test that a structured border without width is omitted."""
        assert get_border({"border": {"type": "dotted"}}) is None


class TestGetModifications:
    """Tests for get_modifications()."""

    def test_only_returns_valid_fields(self):
        """Test that unknown fields are silently ignored."""
        options = {
            "bitRate": 12,
            "cloudName": "demo",
            "customFunction": "func",
            "fetchFormat": "auto",
            "fallbackContent": "<div>hello</div>",
        }

        assert get_modifications(options) == ["br_12", "fn_func", "f_auto"]

    def test_order_ignores_input_order(self):
        """Test that output follows table order, not key order."""
        first = {"fetchFormat": "auto", "customFunction": "func", "bitRate": 12}
        second = {"bitRate": 12, "fetchFormat": "auto", "customFunction": "func"}

        assert get_modifications(first) == get_modifications(second)
        assert get_modifications(first) == ["br_12", "fn_func", "f_auto"]

    def test_resize_fields_are_not_mapped(self):
        """Test that width/height/crop are left to the resize formatter."""
        assert get_modifications({"width": 10, "height": 10, "crop": "fill"}) == []

    def test_flags_list(self):
        """Test that a list of flags is dot-joined."""
        assert get_modifications({"flags": ["lossy", "progressive"]}) == [
            "fl_lossy.progressive"
        ]

    def test_snake_case_keys(self):
        """Test that attribute names work as keys too."""
        assert get_modifications({"bit_rate": 12, "aspect_ratio": "4:3"}) == [
            "ar_4:3",
            "br_12",
        ]

    def test_numbers_render_as_given(self):
        """Test that numeric values are not reformatted."""
        assert get_modifications({"dpr": 1.5, "quality": 80}) == ["dpr_1.5", "q_80"]


class TestGetResize:
    """Tests for get_resize()."""

    def test_prioritizes_resize_field(self):
        """Test that a nested resize spec overrides flat fields."""
        options = {
            "resize": {"type": "crop", "width": 10, "height": 10},
            "width": 20,
        }

        assert get_resize(options) == "c_crop,w_10,h_10"

    def test_resize_field_drops_all_flat_fields(self):
        """Test that flat crop is ignored even when resize lacks a type."""
        options = {"resize": {"width": 10}, "crop": "scale", "height": 30}

        assert get_resize(options) == "w_10"

    def test_supports_width_field(self):
        """Test width only."""
        assert get_resize({"width": 20}) == "w_20"

    def test_supports_height_field(self):
        """Test height only."""
        assert get_resize({"height": 20}) == "h_20"

    def test_supports_width_height_and_crop(self):
        """Test crop with both dimensions."""
        options = {"height": 20, "width": 20, "crop": "scale"}

        assert get_resize(options) == "c_scale,w_20,h_20"

    def test_no_resize_fields(self):
        """Test that nothing requested yields an empty token."""
        assert get_resize({"effect": "blur"}) == ""
