"""
Tests for gravity parsing and the view/layout configuration models
"""

import json

import pytest

from models.gravity import Gravity, ScaleMode
from models.view_config import ImageViewConfig, SampleLayout, ViewSpec


class TestGravityParse:

    def test_single_name(self):
        assert Gravity.parse("top") == Gravity.TOP

    def test_combined_names_any_separator(self):
        expected = Gravity.TOP | Gravity.LEFT
        assert Gravity.parse("top|left") == expected
        assert Gravity.parse("LEFT, Top") == expected
        assert Gravity.parse("left top") == expected

    def test_center_composite(self):
        assert Gravity.parse("center") == Gravity.CENTER_HORIZONTAL | Gravity.CENTER_VERTICAL
        assert Gravity.parse("center_horizontal") == Gravity.CENTER_HORIZONTAL

    def test_empty_is_no_flags(self):
        assert Gravity.parse("") == Gravity(0)

    def test_raw_int(self):
        assert Gravity.parse(0b10000001) == Gravity.END | Gravity.BOTTOM

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="sideways"):
            Gravity.parse("top|sideways")

    def test_to_string(self):
        assert (Gravity.BOTTOM | Gravity.START).to_string() == "bottom|start"
        assert Gravity.CENTER.to_string() == "center"
        assert Gravity(0).to_string() == ""

    def test_to_string_parses_back(self):
        flags = Gravity.TOP | Gravity.RIGHT | Gravity.END
        assert Gravity.parse(flags.to_string()) == flags


class TestScaleModeParse:

    def test_names_and_ints(self):
        assert ScaleMode.parse("crop") == ScaleMode.CROP
        assert ScaleMode.parse(" Inside ") == ScaleMode.INSIDE
        assert ScaleMode.parse(1) == ScaleMode.NONE

    def test_unknown(self):
        with pytest.raises(ValueError, match="stretch"):
            ScaleMode.parse("stretch")


class TestImageViewConfig:

    def test_defaults(self):
        config = ImageViewConfig()
        assert config.image_gravity == Gravity.CENTER
        assert config.image_scale_mode == ScaleMode.NONE

    def test_to_dict_uses_attribute_strings(self):
        config = ImageViewConfig(Gravity.TOP | Gravity.LEFT, ScaleMode.CROP)
        assert config.to_dict() == {"image_gravity": "top|left", "image_scale_mode": "crop"}

    def test_from_dict_missing_keys_keep_defaults(self):
        config = ImageViewConfig.from_dict({"image_scale_mode": 2, "unrelated": True})
        assert config.image_scale_mode == ScaleMode.INSIDE
        assert config.image_gravity == Gravity.CENTER

    def test_json_round_trip(self, tmp_path):
        path = str(tmp_path / "view.json")
        ImageViewConfig(Gravity.BOTTOM | Gravity.END, ScaleMode.INSIDE).save_json(path)
        with open(path, encoding="utf-8") as f:
            assert json.load(f)["image_gravity"] == "bottom|end"
        loaded = ImageViewConfig.load_json(path)
        assert loaded.image_gravity == Gravity.BOTTOM | Gravity.END
        assert loaded.image_scale_mode == ScaleMode.INSIDE


class TestSampleLayout:

    def test_default_covers_every_scale_mode(self):
        layout = SampleLayout.default()
        assert len(layout.views) == 9
        modes = {v.config.image_scale_mode for v in layout.views}
        assert modes == set(ScaleMode)

    def test_default_views_have_independent_configs(self):
        layout = SampleLayout.default()
        layout.views[0].config.image_scale_mode = ScaleMode.CROP
        assert layout.views[4].config.image_scale_mode == ScaleMode.NONE

    def test_json_round_trip(self, tmp_path):
        layout = SampleLayout(columns=2, is_rtl=True, views=[
            ViewSpec("a", 120, 80, ImageViewConfig(Gravity.START, ScaleMode.CROP)),
            ViewSpec("b"),
        ])
        path = str(tmp_path / "layout.json")
        layout.save_json(path)
        loaded = SampleLayout.load_json(path)
        assert loaded.columns == 2
        assert loaded.is_rtl is True
        assert [v.name for v in loaded.views] == ["a", "b"]
        assert loaded.views[0].width == 120
        assert loaded.views[0].config.image_gravity == Gravity.START
        assert loaded.views[1].config == ImageViewConfig()

    def test_from_dict_does_not_mutate_input(self):
        data = {"columns": 1, "views": [{"name": "x", "image_gravity": "top"}]}
        SampleLayout.from_dict(data)
        assert "views" in data

    def test_bad_gravity_in_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"views": [{"name": "x", "image_gravity": "up"}]}))
        with pytest.raises(ValueError):
            SampleLayout.load_json(str(path))


class TestMalformedConfig:

    @pytest.mark.parametrize("value", [None, 1.5, ["top"], {"top": True}])
    def test_gravity_non_string_rejected(self, value):
        with pytest.raises(ValueError, match="Unknown gravity"):
            Gravity.parse(value)

    @pytest.mark.parametrize("value", [None, 2.0, ["crop"]])
    def test_scale_mode_non_string_rejected(self, value):
        with pytest.raises(ValueError, match="Unknown scale mode"):
            ScaleMode.parse(value)

    def test_null_gravity_in_config(self):
        with pytest.raises(ValueError):
            ImageViewConfig.from_dict({"image_gravity": None})

    def test_config_must_be_object(self):
        with pytest.raises(ValueError):
            ImageViewConfig.from_dict(["top"])

    def test_view_without_name(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"views": [{"width": 10}]}))
        with pytest.raises(ValueError, match="name"):
            SampleLayout.load_json(str(path))

    def test_views_must_be_list(self):
        with pytest.raises(ValueError):
            SampleLayout.from_dict({"views": {"name": "x"}})
