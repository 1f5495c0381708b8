"""
Tests for the headless render command
"""

import json

import pytest
from PIL import Image

import giv_render


@pytest.fixture
def input_png(tmp_path):
    path = tmp_path / "in.png"
    Image.new("RGB", (50, 200), (0, 128, 0)).save(path)
    return str(path)


def test_renders_view_sized_png(input_png, tmp_path, capsys):
    out = str(tmp_path / "out.png")
    code = giv_render.main([input_png, "-o", out, "--width", "100", "--height", "100",
                            "--scale-mode", "crop", "--gravity", "top"])
    assert code == 0
    with Image.open(out) as img:
        assert img.size == (100, 100)
        assert img.getpixel((50, 5))[:3] == (0, 128, 0)
    printed = capsys.readouterr().out
    assert "Gravity:   top" in printed
    assert "translate=(0, 0)" in printed


def test_config_file_with_flag_override(input_png, tmp_path, capsys):
    config_path = tmp_path / "view.json"
    config_path.write_text(json.dumps({"image_gravity": "left", "image_scale_mode": "inside"}))
    out = str(tmp_path / "out.png")
    code = giv_render.main([input_png, "-o", out, "--width", "100", "--height", "100",
                            "--config", str(config_path), "--gravity", "right"])
    assert code == 0
    printed = capsys.readouterr().out
    assert "Gravity:   right" in printed
    assert "Scale:     inside" in printed
    # 50x200 fitted to 25x100 and pinned right
    assert "translate=(75, 0)" in printed


def test_missing_input(tmp_path, capsys):
    code = giv_render.main([str(tmp_path / "nope.png"), "-o", str(tmp_path / "o.png"),
                            "--width", "10", "--height", "10"])
    assert code == 1
    assert "not found" in capsys.readouterr().out


def test_bad_gravity_is_usage_error(input_png, tmp_path):
    with pytest.raises(SystemExit) as exc:
        giv_render.main([input_png, "-o", str(tmp_path / "o.png"), "--width", "10",
                         "--height", "10", "--gravity", "north"])
    assert exc.value.code == 2


@pytest.mark.parametrize("payload", [
    {"image_gravity": None},
    {"image_scale_mode": 3.5},
    ["top"],
])
def test_malformed_config_exits_cleanly(input_png, tmp_path, capsys, payload):
    config_path = tmp_path / "view.json"
    config_path.write_text(json.dumps(payload))
    code = giv_render.main([input_png, "-o", str(tmp_path / "o.png"), "--width", "10",
                            "--height", "10", "--config", str(config_path)])
    assert code == 1
    assert "Could not load config" in capsys.readouterr().out
