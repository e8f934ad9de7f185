import json

import pytest

import config_loader
from cli import overrides, parse_args
from config import DEFAULT_CONFIG, PALETTE


def write(path, data):
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return str(path)


def test_defaults_without_user_config(no_user_config):
    cfg = config_loader.load_config()
    assert cfg["palette"] == PALETTE
    assert cfg["mode"] == "click"
    assert cfg is config_loader.get_config()


def test_defaults_are_not_shared(no_user_config):
    cfg = config_loader.load_config()
    cfg["palette"].append("#000000")
    assert DEFAULT_CONFIG["palette"] == PALETTE


def test_user_config_from_xdg(no_user_config):
    target = no_user_config / "xdg" / "wallace"
    target.mkdir(parents=True)
    write(target / "config.json", {"brush_width": 8})
    cfg = config_loader.load_config()
    assert cfg["brush_width"] == 8
    assert cfg["eraser_width"] == 60.0


def test_explicit_path_merges(tmp_path):
    path = write(tmp_path / "c.json", {"palette": ["#000000"], "mode": "drag"})
    cfg = config_loader.load_config(path)
    assert cfg["palette"] == ["#000000"]
    assert cfg["mode"] == "drag"
    assert cfg["layer"] == "overlay"


def test_unknown_key_warns(tmp_path, capsys):
    path = write(tmp_path / "c.json", {"colour": "red"})
    cfg = config_loader.load_config(path)
    assert "colour" not in cfg
    assert "colour" in capsys.readouterr().err


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(RuntimeError):
        config_loader.load_config(str(tmp_path / "missing.json"))


def test_invalid_json_raises(tmp_path):
    with pytest.raises(RuntimeError):
        config_loader.load_config(write(tmp_path / "c.json", "{nope"))


def test_invalid_utf8_raises(tmp_path):
    path = tmp_path / "c.json"
    path.write_bytes(b'{"mode": "\xff\xfe"}')
    with pytest.raises(RuntimeError):
        config_loader.load_config(str(path))


def test_valid_optional_values_load(tmp_path):
    path = write(tmp_path / "c.json", {"namespace": "tafel", "passthrough_opacity": 0.5,
                                       "single": True, "debug": False, "monitor": "DP-2"})
    cfg = config_loader.load_config(path)
    assert cfg["namespace"] == "tafel"
    assert cfg["monitor"] == "DP-2"


def test_non_object_raises(tmp_path):
    with pytest.raises(RuntimeError):
        config_loader.load_config(write(tmp_path / "c.json", [1, 2]))


@pytest.mark.parametrize("data", [
    {"palette": []},
    {"palette": [1, 2]},
    {"brush_width": 0},
    {"eraser_width": "wide"},
    {"mode": "hover"},
    {"layer": "sky"},
    {"namespace": 5},
    {"namespace": ""},
    {"passthrough_opacity": "wat"},
    {"passthrough_opacity": 1.5},
    {"single": "no"},
    {"debug": 1},
    {"monitor": 2},
])
def test_invalid_values_raise(tmp_path, data):
    with pytest.raises(RuntimeError):
        config_loader.load_config(write(tmp_path / "c.json", data))


def test_cli_overrides_apply(no_user_config):
    config_loader.load_config()
    args = parse_args(["--mode", "drag", "--single", "-o", "DP-1"])
    cfg = config_loader.apply_overrides(overrides(args))
    assert cfg["mode"] == "drag"
    assert cfg["single"] is True
    assert cfg["monitor"] == "DP-1"
    assert cfg["debug"] is False


def test_cli_unset_options_are_none():
    args = parse_args([])
    assert overrides(args) == {
        "mode": None, "single": None, "monitor": None, "layer": None, "debug": None,
    }
    assert args.config is None


def test_cli_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        parse_args(["--mode", "hover"])
