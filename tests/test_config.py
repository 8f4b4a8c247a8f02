from __future__ import annotations

import json

from game.config import CONFIG_ENV_VAR, GameConfig, default_config_path, load_config, save_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "nope.json")
    assert config == GameConfig()
    assert config.tick_interval_ms == 100
    assert config.hatch_repeat_ms == 100


def test_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tick_interval_ms": 250, "headline_interval_s": 45.0}), encoding="utf-8")
    config = load_config(path)
    assert config.tick_interval_ms == 250
    assert config.headline_interval_s == 45.0
    assert config.window_width == GameConfig().window_width


def test_unknown_keys_ignored(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"target_fps": 30, "grid_width": 19}), encoding="utf-8")
    assert load_config(path).target_fps == 30
    assert "grid_width" in capsys.readouterr().out


def test_malformed_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert load_config(path) == GameConfig()
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(path) == GameConfig()


def test_env_var_overrides_path(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert default_config_path() == path.resolve()
    save_config(GameConfig(target_fps=144))
    assert load_config().target_fps == 144


def test_numeric_strings_are_coerced(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tick_interval_ms": "100", "headline_interval_s": 12, "target_fps": 30.0}), encoding="utf-8")
    config = load_config(path)
    assert config.tick_interval_ms == 100
    assert isinstance(config.tick_interval_ms, int)
    assert config.headline_interval_s == 12.0
    assert isinstance(config.headline_interval_s, float)
    assert config.target_fps == 30
    assert isinstance(config.target_fps, int)


def test_bad_values_fall_back_per_field(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"tick_interval_ms": "fast", "hatch_repeat_ms": 2.5, "headline_model": 7, "target_fps": 144}),
        encoding="utf-8",
    )
    config = load_config(path)
    defaults = GameConfig()
    assert config.tick_interval_ms == defaults.tick_interval_ms
    assert config.hatch_repeat_ms == defaults.hatch_repeat_ms
    assert config.headline_model == defaults.headline_model
    assert config.target_fps == 144
    out = capsys.readouterr().out
    assert "[config] Bad value for tick_interval_ms" in out
    assert "[config] Bad value for hatch_repeat_ms" in out
    assert "[config] Bad value for headline_model" in out
