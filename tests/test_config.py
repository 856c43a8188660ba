from __future__ import annotations
import pytest

from volley_core.config import load_config, DEFAULT_CONFIG, CONFIG_ENV, LOG_LEVEL_ENV


def test_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    cfg = load_config()
    assert cfg.start_rotation == DEFAULT_CONFIG["start_rotation"]
    assert cfg.default_view == "court"


def test_yaml_overrides(tmp_path, monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    path = tmp_path / "planner.yaml"
    path.write_text("team_name: Tigers\nstart_rotation: 5\ndefault_view: table\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.team_name == "Tigers"
    assert cfg.start_rotation == 5
    assert cfg.default_view == "table"


def test_env_file_and_log_level(tmp_path, monkeypatch):
    path = tmp_path / "planner.yaml"
    path.write_text("log_level: warning\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert load_config().log_level == "WARNING"
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert load_config().log_level == "DEBUG"


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "planner.yaml"
    path.write_text("squad_size: 12\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "planner.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))
