from __future__ import annotations

import json

from disc_core import config


def test_load_config_merges_file_and_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text(json.dumps({"DISC_MODE": "likert"}), encoding="utf-8")
    monkeypatch.setenv("LIKERT_SEPARATOR", "")
    monkeypatch.delenv("DISC_MODE", raising=False)
    cfg = config.load_config()
    assert cfg["DISC_MODE"] == "likert"
    assert cfg["LIKERT_SEPARATOR"] == ""
    assert "FORCED_CHOICE_SEPARATOR" in cfg


def test_load_config_ignores_broken_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    monkeypatch.delenv("DISC_MODE", raising=False)
    assert config.load_config()["DISC_MODE"] == config.DEFAULT_MODE


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("X_FLAG", "yes")
    monkeypatch.setenv("X_NUM", "nope")
    monkeypatch.setenv("X_SEP", "")
    assert config._env_bool("X_FLAG", False) is True
    assert config._env_int("X_NUM", 7) == 7
    assert config._env_str("X_SEP", ">") == ""


def test_webhook_url_read_per_call(monkeypatch):
    monkeypatch.delenv("WEBHOOK_URL", raising=False)
    assert config.webhook_url() is None
    monkeypatch.setenv("WEBHOOK_URL", " https://hooks.example.com/x ")
    assert config.webhook_url() == "https://hooks.example.com/x"


def test_separator_for_mode():
    assert config.separator_for("likert") == config.LIKERT_SEPARATOR
    assert config.separator_for("forced_choice") == config.FORCED_CHOICE_SEPARATOR


def test_config_file_drives_scoring_separators(tmp_path, monkeypatch):
    import importlib

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LIKERT_SEPARATOR", raising=False)
    monkeypatch.delenv("DISC_MODE", raising=False)
    (tmp_path / "config.json").write_text(
        json.dumps({"LIKERT_SEPARATOR": "", "DISC_MODE": "likert"}), encoding="utf-8"
    )
    try:
        importlib.reload(config)
        assert config.separator_for("likert") == ""
        assert config.DEFAULT_MODE == "likert"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
