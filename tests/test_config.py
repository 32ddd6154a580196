import json
from pathlib import Path

from starbattle.presentation.cli import config


def test_data_dir_honours_environment_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STARBATTLE_DATA_DIR", str(tmp_path))
    assert config.get_user_data_dir() == tmp_path
    assert config.get_default_config_path() == tmp_path / "config.json"


def test_data_dir_defaults_under_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("STARBATTLE_DATA_DIR", raising=False)
    monkeypatch.setattr(config.os, "name", "posix")
    monkeypatch.setattr(config.Path, "home", classmethod(lambda cls: tmp_path))
    assert config.get_user_data_dir() == tmp_path / ".config" / "star_battle"


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "config.json") == {"log_level": "WARNING", "seed": None}


def test_load_config_defaults_when_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("not json", encoding="utf-8")
    assert config.load_config(path) == {"log_level": "WARNING", "seed": None}


def test_load_config_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "debug", "seed": True, "extra": 1}), encoding="utf-8")
    assert config.load_config(path) == {"log_level": "DEBUG", "seed": None}


def test_save_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config.save_config({"log_level": "info", "seed": 42}, path)
    assert config.load_config(path) == {"log_level": "INFO", "seed": 42}
