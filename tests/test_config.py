from pathlib import Path

import pytest

from rank_snapshots.config import load_settings


def test_defaults(monkeypatch):
    for var in ("RANK_SOURCE_PATH", "RANK_CSV_PATH", "RANK_SEPARATOR_WIDTH", "RANK_TOP_COUNTRIES", "RANK_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings()
    assert settings.source_path == Path("rank_full-UTF-8.txt")
    assert settings.csv_path == Path("rank.csv")
    assert settings.separator_width == 2
    assert settings.top_countries == 10
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RANK_CSV_PATH", str(tmp_path / "out.csv"))
    monkeypatch.setenv("RANK_SEPARATOR_WIDTH", "3")
    monkeypatch.setenv("RANK_TOP_COUNTRIES", "5")
    settings = load_settings()
    assert settings.csv_path == tmp_path / "out.csv"
    assert settings.separator_width == 3
    assert settings.top_countries == 5


def test_bad_integer_names_the_variable(monkeypatch):
    monkeypatch.setenv("RANK_SEPARATOR_WIDTH", "wide")
    with pytest.raises(ValueError, match="RANK_SEPARATOR_WIDTH"):
        load_settings()


def test_separator_width_must_be_positive(monkeypatch):
    monkeypatch.setenv("RANK_SEPARATOR_WIDTH", "0")
    with pytest.raises(ValueError):
        load_settings()
