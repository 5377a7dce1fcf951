from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .rules import DEFAULT_SEPARATOR_WIDTH, DEFAULT_TOP_COUNTRIES

load_dotenv()

# pdftotext -layout -nopgbrk -enc UTF-8 Ranking-Male-11-09-2023.pdf rank_full-UTF-8.txt
DEFAULT_SOURCE_PATH = Path("rank_full-UTF-8.txt")
DEFAULT_CSV_PATH = Path("rank.csv")
DEFAULT_LOG_LEVEL = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    source_path: Path = DEFAULT_SOURCE_PATH
    csv_path: Path = DEFAULT_CSV_PATH
    separator_width: int = DEFAULT_SEPARATOR_WIDTH
    top_countries: int = DEFAULT_TOP_COUNTRIES
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Build settings from RANK_* environment variables (a .env file is honoured)."""
    separator_width = _env_int("RANK_SEPARATOR_WIDTH", DEFAULT_SEPARATOR_WIDTH)
    if separator_width < 1:
        raise ValueError(f"RANK_SEPARATOR_WIDTH must be >= 1, got {separator_width}")
    return Settings(
        source_path=Path(os.getenv("RANK_SOURCE_PATH", str(DEFAULT_SOURCE_PATH))),
        csv_path=Path(os.getenv("RANK_CSV_PATH", str(DEFAULT_CSV_PATH))),
        separator_width=separator_width,
        top_countries=_env_int("RANK_TOP_COUNTRIES", DEFAULT_TOP_COUNTRIES),
        log_level=os.getenv("RANK_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
