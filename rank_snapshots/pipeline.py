"""
Entry points used by the API and the command line.

Callers pick the paths; everything here runs to completion or raises a
RankingError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from . import countries, history, store
from .config import Settings
from .errors import MissingInputFile
from .models import Record
from .normalize import normalize_bytes
from .rules import DEFAULT_SEPARATOR_WIDTH, DEFAULT_TOP_COUNTRIES

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def convert_file(
    source: PathLike,
    destination: PathLike,
    separator_width: int = DEFAULT_SEPARATOR_WIDTH,
) -> bool:
    """
    Normalize a pdftotext file and persist it as the canonical table.

    Returns False when the destination already existed and was left alone.
    """
    source = Path(source)
    if not source.exists():
        raise MissingInputFile(source)
    doc = normalize_bytes(source.read_bytes(), separator_width=separator_width)
    logger.info(
        "Normalized %s: %d rows, %d names repaired, %d countries injected",
        source,
        doc.rows,
        doc.repaired_names,
        doc.injected_countries,
    )
    return persist_snapshot(doc.text, destination)


def persist_snapshot(text: str, path: PathLike) -> bool:
    return store.save_document(text, path)


def load_snapshot(path: PathLike) -> List[Record]:
    return store.load_snapshot(path)


def ensure_snapshot(settings: Settings) -> List[Record]:
    """Convert the source text only if the table is missing, then load the table."""
    if not settings.csv_path.exists():
        convert_file(settings.source_path, settings.csv_path, separator_width=settings.separator_width)
    return load_snapshot(settings.csv_path)


def merge_history(current: List[Record], prior_path: PathLike, label: Optional[str] = None) -> int:
    """Load the prior table and merge it into `current`; the label defaults to the file's date."""
    prior = load_snapshot(prior_path)
    if label is None:
        label = history.snapshot_label(prior_path)
    return history.merge_history(current, prior, label)


def distinct_countries(records: List[Record]) -> List[str]:
    return countries.all_countries(records)


def top_countries(records: List[Record], n: int = DEFAULT_TOP_COUNTRIES) -> List[str]:
    return countries.top_countries(records, n)
