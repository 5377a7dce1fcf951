from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from .models import Record
from .rules import DEFAULT_TOP_COUNTRIES


def all_countries(records: Iterable[Record]) -> List[str]:
    """Distinct country codes, sorted. A missing code shows up as ""."""
    return sorted({record.country for record in records})


def top_countries(records: Iterable[Record], n: int = DEFAULT_TOP_COUNTRIES) -> List[str]:
    """
    The `n` countries with the most records, most first.

    Equal counts are ordered alphabetically so the result is stable
    across runs.
    """
    if n <= 0:
        return []
    counts = Counter(record.country for record in records)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [country for country, _ in ranked[:n]]


def records_for_country(records: Iterable[Record], country: str) -> List[Record]:
    return [record for record in records if record.country == country]
