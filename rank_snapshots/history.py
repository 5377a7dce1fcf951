from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .models import HistoryEntry, Record

logger = logging.getLogger(__name__)

# Ranking-Male-11-09-2023.pdf
_DMY_RE = re.compile(r"(?<!\d)(\d{2})-(\d{2})-(\d{4})(?!\d)")
_ISO_RE = re.compile(r"(?<!\d)(\d{4})-(\d{2})-(\d{2})(?!\d)")


def merge_history(current_records: List[Record], prior_records: Iterable[Record], label: str) -> int:
    """
    Append the prior snapshot's values to every matching current record.

    Records are matched on `name`; with duplicate names in the prior
    snapshot the first one wins. Matched records get one new history entry
    and have both deltas recomputed from it. Unmatched records are left
    alone. Mutates `current_records` in place and returns the match count.
    """
    index: Dict[str, Record] = {}
    for prior in prior_records:
        index.setdefault(prior.name, prior)

    matched = 0
    for record in current_records:
        prior = index.get(record.name)
        if prior is None:
            continue
        entry = HistoryEntry(label=label, points=prior.points, position=prior.position)
        record.history.append(entry)
        record.points_delta = record.points - entry.points
        # lower position is better, so improvement is positive
        record.position_delta = entry.position - record.position
        matched += 1

    logger.info(
        "Merged snapshot %r: %d of %d records matched",
        label,
        matched,
        len(current_records),
    )
    return matched


def snapshot_label(path: Union[str, Path]) -> str:
    stem = Path(path).stem
    m = _DMY_RE.search(stem)
    if m:
        day, month, year = m.groups()
        return f"{year}-{month}-{day}"
    m = _ISO_RE.search(stem)
    if m:
        return m.group(0)
    return stem


def format_delta(value: Optional[int]) -> str:
    if value is None:
        return "-"
    if value > 0:
        return f"+{value}"
    return str(value)
