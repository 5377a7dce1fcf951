from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from .errors import DeserializationError, MissingInputFile, UnexpectedColumnCount
from .models import Record
from .rules import COUNTRY_COLUMN, NAME_COLUMNS, NORMALIZED_DELIMITER, POINTS_COLUMN, POSITION_COLUMN, TARGET_ENCODING

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_document(document: str, destination: PathLike) -> bool:
    """
    Write a normalized document unless the destination already exists.

    An existing file is never overwritten; the skip is logged and False is
    returned. Returns True when the document was written.
    """
    destination = Path(destination)
    if destination.exists():
        logger.info("%s already exists. Skipping creating.", destination)
        return False

    logger.info("Writing to %s", destination)
    # newline="" keeps the CRLF row separators byte for byte
    with destination.open("w", encoding=TARGET_ENCODING, newline="") as fh:
        fh.write(document)
    return True


def _check_header(fieldnames) -> None:
    if not fieldnames:
        raise DeserializationError("table has no header row")
    missing = []
    if not any(col in fieldnames for col in NAME_COLUMNS):
        missing.append("/".join(NAME_COLUMNS))
    for col in (COUNTRY_COLUMN, POINTS_COLUMN, POSITION_COLUMN):
        if col not in fieldnames:
            missing.append(col)
    if missing:
        raise DeserializationError(f"missing required column(s): {', '.join(missing)}")


def parse_snapshot(text: str) -> List[Record]:
    """
    Parse a canonical table into Records, mapping columns by header name.

    Any bad row aborts the whole parse; there are no partial snapshots.
    """
    reader = csv.DictReader(io.StringIO(text, newline=""), delimiter=NORMALIZED_DELIMITER)
    _check_header(reader.fieldnames)
    width = len(reader.fieldnames)

    records: List[Record] = []
    for row_number, row in enumerate(reader, start=2):
        # DictReader files surplus cells under None and fills short rows with None
        extra = row.pop(None, None)
        if extra is not None or any(value is None for value in row.values()):
            found = width + len(extra) if extra is not None else sum(v is not None for v in row.values())
            raise UnexpectedColumnCount(f"expected {width} columns, found {found}", row_number=row_number)
        try:
            records.append(Record.model_validate(row))
        except ValidationError as exc:
            raise DeserializationError(str(exc), row_number=row_number) from exc
    return records


def load_snapshot(path: PathLike) -> List[Record]:
    path = Path(path)
    if not path.exists():
        raise MissingInputFile(path)
    with path.open("r", encoding="utf-8-sig", newline="") as fh:
        records = parse_snapshot(fh.read())
    logger.info("Loaded %d records from %s", len(records), path)
    return records
