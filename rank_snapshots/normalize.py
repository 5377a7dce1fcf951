"""
Text-to-table normalization for pdftotext ranking lists.

Responsibilities:
- decode the extracted bytes (UTF-8 expected, best guess otherwise)
- header row from the first line
- name / data split per line, with the missing-country repair
- glyph repair on names only
- one comma-delimited, CRLF-separated document plus a report
"""

from __future__ import annotations

import base64
import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from charset_normalizer import from_bytes

from .errors import EmptySource
from .glyphs import needs_repair, repair_glyphs
from .lines import split_line
from .rules import DEFAULT_SEPARATOR_WIDTH, LINE_TERMINATOR, NORMALIZED_DELIMITER, TARGET_ENCODING

logger = logging.getLogger(__name__)


@dataclass
class NormalizedDocument:
    text: str
    rows: int = 0
    columns: int = 0
    repaired_names: int = 0
    injected_countries: int = 0
    encoding: Optional[str] = None
    warnings: List[Dict[str, Any]] = field(default_factory=list)


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def decode_source(raw: bytes) -> Tuple[str, str]:
    """
    Decode pdftotext output.

    pdftotext is run with -enc UTF-8, so strict utf-8-sig is tried first;
    mojibake in valid UTF-8 is the glyph table's job, not the detector's.
    Only undecodable input goes through charset-normalizer, and if even that
    has no answer the bytes are decoded with replacement characters.
    """
    try:
        return raw.decode("utf-8-sig"), "utf-8"
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is not None:
        logger.warning("Source is not valid UTF-8, decoding as %s", match.encoding)
        return str(match), match.encoding

    logger.warning("Source encoding could not be detected, decoding with replacement characters")
    return raw.decode("utf-8", errors="replace"), "utf-8-replace"


def split_source_lines(text: str) -> List[str]:
    """
    Break text into lines on LF only, dropping one trailing CR per line.

    str.splitlines() also breaks on U+0085, U+2028 and the other Unicode
    separators, and U+0085 turns up inside mojibaked names. A final empty
    line after the last LF is not a line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_header(first_line: str) -> str:
    return NORMALIZED_DELIMITER.join(first_line.split())


def normalize_row(
    line: str,
    separator_width: int = DEFAULT_SEPARATOR_WIDTH,
    line_number: Optional[int] = None,
) -> str:
    name, tokens = split_line(line, separator_width=separator_width, line_number=line_number)
    return NORMALIZED_DELIMITER.join([repair_glyphs(name), *tokens])


def normalize_text(text: str, separator_width: int = DEFAULT_SEPARATOR_WIDTH) -> NormalizedDocument:
    """
    Turn extracted ranking text into the canonical delimited document.

    The first line is the header and is only re-delimited. Every following
    line must parse; one malformed line aborts the whole document so row
    counts never drift from the source.
    """
    lines = split_source_lines(text)
    if not lines:
        raise EmptySource()

    header = build_header(lines[0])
    doc = NormalizedDocument(text=header, columns=len(header.split(NORMALIZED_DELIMITER)) if header else 0)
    parts = [header]

    for line_number, line in enumerate(lines[1:], start=2):
        name, tokens = split_line(line, separator_width=separator_width, line_number=line_number)

        repaired = name
        if needs_repair(name):
            repaired = repair_glyphs(name)
            doc.repaired_names += 1
            logger.debug("line %d: repaired name %r -> %r", line_number, name, repaired)

        if tokens and tokens[0] == "" and len(tokens) == 3:
            doc.injected_countries += 1
            logger.debug("line %d: no country code for %r", line_number, repaired)
        elif len(tokens) != 3:
            doc.warnings.append({
                "row": line_number,
                "issue": "unexpected_column_count",
                "value": str(len(tokens)),
                "action": "kept_as_is",
            })

        parts.append(NORMALIZED_DELIMITER.join([repaired, *tokens]))
        doc.rows += 1

    doc.text = LINE_TERMINATOR.join(parts)
    logger.debug(
        "normalized %d rows (%d names repaired, %d countries injected)",
        doc.rows,
        doc.repaired_names,
        doc.injected_countries,
    )
    return doc


def normalize_bytes(raw: bytes, separator_width: int = DEFAULT_SEPARATOR_WIDTH) -> NormalizedDocument:
    text, encoding = decode_source(raw)
    doc = normalize_text(text, separator_width=separator_width)
    doc.encoding = encoding
    return doc


def build_response(doc: NormalizedDocument, separator_width: int = DEFAULT_SEPARATOR_WIDTH) -> Dict[str, Any]:
    """
    Returns a dict matching the API's NormalizeResponse envelope.
    """
    payload = doc.text.encode(TARGET_ENCODING)
    return {
        "normalized_csv": {
            "sha256": _sha256_hex(payload),
            "encoding": TARGET_ENCODING,
            "content_b64": base64.b64encode(payload).decode("ascii"),
        },
        "report": {
            "summary": {
                "rows": doc.rows,
                "columns": doc.columns,
                "repaired_names": doc.repaired_names,
                "injected_countries": doc.injected_countries,
                "deterministic": True,
            },
            "normalizations": {
                "encoding": {
                    "decode_used": doc.encoding or TARGET_ENCODING,
                    "output": TARGET_ENCODING,
                },
                "separator": {
                    "width": separator_width,
                    "delimiter": NORMALIZED_DELIMITER,
                    "line_terminator": "crlf",
                },
                "warnings": doc.warnings,
            },
        },
    }
