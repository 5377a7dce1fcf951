"""
Mojibake repair for names extracted by pdftotext.

The ranking PDFs carry UTF-8 names that were decoded as cp1252 somewhere
upstream, so "Peña" arrives as "PeÃ±a". Each entry below is the cp1252
reading of a UTF-8 sequence followed by the character it came from.

Rules:
- Entries are applied top to bottom, each one as a global literal replace.
- Every specific "Ã?" sequence must precede the bare "Ã" fallback. "Á" is
  C3 81 and 0x81 has no cp1252 glyph, so only the "Ã" survives extraction.
- The stray "Â" left behind by C2-prefixed sequences is dropped after all
  "Ã" entries have run.
"""

from __future__ import annotations

from typing import Tuple

REPAIR_TABLE: Tuple[Tuple[str, str], ...] = (
    ("Ã±", "ñ"),
    ("Ã¤", "ä"),
    ("Ã²", "ò"),
    ("Ã§", "ç"),
    ("Ã£", "ã"),
    ("Ã¶", "ö"),
    ("Ã©", "é"),
    ("Ã¡", "á"),
    ("Ã³", "ó"),
    ("Å„", "ń"),
    ("Ã¥", "å"),
    ("Ã¯", "ï"),
    ("Å\u00a0", "Š"),
    ("Å«", "ū"),
    ("Å¾", "ž"),
    ("Ãº", "ú"),
    ("Å½", "Ž"),
    ("Ã¼", "ü"),
    ("Ã\u00ad", "í"),
    ("Ã¨", "è"),
    ("Ã\u00a0", "à"),
    ("Ã„", "Ä"),
    ("Ã‰", "É"),
    ("Ã‘", "Ñ"),
    ("Ã“", "Ó"),
    ("Ãš", "Ú"),
    ("Ã", "Á"),
    ("Â", ""),
    ("Ä†", "Ć"),
    ("Ä‡", "ć"),
    ("Å‚", "ł"),
    ("Å¡", "š"),
    ("Ä±", "ı"),
)


def repair_glyphs(text: str) -> str:
    """
    Undo the known double-encoding corruption in a single name.

    Pure ASCII input is returned as is. Anything the table does not know
    about passes through unchanged; this never raises.

    Not idempotent in general: a removal late in the table can expose a
    sequence an earlier entry would have fixed ("ÅÂ„" needs two passes).
    """
    if text.isascii():
        return text
    for corrupted, correct in REPAIR_TABLE:
        text = text.replace(corrupted, correct)
    return text


def needs_repair(text: str) -> bool:
    return not text.isascii() and any(corrupted in text for corrupted, _ in REPAIR_TABLE)
