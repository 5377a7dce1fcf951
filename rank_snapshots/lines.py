from __future__ import annotations

from typing import List, Optional, Tuple

from .errors import MalformedLine
from .rules import DEFAULT_SEPARATOR_WIDTH

# country, points, position
EXPECTED_DATA_TOKENS = 3


def split_line(
    line: str,
    separator_width: int = DEFAULT_SEPARATOR_WIDTH,
    line_number: Optional[int] = None,
) -> Tuple[str, List[str]]:
    """
    Split one ranking line into its name field and trailing data tokens.

    The name ends at the first run of `separator_width` spaces. Names keep
    their single inner spaces ("John Doe"), which is why the width must be
    at least 2 for real data.

    Two tokens mean the source dropped the country code; an empty country
    is inserted in front. Other counts are returned untouched and surface
    later when the table is loaded.
    """
    if separator_width < 1:
        raise ValueError(f"separator_width must be >= 1, got {separator_width}")

    name, sep, rest = line.partition(" " * separator_width)
    if not sep:
        raise MalformedLine(line, line_number=line_number, separator_width=separator_width)

    tokens = rest.split()
    if len(tokens) == EXPECTED_DATA_TOKENS - 1:
        tokens.insert(0, "")
    return name, tokens
