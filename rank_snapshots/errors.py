from __future__ import annotations

from typing import Optional


class RankingError(Exception):
    """Base class for every failure raised by the ranking pipeline."""


class MissingInputFile(RankingError):
    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class ParseError(RankingError):
    pass


class EmptySource(ParseError):
    def __init__(self) -> None:
        super().__init__("Source text is empty. Empty or damaged file?")


class MalformedLine(ParseError):
    def __init__(self, line: str, line_number: Optional[int] = None, separator_width: int = 2) -> None:
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(
            f"Malformed {where}: no run of {separator_width} spaces separates the name from the data: {line!r}"
        )


class DeserializationError(RankingError):
    def __init__(self, message: str, row_number: Optional[int] = None) -> None:
        self.row_number = row_number
        if row_number is not None:
            message = f"row {row_number}: {message}"
        super().__init__(message)


class UnexpectedColumnCount(DeserializationError):
    pass
