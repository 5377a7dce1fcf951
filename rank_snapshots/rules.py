"""
Canonical table format.

The delimited table written by the normalizer and read back by the store
must agree on every value here.
"""

NORMALIZED_DELIMITER = ","
LINE_TERMINATOR = "\r\n"
TARGET_ENCODING = "utf-8"

# pdftotext -layout has emitted both widths across ranking revisions
DEFAULT_SEPARATOR_WIDTH = 2

NAME_COLUMNS = ("Name", "Title")
COUNTRY_COLUMN = "Countries"
POINTS_COLUMN = "Points"
POSITION_COLUMN = "Position"
CANONICAL_HEADER = (NAME_COLUMNS[0], COUNTRY_COLUMN, POINTS_COLUMN, POSITION_COLUMN)

DEFAULT_TOP_COUNTRIES = 10
