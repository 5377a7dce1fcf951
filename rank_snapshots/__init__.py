"""
rank-snapshots: normalize pdftotext ranking lists and track rank changes.
"""

__version__ = "0.1.0"
