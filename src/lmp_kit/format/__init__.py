from .markers import (
    END_PATTERN,
    START_PATTERN,
    end_marker,
    format_record,
    match_end,
    match_start,
    start_marker,
    strip_line_ending,
)
from .models import FileRecord

__all__ = [
    "FileRecord",
    "START_PATTERN",
    "END_PATTERN",
    "start_marker",
    "end_marker",
    "match_start",
    "match_end",
    "format_record",
    "strip_line_ending",
]
