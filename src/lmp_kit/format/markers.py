# src/lmp_kit/format/markers.py

"""Line grammar shared by the serializer and the parser.

A document is a sequence of records:

    [FILE_START: <relative/path>]
    <content lines>
    [FILE_END: <relative/path>]

Records may be separated by blank lines or any text outside a record.
"""

import re

from .models import FileRecord

START_PATTERN = re.compile(r"^\[FILE_START: (.+)\]$")
END_PATTERN = re.compile(r"^\[FILE_END: (.+)\]$")


def start_marker(path: str) -> str:
    return f"[FILE_START: {path}]"


def end_marker(path: str) -> str:
    return f"[FILE_END: {path}]"


def match_start(line: str) -> str | None:
    """Return the trimmed path of a start marker line, or None.

    A marker whose path is blank is not a marker.
    """
    match = START_PATTERN.match(line)
    return (match.group(1).strip() or None) if match else None


def match_end(line: str) -> str | None:
    """Return the trimmed path of an end marker line, or None."""
    match = END_PATTERN.match(line)
    return (match.group(1).strip() or None) if match else None


def format_record(record: FileRecord) -> str:
    """Render a record, guaranteeing a newline before the end marker.

    The trailing blank line separates it from the next record.
    """
    content = record.content
    if not content.endswith("\n"):
        content += "\n"
    return f"{start_marker(record.path)}\n{content}{end_marker(record.path)}\n\n"


def strip_line_ending(line: str) -> str:
    """Drop one trailing `\\r\\n`, `\\n` or `\\r`; nothing else is a line end."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line
