# src/lmp_kit/format/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class FileRecord:
    """One embedded file: a relative, forward-slash path and its raw text."""

    path: str
    content: str
