# src/lmp_kit/filtering/config.py

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and make sure it carries its leading dot."""
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def relative_posix_path(path: str, relative_to: str) -> str:
    return os.path.relpath(path, relative_to).replace(os.sep, "/")


@dataclass(frozen=True)
class FilterConfig:
    """Exclusion rules for one folder walk.

    Immutable. Patterns are compiled on construction and tested with
    `re.search` against the forward-slash path relative to `relative_to`.
    """

    relative_to: str
    exclude_extensions: frozenset[str] = field(default_factory=frozenset)
    exclude_patterns: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def create(
        cls,
        relative_to: str,
        *,
        exclude_extensions: Iterable[str] = (),
        exclude_patterns: Iterable[str | re.Pattern[str]] = (),
    ) -> "FilterConfig":
        return cls(
            relative_to=str(relative_to),
            exclude_extensions=frozenset(
                normalize_extension(ext) for ext in exclude_extensions
            ),
            exclude_patterns=tuple(
                p if isinstance(p, re.Pattern) else re.compile(p)
                for p in exclude_patterns
            ),
        )

    def has_excluded_extension(self, path: str) -> bool:
        extension = os.path.splitext(path)[1].lower()
        return extension in self.exclude_extensions

    def matches_pattern(self, relative_path: str) -> bool:
        return any(p.search(relative_path) for p in self.exclude_patterns)

    def is_excluded(self, path: str) -> bool:
        if self.has_excluded_extension(path):
            return True
        return self.matches_pattern(relative_posix_path(path, self.relative_to))
