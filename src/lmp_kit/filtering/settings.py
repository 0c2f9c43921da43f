# src/lmp_kit/filtering/settings.py

import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from lmp_kit.errors import NotFoundError

from .config import FilterConfig

logger = logging.getLogger(__name__)


class LmpSettings(BaseModel):
    """User-facing exclusion settings, as stored in a YAML file.

    Example:
        exclude_extensions: [".log", ".lock"]
        exclude_patterns: ["^node_modules/", "^\\\\.git/"]
    """

    exclude_extensions: list[str] = []
    exclude_patterns: list[str] = []

    class Config:
        extra = "forbid"

    @field_validator("exclude_patterns")
    @classmethod
    def _patterns_compile(cls, patterns: list[str]) -> list[str]:
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid exclude pattern {pattern!r}: {e}") from e
        return patterns

    def to_filter_config(self, relative_to: str | Path) -> FilterConfig:
        return FilterConfig.create(
            str(relative_to),
            exclude_extensions=self.exclude_extensions,
            exclude_patterns=self.exclude_patterns,
        )


def load_settings(path: str | Path) -> LmpSettings:
    file_path = Path(path)
    if not file_path.is_file():
        logger.error("Settings file not found: %s", file_path)
        raise NotFoundError(str(file_path), kind="Settings file")

    with open(file_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    settings = LmpSettings(**data)
    logger.debug(
        "Loaded settings from %s: %d extensions, %d patterns",
        file_path,
        len(settings.exclude_extensions),
        len(settings.exclude_patterns),
    )
    return settings
