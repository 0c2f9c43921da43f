# src/lmp_kit/filtering/walker.py

from __future__ import annotations

import asyncio
import logging
import os

from .config import FilterConfig

module_logger = logging.getLogger(__name__)


def _scan(directory: str) -> list[tuple[str, bool]]:
    with os.scandir(directory) as entries:
        return [
            (os.path.abspath(entry.path), entry.is_dir(follow_symlinks=False))
            for entry in entries
        ]


async def list_files(
    directory: str,
    filter_config: FilterConfig,
    logger: logging.Logger | None = None,
) -> list[str]:
    """
    Recursively list files under `directory` that survive `filter_config`.

    - Exclusion is decided per file; directories are always descended into
    - Symlinks are never followed as directories
    - Subdirectories are scanned concurrently, but the result keeps
      directory-listing order
    """
    logger = logger or module_logger
    entries = await asyncio.to_thread(_scan, directory)

    async def _visit(path: str, is_dir: bool) -> list[str]:
        if is_dir:
            return await list_files(path, filter_config, logger)
        if filter_config.is_excluded(path):
            logger.debug("Excluded file: %s", path)
            return []
        return [path]

    nested = await asyncio.gather(*(_visit(path, is_dir) for path, is_dir in entries))
    return [path for paths in nested for path in paths]
