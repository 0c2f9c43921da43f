# src/lmp_kit/serializer/serializer.py

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from time import monotonic

from lmp_kit.errors import NotFoundError, UnreadableFileError
from lmp_kit.filtering.config import FilterConfig, relative_posix_path
from lmp_kit.filtering.walker import list_files
from lmp_kit.format import FileRecord, format_record
from lmp_kit.observability import names
from lmp_kit.observability.base import MetricsHook, NoOpMetricsHook

module_logger = logging.getLogger(__name__)


class LmpSerializer:
    """
    Folder -> LMP document.

    - Files are emitted in directory-listing order
    - Unreadable files are logged and skipped, never fatal
    - Nothing is written to disk
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.logger = logger or module_logger
        self.metrics_hook = metrics_hook

    async def dump(
        self,
        folder_path: str | Path,
        filter_config: FilterConfig | None = None,
    ) -> str:
        """Serialize every non-excluded file under `folder_path`.

        Args:
            folder_path: Root folder to walk.
            filter_config: Exclusion rules. Defaults to no exclusions, with
                paths relative to `folder_path`.

        Returns:
            The LMP document.

        Raises:
            NotFoundError: If `folder_path` does not exist.
        """
        start = monotonic()
        folder = str(folder_path)
        if not Path(folder).is_dir():
            self.logger.error("Folder does not exist: %s", folder)
            self.metrics_hook.increment(
                names.LMP_ERRORS_TOTAL, labels={"operation": "dump"}
            )
            raise NotFoundError(folder, kind="Folder")

        if filter_config is None:
            filter_config = FilterConfig.create(folder)

        files = await list_files(folder, filter_config, self.logger)
        self.logger.info("Serializing %d files from %s", len(files), folder)

        parts: list[str] = []
        skipped = 0
        for file_path in files:
            try:
                content = await asyncio.to_thread(_read_text, file_path)
            except (OSError, UnicodeDecodeError) as e:
                error = UnreadableFileError(file_path, e)
                self.logger.error("%s", error)
                skipped += 1
                continue

            relative_path = relative_posix_path(file_path, filter_config.relative_to)
            parts.append(format_record(FileRecord(path=relative_path, content=content)))

        document = "".join(parts)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.LMP_DUMP_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.LMP_FILES_SERIALIZED_TOTAL, len(parts))
        if skipped:
            self.metrics_hook.increment(names.LMP_FILES_SKIPPED_TOTAL, skipped)
        self.metrics_hook.record_gauge(names.LMP_DOCUMENT_SIZE, len(document))
        self.logger.info(
            "Serialized %d files (%d skipped) from %s", len(parts), skipped, folder
        )
        return document


async def serialize(
    folder_path: str | Path,
    *,
    exclude_extensions: Iterable[str] = (),
    exclude_patterns: Iterable[str | re.Pattern[str]] = (),
    relative_to: str | Path | None = None,
    logger: logging.Logger | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Serialize a folder with inline exclusion options.

    Example:
        >>> document = await serialize("project", exclude_patterns=["^node_modules/"])
    """
    filter_config = FilterConfig.create(
        str(relative_to if relative_to is not None else folder_path),
        exclude_extensions=exclude_extensions,
        exclude_patterns=exclude_patterns,
    )
    serializer = LmpSerializer(logger=logger, metrics_hook=metrics_hook)
    return await serializer.dump(folder_path, filter_config)


def _read_text(path: str) -> str:
    # newline="" keeps \r\n and lone \r exactly as stored
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
