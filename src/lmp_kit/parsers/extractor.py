# src/lmp_kit/parsers/extractor.py

from __future__ import annotations

import asyncio
import io
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from time import monotonic

from lmp_kit.errors import MalformedDocumentError, NotFoundError
from lmp_kit.format import FileRecord
from lmp_kit.observability import names
from lmp_kit.observability.base import MetricsHook, NoOpMetricsHook

from .state_machine import iter_records

module_logger = logging.getLogger(__name__)


class LmpExtractor:
    """
    LMP document -> files on disk.

    - Reads the source line by line, from a file or a string
    - Writes each record as soon as it closes
    - Existing files are overwritten
    - No rollback: an unclosed trailing record fails after earlier
      records were written
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.logger = logger or module_logger
        self.metrics_hook = metrics_hook

    async def extract(
        self,
        dest_dir: str | Path,
        *,
        file_path: str | Path | None = None,
        content: str | None = None,
    ) -> int:
        """Write every record of a document under `dest_dir`.

        Args:
            dest_dir: Destination root. Created if missing.
            file_path: Path of a document file to read.
            content: Document text. Exactly one of `file_path` / `content`.

        Returns:
            Number of files written.

        Raises:
            ValueError: If both or neither of `file_path` and `content` are given.
            NotFoundError: If `file_path` does not exist.
            MalformedDocumentError: If the document ends inside a record.
        """
        if (file_path is None) == (content is None):
            raise ValueError("extract requires exactly one of file_path or content")

        start = monotonic()
        if file_path is not None and not Path(file_path).is_file():
            self.logger.error("Input file does not exist: %s", file_path)
            self.metrics_hook.increment(
                names.LMP_ERRORS_TOTAL, labels={"operation": "extract"}
            )
            raise NotFoundError(str(file_path), kind="Input file")

        destination = Path(dest_dir)
        written = 0

        def _extract() -> None:
            nonlocal written
            destination.mkdir(parents=True, exist_ok=True)
            with _open_lines(file_path, content) as lines:
                for record in iter_records(lines):
                    self._write_record(destination, record)
                    written += 1

        try:
            await asyncio.to_thread(_extract)
        except MalformedDocumentError as e:
            self.logger.error("%s (%d files written before failure)", e, written)
            self.metrics_hook.increment(
                names.LMP_ERRORS_TOTAL, labels={"operation": "extract"}
            )
            raise
        finally:
            self.metrics_hook.increment(names.LMP_FILES_EXTRACTED_TOTAL, written)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.LMP_EXTRACT_DURATION, elapsed_ms)
        self.logger.info("Extracted %d files to %s", written, destination)
        return written

    def _write_record(self, destination: Path, record: FileRecord) -> None:
        # Leading slashes are dropped so the path always joins under destination
        target = destination / record.path.lstrip("/\\")
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(record.content)
        self.logger.info("Created: %s", target)


async def extract(
    dest_dir: str | Path,
    *,
    file_path: str | Path | None = None,
    content: str | None = None,
    logger: logging.Logger | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> int:
    """Extract a document from a file or a string into `dest_dir`.

    Example:
        >>> count = await extract("out", content=document)
    """
    extractor = LmpExtractor(logger=logger, metrics_hook=metrics_hook)
    return await extractor.extract(dest_dir, file_path=file_path, content=content)


@contextmanager
def _open_lines(
    file_path: str | os.PathLike[str] | None, content: str | None
) -> Iterator[io.TextIOBase]:
    # newline=None gives universal newlines for both sources
    if file_path is not None:
        with open(file_path, encoding="utf-8", newline=None) as f:
            yield f
    else:
        yield io.StringIO(content or "", newline=None)
