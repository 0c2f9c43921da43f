# src/lmp_kit/errors.py

"""Error types raised by lmp-kit.

Structural errors (missing source, malformed document) abort the operation.
`UnreadableFileError` is only ever logged: serialization skips the file and
carries on.
"""


class LmpError(Exception):
    """Base class for all lmp-kit errors."""


class NotFoundError(LmpError, FileNotFoundError):
    """The source folder or document file does not exist."""

    def __init__(self, path: str, kind: str = "Path") -> None:
        super().__init__(f"{kind} does not exist: {path}")
        self.path = path


class MalformedDocumentError(LmpError, ValueError):
    """The document ended while a file record was still open."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unclosed file declaration: {path}")
        self.path = path


class UnreadableFileError(LmpError):
    """A file could not be read as text during serialization."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"Error processing file {path}: {cause}")
        self.path = path
        self.__cause__ = cause
