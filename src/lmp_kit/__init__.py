# Errors
from .errors import (
    LmpError,
    MalformedDocumentError,
    NotFoundError,
    UnreadableFileError,
)

# Filtering
from .filtering import FilterConfig, LmpSettings, list_files, load_settings

# Format
from .format import FileRecord, format_record

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    LmpExtractor,
    ParserState,
    RecordStateMachine,
    extract,
    iter_records,
)

# Preview
from .preview import build_file_tree, list_record_paths, render_file_tree

# Serializer
from .serializer import LmpSerializer, serialize

__all__ = [
    # Errors
    "LmpError",
    "MalformedDocumentError",
    "NotFoundError",
    "UnreadableFileError",
    # Filtering
    "FilterConfig",
    "LmpSettings",
    "list_files",
    "load_settings",
    # Format
    "FileRecord",
    "format_record",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "LmpExtractor",
    "ParserState",
    "RecordStateMachine",
    "extract",
    "iter_records",
    # Preview
    "build_file_tree",
    "list_record_paths",
    "render_file_tree",
    # Serializer
    "LmpSerializer",
    "serialize",
]
