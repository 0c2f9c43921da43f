from .tree import (
    NO_FILES_DETECTED,
    FileTree,
    build_file_tree,
    list_record_paths,
    render_file_tree,
)

__all__ = [
    "FileTree",
    "NO_FILES_DETECTED",
    "build_file_tree",
    "list_record_paths",
    "render_file_tree",
]
