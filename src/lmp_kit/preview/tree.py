# src/lmp_kit/preview/tree.py

"""Preview which files a document would create, without writing anything."""

import io
from collections.abc import Iterable
from typing import Optional

from lmp_kit.format import match_start, strip_line_ending

FileTree = dict[str, Optional["FileTree"]]

NO_FILES_DETECTED = "No files detected"


def list_record_paths(text: str) -> list[str]:
    """Paths of every start marker line, in document order.

    Unlike extraction this does not track records, so a start marker
    embedded in another file's content is listed too.
    """
    paths = []
    # Same line splitting as extraction: only \n, \r\n and \r end a line
    for line in io.StringIO(text, newline=None):
        path = match_start(strip_line_ending(line))
        if path is not None:
            paths.append(path)
    return paths


def build_file_tree(paths: Iterable[str]) -> FileTree:
    """Nest forward-slash paths: directories map to dicts, files to None."""
    tree: FileTree = {}
    for path in paths:
        parts = path.split("/")
        current = tree
        for part in parts[:-1]:
            child = current.get(part)
            if child is None:
                child = {}
                current[part] = child
            current = child
        current[parts[-1]] = None
    return tree


def render_file_tree(tree: FileTree, indent: str = "  ") -> list[str]:
    if not tree:
        return [NO_FILES_DETECTED]

    lines: list[str] = []

    def _render(node: FileTree, depth: int) -> None:
        for name, child in node.items():
            if child is None:
                lines.append(f"{indent * depth}{name}")
            else:
                lines.append(f"{indent * depth}{name}/")
                _render(child, depth + 1)

    _render(tree, 0)
    return lines
