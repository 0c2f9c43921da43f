from pathlib import Path

import pytest


@pytest.fixture
def source_files() -> dict[str, str]:
    """Text files covering the format's edge cases, keyed by relative path."""
    return {
        "README.md": "# Demo\n\nSome text.\n",
        "setup.cfg": "[metadata]\nname = demo",
        "src/demo/__init__.py": "",
        "src/demo/core.py": "def run():\n    return 1\n",
        "src/demo/data/notes.txt": "line one\nline two\n\n",
        "docs/unicode.md": "Ünïcödé ✓\n",
        "docs/markers.md": "Example:\n[FILE_END: other.txt]\n",
        "empty.txt": "",
    }


@pytest.fixture
def source_tree(tmp_path: Path, source_files: dict[str, str]) -> Path:
    root = tmp_path / "source"
    for relative, content in source_files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root
