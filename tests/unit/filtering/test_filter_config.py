import re
from pathlib import Path

import pytest

from lmp_kit.filtering.config import (
    FilterConfig,
    normalize_extension,
    relative_posix_path,
)


class TestNormalizeExtension:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (".log", ".log"),
            (".LOG", ".log"),
            ("log", ".log"),
            (" .Md ", ".md"),
            ("", ""),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert normalize_extension(raw) == expected


class TestFilterConfig:
    def test_no_rules_excludes_nothing(self, tmp_path: Path) -> None:
        config = FilterConfig.create(str(tmp_path))

        assert not config.is_excluded(str(tmp_path / "a.log"))

    def test_extension_match_is_case_insensitive(self, tmp_path: Path) -> None:
        config = FilterConfig.create(str(tmp_path), exclude_extensions=[".log"])

        assert config.is_excluded(str(tmp_path / "a.log"))
        assert config.is_excluded(str(tmp_path / "B.LOG"))
        assert not config.is_excluded(str(tmp_path / "b.txt"))

    def test_file_without_dot_has_empty_extension(self, tmp_path: Path) -> None:
        config = FilterConfig.create(str(tmp_path), exclude_extensions=[".txt"])

        assert not config.is_excluded(str(tmp_path / "Makefile"))
        assert not config.is_excluded(str(tmp_path / ".gitignore"))

    def test_pattern_matches_relative_posix_path(self, tmp_path: Path) -> None:
        config = FilterConfig.create(
            str(tmp_path), exclude_patterns=["^node_modules/"]
        )

        assert config.is_excluded(str(tmp_path / "node_modules" / "x.js"))
        assert not config.is_excluded(str(tmp_path / "src" / "node_modules.py"))

    def test_pattern_is_unanchored_search(self, tmp_path: Path) -> None:
        config = FilterConfig.create(str(tmp_path), exclude_patterns=[r"\.min\."])

        assert config.is_excluded(str(tmp_path / "static" / "app.min.js"))

    def test_accepts_compiled_patterns(self, tmp_path: Path) -> None:
        config = FilterConfig.create(
            str(tmp_path), exclude_patterns=[re.compile("^dist/")]
        )

        assert config.is_excluded(str(tmp_path / "dist" / "bundle.js"))

    def test_pattern_order_does_not_change_outcome(self, tmp_path: Path) -> None:
        patterns = ["^build/", r"\.tmp$"]
        forward = FilterConfig.create(str(tmp_path), exclude_patterns=patterns)
        backward = FilterConfig.create(str(tmp_path), exclude_patterns=patterns[::-1])

        for name in ["build/x.py", "a.tmp", "src/a.py"]:
            path = str(tmp_path / name)
            assert forward.is_excluded(path) == backward.is_excluded(path)

    def test_invalid_pattern_raises(self, tmp_path: Path) -> None:
        with pytest.raises(re.error):
            FilterConfig.create(str(tmp_path), exclude_patterns=["("])

    def test_config_is_frozen(self, tmp_path: Path) -> None:
        config = FilterConfig.create(str(tmp_path))

        with pytest.raises(AttributeError):
            config.relative_to = "/elsewhere"  # type: ignore


def test_relative_posix_path_uses_forward_slashes(tmp_path: Path) -> None:
    path = tmp_path / "src" / "pkg" / "mod.py"

    assert relative_posix_path(str(path), str(tmp_path)) == "src/pkg/mod.py"
