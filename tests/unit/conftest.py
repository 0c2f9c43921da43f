from pathlib import Path

import pytest


class RecordingMetricsHook:
    """Collects every metric call for assertions."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, float]] = []
        self.counters: list[tuple[str, int, dict[str, str] | None]] = []
        self.gauges: list[tuple[str, float]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, value_ms))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value))

    def total(self, name: str) -> int:
        return sum(value for n, value, _ in self.counters if n == name)


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A small project folder:

    project/
      README.md
      app.log
      src/main.py
      src/util/helpers.py
      node_modules/pkg/index.js
    """
    root = tmp_path / "project"
    (root / "src" / "util").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)

    (root / "README.md").write_text("# Project\n")
    (root / "app.log").write_text("started\n")
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "util" / "helpers.py").write_text("def helper():\n    pass")
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = 1;\n")
    return root
