from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Allow importing the package without requiring an editable install.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def outline(tmp_path: Path) -> Path:
    """Two-entry outline file: one header, one paragraph."""
    path = tmp_path / "outline.txt"
    path.write_text("# Title\nBody\n", encoding="utf-8")
    return path


class FakeHTML:
    """Stand-in for weasyprint.HTML; records each render and writes a stub file."""

    rendered: list[dict] = []

    def __init__(self, *, string: str, base_url: str) -> None:
        self.string = string
        self.base_url = base_url

    def write_pdf(self, target: str, stylesheets=None) -> None:
        Path(target).write_bytes(b"%PDF-fake")
        FakeHTML.rendered.append(
            {"string": self.string, "base_url": self.base_url, "target": target}
        )


class FakeCSS:
    def __init__(self, *, string: str) -> None:
        self.string = string


@pytest.fixture
def fake_weasyprint(monkeypatch: pytest.MonkeyPatch) -> type[FakeHTML]:
    # WeasyPrint needs native libraries; the export path is tested against a stand-in.
    module = types.ModuleType("weasyprint")
    module.HTML = FakeHTML  # type: ignore[attr-defined]
    module.CSS = FakeCSS  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "weasyprint", module)
    FakeHTML.rendered = []
    return FakeHTML


@pytest.fixture
def missing_weasyprint(monkeypatch: pytest.MonkeyPatch) -> None:
    # a None entry makes `import weasyprint` raise ImportError
    monkeypatch.setitem(sys.modules, "weasyprint", None)
