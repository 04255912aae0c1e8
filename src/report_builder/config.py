from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from report_builder.builders.factory import available_formats
from report_builder.errors import UnknownFormatError


@dataclass(frozen=True)
class BuildConfig:
    """Options for turning an outline into report files.

    Mirrors the CLI flags one-to-one so a run can be reproduced from code.
    """

    fmt: str = "html"
    out_dir: Path = Path("build/reports")
    stem: str = "report"
    export_pdf: bool = False
    standalone: bool = False
    title: str | None = None

    def validate(self) -> None:
        if self.fmt.strip().lower() not in available_formats():
            raise UnknownFormatError(self.fmt, available_formats())
        if not self.stem or any(sep in self.stem for sep in ("/", "\\")):
            raise ValueError(f"stem must be a plain file name. Got {self.stem!r}")
        if self.export_pdf and self.fmt.strip().lower() == "latex":
            raise ValueError("PDF export is only available for html and markdown reports")
