from __future__ import annotations

from report_builder.builders.base import ReportBuilder
from report_builder.builders.html import HtmlReportBuilder
from report_builder.builders.latex import LatexReportBuilder
from report_builder.builders.markdown import MarkdownReportBuilder
from report_builder.errors import UnknownFormatError

BUILDERS: dict[str, type[ReportBuilder]] = {
    "html": HtmlReportBuilder,
    "markdown": MarkdownReportBuilder,
    "latex": LatexReportBuilder,
}


def available_formats() -> list[str]:
    return sorted(BUILDERS)


def create_builder(fmt: str) -> ReportBuilder:
    """Return a fresh builder for a format name ("html", "markdown", "latex")."""
    key = str(fmt).strip().lower()
    try:
        cls = BUILDERS[key]
    except KeyError:
        raise UnknownFormatError(str(fmt), available_formats()) from None
    return cls()
