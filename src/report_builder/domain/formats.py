from __future__ import annotations

from enum import StrEnum


class ReportFormat(StrEnum):
    """Format labels carried by finished reports.

    The trailing newline is part of the label; consumers compare it byte for byte.
    """

    HTML = "Html\n"
    MARKDOWN = "Markdown\n"
    LATEX = "Latex\n"


# file extension per format, used by the writers
FILE_SUFFIXES: dict[ReportFormat, str] = {
    ReportFormat.HTML: ".html",
    ReportFormat.MARKDOWN: ".md",
    ReportFormat.LATEX: ".tex",
}
