from __future__ import annotations

from report_builder.builders.base import ReportBuilder
from report_builder.domain.formats import ReportFormat
from report_builder.domain.report import Report


class HtmlReportBuilder(ReportBuilder):
    """Renders each piece as one line of HTML markup.

    Text is wrapped verbatim; escaping is the caller's job.
    """

    def with_header(self, header: str) -> HtmlReportBuilder:
        return self._append(f"<h1>{header}</h1>\n")

    def with_paragraph(self, paragraph: str) -> HtmlReportBuilder:
        return self._append(f"<p>{paragraph}</p>\n")

    def finish(self) -> Report:
        return self._take(ReportFormat.HTML.value)
