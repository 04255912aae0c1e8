from __future__ import annotations

from report_builder.builders.base import ReportBuilder
from report_builder.domain.formats import ReportFormat
from report_builder.domain.report import Report


class MarkdownReportBuilder(ReportBuilder):
    def with_header(self, header: str) -> MarkdownReportBuilder:
        return self._append(f"# {header}\n\n")

    def with_paragraph(self, paragraph: str) -> MarkdownReportBuilder:
        return self._append(f"{paragraph}\n\n")

    def finish(self) -> Report:
        return self._take(ReportFormat.MARKDOWN.value)
