from __future__ import annotations

from report_builder.builders.base import ReportBuilder
from report_builder.domain.formats import ReportFormat
from report_builder.domain.report import Report
from report_builder.errors import UnsupportedExportError

_LATEX_SPECIALS = {
    "\\": "\\textbackslash{}",
    "&": "\\&",
    "%": "\\%",
    "$": "\\$",
    "#": "\\#",
    "_": "\\_",
    "{": "\\{",
    "}": "\\}",
    "~": "\\textasciitilde{}",
    "^": "\\textasciicircum{}",
}


class LatexReportBuilder(ReportBuilder):
    """Builds a LaTeX body. Unlike the HTML and Markdown builders, text is escaped."""

    def with_header(self, header: str) -> LatexReportBuilder:
        return self._append(f"\\section*{{{latex_escape(header)}}}\n\n")

    def with_paragraph(self, paragraph: str) -> LatexReportBuilder:
        return self._append(f"{latex_escape(paragraph)}\n\n")

    def finish(self) -> Report:
        return self._take(ReportFormat.LATEX.value)


def wrap_latex_document(report: Report, *, title: str | None = None) -> str:
    """Wrap a finished LaTeX body into a standalone, compilable document."""
    if report.format != ReportFormat.LATEX:
        raise UnsupportedExportError(
            f"Cannot wrap a {report.format_name} report as a LaTeX document"
        )
    return "\n".join(
        [
            _latex_preamble(title=title),
            "\\begin{document}",
            "\\maketitle" if title else "",
            report.content.rstrip(),
            "\\end{document}",
            "",
        ]
    )


def latex_escape(text: str) -> str:
    return "".join(_LATEX_SPECIALS.get(ch, ch) for ch in str(text))


def _latex_preamble(*, title: str | None) -> str:
    title_line = f"\\title{{{latex_escape(title)}}}" if title else ""
    return "\n".join(
        [
            "\\documentclass[11pt]{article}",
            "\\usepackage[margin=0.75in]{geometry}",
            "\\usepackage[T1]{fontenc}",
            "\\usepackage[utf8]{inputenc}",
            title_line,
            "\\date{}",
        ]
    )
