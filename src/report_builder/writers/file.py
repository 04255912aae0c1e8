# src/report_builder/writers/file.py
from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from pathlib import Path

from report_builder.builders.latex import wrap_latex_document
from report_builder.domain.formats import FILE_SUFFIXES, ReportFormat
from report_builder.domain.report import Report
from report_builder.errors import UnsupportedExportError
from report_builder.utils.paths import ensure_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportArtifacts:
    report_path: Path
    pdf_path: Path | None = None


def write_report(
    report: Report,
    out_dir: str | Path,
    *,
    stem: str = "report",
    standalone: bool = False,
    title: str | None = None,
) -> ReportArtifacts:
    """
    Write a finished report to `out_dir/<stem><suffix>`.

    The suffix follows the report format (.html, .md, .tex). With
    `standalone=True`, HTML content is wrapped in a full page and LaTeX content
    in a compilable document; Markdown is always written as-is.
    """
    fmt = _report_format(report)
    out_dir = ensure_dir(out_dir)
    path = out_dir / f"{stem}{FILE_SUFFIXES[fmt]}"

    text = report.content
    if standalone and fmt is ReportFormat.HTML:
        text = html_page(report.content, title=title)
    elif standalone and fmt is ReportFormat.LATEX:
        text = wrap_latex_document(report, title=title)

    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s report (%d items) to %s", fmt.strip(), report.items, path)
    return ReportArtifacts(report_path=path)


def html_page(body: str, *, title: str | None = None) -> str:
    doc_title = html.escape(title or "Report")
    return f"""<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>{doc_title}</title>
</head>
<body>
{body}</body>
</html>
"""


def _report_format(report: Report) -> ReportFormat:
    try:
        return ReportFormat(report.format)
    except ValueError:
        raise UnsupportedExportError(
            f"No writer for report format {report.format!r}"
        ) from None
