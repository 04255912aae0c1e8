# src/report_builder/writers/pdf.py
"""
PDF export for finished reports.

HTML reports go straight to WeasyPrint. Markdown reports are converted to HTML
with markdown-it-py first. LaTeX reports are not exported; compile the .tex
file with a LaTeX toolchain instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from markdown_it import MarkdownIt

from report_builder.domain.formats import ReportFormat
from report_builder.domain.report import Report
from report_builder.errors import UnsupportedExportError
from report_builder.writers.file import html_page

logger = logging.getLogger(__name__)

PDF_STYLE = """
@page { size: letter; margin: 0.75in; }
body { font-family: "Segoe UI", Roboto, Arial, sans-serif; font-size: 11pt; line-height: 1.35; }
h1 { margin: 0.8em 0 0.3em 0; }
p { margin: 0.35em 0; }
"""


@dataclass(frozen=True)
class PdfExportResult:
    pdf_path: Path
    engine: str


def report_to_pdf(
    report: Report,
    pdf_path: str | Path,
    *,
    title: str | None = None,
    base_dir: Path | None = None,
) -> PdfExportResult:
    """
    Render a finished HTML or Markdown report to PDF.

    Args:
        report: Report produced by an HTML or Markdown builder.
        pdf_path: Output file; parent directories are created.
        title: Document title used in the PDF metadata.
        base_dir: Base used to resolve relative links/images. Defaults to the
                  output directory.

    Raises:
        UnsupportedExportError: for LaTeX or unknown report formats, or when
            WeasyPrint cannot be loaded. Nothing is created on disk in that case.
    """
    body = report_body_html(report)
    page = html_page(body, title=title)

    # WeasyPrint loads native libraries on import
    try:
        from weasyprint import CSS, HTML
    except (ImportError, OSError) as e:
        raise UnsupportedExportError(
            "WeasyPrint is not available. Install 'weasyprint' and its native "
            "libraries (Pango, cairo) to export PDF."
        ) from e

    out_pdf = Path(pdf_path)
    out_pdf.parent.mkdir(parents=True, exist_ok=True)

    root = base_dir if base_dir is not None else out_pdf.parent
    HTML(string=page, base_url=str(root)).write_pdf(
        str(out_pdf), stylesheets=[CSS(string=PDF_STYLE)]
    )
    logger.info("Exported %s report to %s", report.format_name, out_pdf)
    return PdfExportResult(pdf_path=out_pdf, engine="weasyprint")


def report_body_html(report: Report) -> str:
    if report.format == ReportFormat.HTML:
        return report.content
    if report.format == ReportFormat.MARKDOWN:
        return _markdown_to_html(report.content)
    raise UnsupportedExportError(
        f"PDF export is not available for {report.format_name!r} reports"
    )


def _markdown_to_html(md_text: str) -> str:
    md = MarkdownIt("commonmark", {"html": False})
    return md.render(md_text)
