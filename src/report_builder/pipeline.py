# ==== FILE: src/report_builder/pipeline.py ====
from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from report_builder.builders.factory import create_builder
from report_builder.config import BuildConfig
from report_builder.domain.report import Report
from report_builder.outline import OutlineEntry, apply_outline, read_outline
from report_builder.writers.file import ReportArtifacts, write_report
from report_builder.writers.pdf import report_to_pdf

logger = logging.getLogger(__name__)


def build_report(entries: list[OutlineEntry], fmt: str = "html") -> Report:
    builder = apply_outline(create_builder(fmt), entries)
    return builder.finish()


def run_build(outline_path: str | Path, config: BuildConfig) -> ReportArtifacts:
    """Outline file -> finished report -> file on disk (+ optional PDF)."""
    config.validate()

    entries = read_outline(outline_path)
    logger.info("Read %d outline entries from %s", len(entries), outline_path)
    if not entries:
        logger.warning("Outline %s is empty; writing an empty report", outline_path)

    report = build_report(entries, config.fmt)
    artifacts = write_report(
        report,
        config.out_dir,
        stem=config.stem,
        standalone=config.standalone,
        title=config.title,
    )

    if config.export_pdf:
        pdf = report_to_pdf(
            report,
            Path(config.out_dir) / f"{config.stem}.pdf",
            title=config.title,
        )
        artifacts = replace(artifacts, pdf_path=pdf.pdf_path)

    return artifacts
