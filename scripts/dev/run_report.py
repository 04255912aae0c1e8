from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from report_builder.builders.html import HtmlReportBuilder
from report_builder.writers.file import write_report


DEFAULT_OUT = Path("build/dev_reports/sample")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Write a sample HTML report without an outline file."
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=DEFAULT_OUT,
        help="Output directory for the report",
    )
    args = parser.parse_args()

    report = (
        HtmlReportBuilder()
        .with_header("Sample report")
        .with_paragraph("Built by chaining with_header/with_paragraph calls.")
        .with_paragraph("Text is inserted verbatim.")
        .finish()
    )
    artifacts = write_report(report, args.out, stem="sample", standalone=True, title="Sample")

    print(f"Wrote report to: {artifacts.report_path}")


if __name__ == "__main__":
    main()
