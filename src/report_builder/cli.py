from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from report_builder.builders.factory import available_formats
from report_builder.config import BuildConfig
from report_builder.errors import ReportBuilderError
from report_builder.pipeline import run_build

DEFAULTS = BuildConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-builder",
        description="Build a report from a plain-text outline.",
    )
    parser.add_argument("outline", type=Path, help="Outline file ('# ' lines are headers)")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=available_formats(),
        default=DEFAULTS.fmt,
        help="Output format",
    )
    parser.add_argument("--out", type=Path, default=DEFAULTS.out_dir, help="Output directory")
    parser.add_argument("--stem", default=DEFAULTS.stem, help="Output file name without suffix")
    parser.add_argument("--title", default=None, help="Document title (standalone/PDF)")
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap HTML/LaTeX output in a complete document",
    )
    parser.add_argument(
        "--pdf",
        action="store_true",
        help="Also export a PDF (html and markdown only, requires WeasyPrint)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    config = BuildConfig(
        fmt=args.fmt,
        out_dir=args.out,
        stem=args.stem,
        export_pdf=args.pdf,
        standalone=args.standalone,
        title=args.title,
    )

    try:
        artifacts = run_build(args.outline, config)
    except (ReportBuilderError, ValueError, OSError) as e:
        print(f"report-builder: error: {e}", file=sys.stderr)
        return 2

    print(f"Wrote report to: {artifacts.report_path}")
    if artifacts.pdf_path is not None:
        print(f"Wrote PDF to: {artifacts.pdf_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
