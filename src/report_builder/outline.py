# ==== FILE: src/report_builder/outline.py ====
"""
Plain-text outline input.

    # Quarterly review
    Revenue grew in every region.

    Costs stayed flat.

Lines starting with "# " are headers, any other non-blank line is a paragraph.
Blank lines only separate entries and never produce one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal, TypeVar

from report_builder.builders.base import ReportBuilder

HEADER_PREFIX = "# "

B = TypeVar("B", bound=ReportBuilder)


@dataclass(frozen=True)
class OutlineEntry:
    kind: Literal["header", "paragraph"]
    text: str


def parse_outline(text: str) -> list[OutlineEntry]:
    entries: list[OutlineEntry] = []
    for raw in text.splitlines():
        line = raw.rstrip()
        if not line.strip():
            continue
        if line.startswith(HEADER_PREFIX):
            entries.append(OutlineEntry(kind="header", text=line[len(HEADER_PREFIX) :].strip()))
        else:
            entries.append(OutlineEntry(kind="paragraph", text=line.strip()))
    return entries


def read_outline(path: str | Path) -> list[OutlineEntry]:
    return parse_outline(Path(path).read_text(encoding="utf-8"))


def apply_outline(builder: B, entries: Iterable[OutlineEntry]) -> B:
    """Feed outline entries into a builder, in order. The builder is not finished."""
    for entry in entries:
        if entry.kind == "header":
            builder = builder.with_header(entry.text)
        else:
            builder = builder.with_paragraph(entry.text)
    return builder
