from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Report:
    """Finished report: rendered content, number of items and a format label."""

    content: str
    items: int
    format: str

    @property
    def format_name(self) -> str:
        return self.format.strip()
