from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from report_builder.domain.report import Report
from report_builder.errors import BuilderFinishedError


class ReportBuilder(ABC):
    """Shared contract of all report builders.

    Content is added through chained calls and `finish()` turns the
    accumulated state into a `Report`. Each call mutates the builder in place
    and returns it, so a whole report reads as one expression:

        report = HtmlReportBuilder().with_header("Title").with_paragraph("Body").finish()

    `finish()` is terminal. The buffer is handed to the report and the builder
    refuses any further call.
    """

    def __init__(self) -> None:
        self._content: list[str] = []
        self._items = 0
        self._finished = False

    @property
    def items(self) -> int:
        return self._items

    @property
    def content(self) -> str:
        return "".join(self._content)

    @property
    def finished(self) -> bool:
        return self._finished

    @abstractmethod
    def with_header(self, header: str) -> Self: ...

    @abstractmethod
    def with_paragraph(self, paragraph: str) -> Self: ...

    @abstractmethod
    def finish(self) -> Report: ...

    def _append(self, fragment: str) -> Self:
        self._check_open()
        self._content.append(fragment)
        self._items += 1
        return self

    def _take(self, fmt: str) -> Report:
        self._check_open()
        report = Report(content=self.content, items=self._items, format=fmt)
        self._content = []
        self._items = 0
        self._finished = True
        return report

    def _check_open(self) -> None:
        if self._finished:
            raise BuilderFinishedError(
                f"{type(self).__name__} already finished; create a new builder"
            )
