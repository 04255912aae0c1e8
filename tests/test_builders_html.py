from __future__ import annotations

import pytest

from report_builder.builders.html import HtmlReportBuilder
from report_builder.domain.report import Report
from report_builder.errors import BuilderFinishedError


def test_header_then_paragraph_renders_in_call_order() -> None:
    report = HtmlReportBuilder().with_header("Title").with_paragraph("Body").finish()

    assert report == Report(
        content="<h1>Title</h1>\n<p>Body</p>\n",
        items=2,
        format="Html\n",
    )


def test_finish_without_calls_gives_empty_report() -> None:
    report = HtmlReportBuilder().finish()

    assert report.content == ""
    assert report.items == 0
    assert report.format == "Html\n"


@pytest.mark.parametrize(
    "calls",
    [
        [],
        [("p", "only")],
        [("h", "a"), ("h", "b"), ("p", "c")],
        [("p", "x")] * 7,
    ],
)
def test_items_and_content_follow_the_calls(calls: list[tuple[str, str]]) -> None:
    builder = HtmlReportBuilder()
    expected = ""
    for kind, text in calls:
        if kind == "h":
            builder = builder.with_header(text)
            expected += f"<h1>{text}</h1>\n"
        else:
            builder = builder.with_paragraph(text)
            expected += f"<p>{text}</p>\n"

    report = builder.finish()

    assert report.items == len(calls)
    assert report.content == expected
    assert report.format == "Html\n"


def test_chained_calls_return_the_same_builder() -> None:
    builder = HtmlReportBuilder()
    assert builder.with_header("h") is builder
    assert builder.with_paragraph("p") is builder
    assert builder.items == 2


def test_text_is_not_escaped() -> None:
    report = HtmlReportBuilder().with_paragraph("a <b>bold</b> & co").finish()
    assert report.content == "<p>a <b>bold</b> & co</p>\n"


def test_builder_is_spent_after_finish() -> None:
    builder = HtmlReportBuilder().with_header("Title")
    builder.finish()

    assert builder.finished
    with pytest.raises(BuilderFinishedError):
        builder.with_paragraph("late")
    with pytest.raises(BuilderFinishedError):
        builder.finish()


def test_report_is_immutable() -> None:
    report = HtmlReportBuilder().finish()
    with pytest.raises(AttributeError):
        report.items = 3  # type: ignore[misc]


def test_empty_text_still_counts_as_an_item() -> None:
    report = HtmlReportBuilder().with_header("").with_paragraph("").finish()

    assert report.content == "<h1></h1>\n<p></p>\n"
    assert report.items == 2
