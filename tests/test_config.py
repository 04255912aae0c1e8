from __future__ import annotations

import pytest

from report_builder.config import BuildConfig
from report_builder.errors import UnknownFormatError


def test_default_config_is_valid() -> None:
    BuildConfig().validate()


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(UnknownFormatError):
        BuildConfig(fmt="rtf").validate()


@pytest.mark.parametrize("stem", ["", "a/b", "a\\b"])
def test_stem_must_be_a_plain_name(stem: str) -> None:
    with pytest.raises(ValueError):
        BuildConfig(stem=stem).validate()


def test_pdf_export_of_latex_is_rejected() -> None:
    with pytest.raises(ValueError):
        BuildConfig(fmt="latex", export_pdf=True).validate()
