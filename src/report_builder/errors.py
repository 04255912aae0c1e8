from __future__ import annotations


class ReportBuilderError(Exception):
    """Base class for errors raised by report_builder."""


class BuilderFinishedError(ReportBuilderError, RuntimeError):
    """A builder was used after `finish()` handed its content to a Report."""


class UnknownFormatError(ReportBuilderError, ValueError):
    def __init__(self, name: str, supported: list[str]) -> None:
        self.name = name
        self.supported = supported
        super().__init__(
            f"Unknown report format {name!r}. Supported: {', '.join(supported)}"
        )


class UnsupportedExportError(ReportBuilderError):
    """The requested export is not available for this report format."""
