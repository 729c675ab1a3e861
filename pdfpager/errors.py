"""Exception types shared across the viewer.

Only fatal conditions are exceptions. Recoverable input problems such as a bad
page number or a query without matches become status messages instead.
"""

from __future__ import annotations


class PdfPagerError(Exception):
    """Base class for errors raised by pdfpager."""


class ExtractionError(PdfPagerError):
    """The source file could not be converted to text."""


class EmptySearchQueryError(PdfPagerError, ValueError):
    """A search was requested with an empty query."""


class TerminalSurfaceError(PdfPagerError):
    """Reading keys from or drawing to the terminal failed."""


class TerminalRestoreError(TerminalSurfaceError):
    """Restoring the terminal failed while another error was propagating.

    The triggering error is kept on ``original`` and chained as the context so
    both show up in diagnostics.
    """

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original
