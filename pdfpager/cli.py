"""Command-line front door for pdfpager.

Parses CLI options, extracts and paginates the source text, then hands the
document to the interactive pager runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_lines_per_page, load_theme_name
from .document import paginate
from .errors import ExtractionError, TerminalRestoreError, TerminalSurfaceError
from .extract import extract_text
from .runtime import run_pager
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_MESSAGE = "PDF file is empty or could not be parsed."
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; without it nothing is logged over the TUI."""
    if not log_file:
        return
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot open log file: {log_file} ({exc.strerror or exc})") from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("pdfpager")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfpager",
        description="Read the text of a PDF (or plain text file) in a terminal pager.",
    )
    parser.add_argument("path", help="Path to the PDF or text file.")
    parser.add_argument(
        "--lines-per-page",
        type=_positive_int,
        default=None,
        help="Lines per page when the text has no form-feed page breaks (default: config or 50).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--nopager", action="store_true", help="Print pages directly without interactive paging.")
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    return parser


def _report_terminal_error(exc: TerminalSurfaceError) -> None:
    print(f"Terminal error: {exc}", file=sys.stderr)
    if isinstance(exc, TerminalRestoreError) and exc.original is not None:
        print(f"While handling: {exc.original!r}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and open the document in the pager.

    Extraction failures and terminal failures exit with status 1; a document
    without any text prints a short notice and exits cleanly.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if path.is_dir():
        raise SystemExit(f"Not a file: {path}")

    try:
        raw_text = extract_text(path)
    except ExtractionError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1) from exc

    lines_per_page = args.lines_per_page or load_lines_per_page()
    document = paginate(raw_text, lines_per_page=lines_per_page)
    if document.is_blank:
        print(EMPTY_DOCUMENT_MESSAGE)
        return

    theme_name = args.theme if args.theme is not None else load_theme_name()
    try:
        run_pager(document, path, theme_name, args.no_color, args.nopager)
    except TerminalSurfaceError as exc:
        logger.error("terminal failure", exc_info=True)
        _report_terminal_error(exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
