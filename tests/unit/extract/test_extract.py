"""Tests for PDF and plain-text extraction and its failure reporting."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from pdfpager import extract
from pdfpager.errors import ExtractionError


def _fake_reader(*page_texts: str | None):
    pages = [SimpleNamespace(extract_text=lambda text=text: text) for text in page_texts]
    return SimpleNamespace(pages=pages)


class ExtractTextTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)

    def test_pdf_pages_are_joined_with_form_feeds(self) -> None:
        target = self.root / "doc.pdf"
        target.write_bytes(b"%PDF-1.7\n")

        with mock.patch("pdfpager.extract.PdfReader", return_value=_fake_reader("one", None, "three")) as reader:
            text = extract.extract_text(target)

        reader.assert_called_once_with(str(target))
        self.assertEqual(text, "one\x0c\x0cthree")

    def test_pdf_is_detected_by_magic_bytes(self) -> None:
        target = self.root / "scan.bin"
        target.write_bytes(b"%PDF-1.4 rest")

        self.assertTrue(extract.is_pdf(target))
        self.assertFalse(extract.is_pdf(self.root / "missing.bin"))

    def test_plain_text_files_are_read_directly(self) -> None:
        target = self.root / "notes.txt"
        target.write_text("first\nsecond\n", encoding="utf-8")

        with mock.patch("pdfpager.extract.PdfReader") as reader:
            text = extract.extract_text(target)

        reader.assert_not_called()
        self.assertEqual(text, "first\nsecond\n")

    def test_latin1_text_falls_back_gracefully(self) -> None:
        target = self.root / "legacy.txt"
        target.write_bytes("café".encode("latin-1"))

        self.assertEqual(extract.extract_text(target), "café")

    def test_reader_failure_becomes_extraction_error(self) -> None:
        target = self.root / "broken.pdf"
        target.write_bytes(b"garbage")

        with mock.patch("pdfpager.extract.PdfReader", side_effect=ValueError("EOF marker not found")):
            with self.assertRaises(ExtractionError) as ctx:
                extract.extract_text(target)

        message = str(ctx.exception)
        self.assertIn("EOF marker not found", message)
        self.assertIn("image-based", message)
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_unreadable_file_becomes_extraction_error(self) -> None:
        with self.assertRaises(ExtractionError):
            extract.extract_text(self.root / "missing.txt")
