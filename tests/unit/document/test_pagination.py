"""Tests for splitting raw text into normalized pages.

Covers form-feed splitting, fixed-size chunking, and the single-page fallback.
"""

from __future__ import annotations

import unittest

from pdfpager.document import DEFAULT_LINES_PER_PAGE, Document, normalize_page, paginate, split_lines


class NormalizePageTests(unittest.TestCase):
    def test_trims_lines_and_drops_blank_ones(self) -> None:
        self.assertEqual(normalize_page("  a  \n\n   \n\tb\r\n"), "a\nb")

    def test_blank_input_normalizes_to_empty(self) -> None:
        self.assertEqual(normalize_page(" \n\t\n"), "")

    def test_split_lines_ignores_trailing_newline(self) -> None:
        self.assertEqual(split_lines("a\nb\n"), ["a", "b"])
        self.assertEqual(split_lines("a\nb"), ["a", "b"])
        self.assertEqual(split_lines(""), [])


class FormFeedPaginationTests(unittest.TestCase):
    def test_splits_on_form_feeds_in_order(self) -> None:
        document = paginate("one\n\x0ctwo\nmore\n\x0cthree")

        self.assertEqual(document.pages, ("one", "two\nmore", "three"))

    def test_drops_segments_that_normalize_to_empty(self) -> None:
        document = paginate("\x0c  \n\x0cfirst\x0c\n\n\x0csecond\x0c")

        self.assertEqual(document.pages, ("first", "second"))

    def test_page_count_never_exceeds_form_feeds_plus_one(self) -> None:
        raw = "\x0c".join(f"page {idx}" for idx in range(7))

        document = paginate(raw)

        self.assertLessEqual(document.page_count, raw.count("\x0c") + 1)
        self.assertEqual(document.pages, tuple(f"page {idx}" for idx in range(7)))

    def test_form_feeds_take_precedence_over_chunking(self) -> None:
        body = "\n".join(f"line {idx}" for idx in range(120))

        document = paginate(body + "\x0ctail")

        self.assertEqual(document.page_count, 2)
        self.assertEqual(len(document.page_lines(0)), 120)


class ChunkedPaginationTests(unittest.TestCase):
    def test_chunks_by_default_page_size(self) -> None:
        raw = "\n".join(f"line {idx}" for idx in range(120))

        document = paginate(raw)

        self.assertEqual(DEFAULT_LINES_PER_PAGE, 50)
        self.assertEqual(document.page_count, 3)
        self.assertEqual(len(document.page_lines(0)), 50)
        self.assertEqual(len(document.page_lines(2)), 20)
        self.assertEqual(document.page_lines(2)[-1], "line 119")

    def test_trailing_newline_does_not_change_pagination(self) -> None:
        raw = "\n".join(f"line {idx}" for idx in range(100))

        self.assertEqual(paginate(raw), paginate(raw + "\n"))
        self.assertEqual(paginate(raw).page_count, 2)

    def test_custom_page_size(self) -> None:
        raw = "\n".join(str(idx) for idx in range(10))

        document = paginate(raw, lines_per_page=3)

        self.assertEqual(document.page_count, 4)
        self.assertEqual(document.pages[-1], "9")

    def test_blank_chunks_are_dropped(self) -> None:
        raw = "a\n" + "\n" * 60 + "b"

        document = paginate(raw, lines_per_page=10)

        self.assertEqual(document.pages, ("a", "b"))

    def test_rejects_non_positive_page_size(self) -> None:
        with self.assertRaises(ValueError):
            paginate("text", lines_per_page=0)


class FallbackPaginationTests(unittest.TestCase):
    def test_empty_input_yields_one_empty_page(self) -> None:
        document = paginate("")

        self.assertEqual(document.pages, ("",))
        self.assertTrue(document.is_blank)

    def test_whitespace_only_input_yields_one_empty_page(self) -> None:
        for raw in ("   \n\t\n", "\x0c \x0c\n\x0c"):
            with self.subTest(raw=raw):
                document = paginate(raw)
                self.assertEqual(document.page_count, 1)
                self.assertEqual(document.pages[0], "")

    def test_document_with_text_is_not_blank(self) -> None:
        self.assertFalse(paginate("hello").is_blank)

    def test_page_lines_for_out_of_range_index_is_empty(self) -> None:
        document = Document(pages=("a\nb",))

        self.assertEqual(document.page_lines(0), ("a", "b"))
        self.assertEqual(document.page_lines(5), ())
        self.assertEqual(document.page_lines(-1), ())
