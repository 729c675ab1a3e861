"""Tests for the pure render model built from application state."""

from __future__ import annotations

import unittest

from pdfpager.document import Document
from pdfpager.input import handle_key
from pdfpager.render import (
    FOOTER_INPUT,
    FOOTER_NORMAL,
    FOOTER_NORMAL_SEARCH,
    RenderLine,
    build_render_model,
)
from pdfpager.search import Span
from pdfpager.state import AppState, PageJumpMode, SearchMode


def _make_state() -> AppState:
    return AppState.for_document(Document(pages=("one\ntwo\nthree", "Beta\nbeta again")))


class HeaderAndFooterTests(unittest.TestCase):
    def test_normal_mode_shows_page_position(self) -> None:
        state = _make_state()
        state.navigation.current_page = 1

        model = build_render_model(state, title="Doc")

        self.assertEqual(model.header, "Doc - Page 2 of 2")
        self.assertFalse(model.header_is_prompt)
        self.assertEqual(model.footer, FOOTER_NORMAL)
        self.assertIsNone(model.status)

    def test_page_jump_prompt(self) -> None:
        state = _make_state()
        state.mode = PageJumpMode(buffer="12")
        state.status_message = "Enter page number:"

        model = build_render_model(state)

        self.assertEqual(model.header, "Enter page number (1-2): 12")
        self.assertTrue(model.header_is_prompt)
        self.assertEqual(model.footer, FOOTER_INPUT)
        self.assertEqual(model.status, "Enter page number:")

    def test_search_prompt_shows_status_row_even_without_message(self) -> None:
        state = _make_state()
        state.mode = SearchMode(buffer="be")

        model = build_render_model(state)

        self.assertEqual(model.header, "Search: be")
        self.assertEqual(model.status, "")

    def test_footer_mentions_result_keys_while_search_is_active(self) -> None:
        state = _make_state()
        state.search.run(state.document, "beta")

        self.assertEqual(build_render_model(state).footer, FOOTER_NORMAL_SEARCH)

    def test_status_message_in_normal_mode_is_shown(self) -> None:
        state = _make_state()
        handle_key(state, "g")
        handle_key(state, "7")
        handle_key(state, "ENTER")

        self.assertEqual(build_render_model(state).status, "Invalid page number: 7")


class BodyTests(unittest.TestCase):
    def test_lines_start_at_scroll_offset_without_spans(self) -> None:
        state = _make_state()
        state.navigation.scroll_offset = 1

        model = build_render_model(state)

        self.assertEqual(model.lines, (RenderLine("two"), RenderLine("three")))

    def test_scroll_past_end_renders_no_lines(self) -> None:
        state = _make_state()
        state.navigation.scroll_offset = 40

        self.assertEqual(build_render_model(state).lines, ())

    def test_active_query_adds_highlight_spans_to_every_line(self) -> None:
        state = _make_state()
        state.search.run(state.document, "beta")
        state.navigation.current_page = 1

        lines = build_render_model(state).lines

        self.assertEqual(lines[0].spans, (Span("Beta", True),))
        self.assertEqual(lines[1].spans, (Span("beta", True), Span(" again")))

    def test_query_without_matches_still_highlights_plainly(self) -> None:
        state = _make_state()
        state.search.run(state.document, "zzz")

        lines = build_render_model(state).lines

        self.assertEqual(lines[0].spans, (Span("one"),))
