"""End-to-end scenario: raw text through pagination, search, keys, and render."""

from __future__ import annotations

import unittest

from pdfpager.document import paginate
from pdfpager.input import actions, handle_key
from pdfpager.render import build_render_model
from pdfpager.search import SearchResult, search_document
from pdfpager.state import NORMAL, AppState

RAW_TEXT = "Alpha\n\x0cBeta\nbeta again\n\x0cGamma"


class EndToEndScenarioTests(unittest.TestCase):
    def test_pagination_search_and_result_navigation(self) -> None:
        document = paginate(RAW_TEXT)
        self.assertEqual(document.pages, ("Alpha", "Beta\nbeta again", "Gamma"))

        results = search_document(document, "beta")
        self.assertEqual(results, [SearchResult(page=1, line=0), SearchResult(page=1, line=1)])

        state = AppState.for_document(document)
        state.search.run(document, "beta")
        self.assertTrue(actions.go_to_search_result(state, 0))
        self.assertEqual(state.navigation.current_page, 1)
        self.assertEqual(state.navigation.scroll_offset, 0)

    def test_interactive_session(self) -> None:
        state = AppState.for_document(paginate(RAW_TEXT))

        for key in ["/", "b", "e", "t", "a", "ENTER"]:
            handle_key(state, key)
        model = build_render_model(state)
        self.assertEqual(model.header, "PDF Reader - Page 2 of 3")
        self.assertEqual([line.text for line in model.lines], ["Beta", "beta again"])
        self.assertTrue(all(line.spans[0].matched for line in model.lines))

        for key in ["F", "F"]:
            handle_key(state, key)
        self.assertEqual(state.search.cursor, 0)

        for key in ["g", "3", "ENTER"]:
            handle_key(state, key)
        self.assertIs(state.mode, NORMAL)
        self.assertEqual(state.navigation.current_page, 2)
        self.assertEqual(build_render_model(state).status, "Jumped to page 3")

        handle_key(state, "ESC")
        self.assertFalse(state.search.active)
        self.assertFalse(state.should_quit)
        handle_key(state, "q")
        self.assertTrue(state.should_quit)
