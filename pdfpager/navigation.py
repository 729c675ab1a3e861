"""Page and scroll position within a paginated document.

Every operation is total: out-of-range requests leave the state untouched
instead of raising. ``scroll_offset`` has no upper bound here; the renderer
clips it against the page it is drawing.
"""

from __future__ import annotations

from dataclasses import dataclass

from .search import SearchResult

RESULT_CONTEXT_LINES = 5


@dataclass
class NavigationState:
    page_count: int
    current_page: int = 0
    scroll_offset: int = 0

    @property
    def last_page(self) -> int:
        return max(0, self.page_count - 1)

    def _set_page(self, page: int) -> bool:
        if page == self.current_page:
            return False
        self.current_page = page
        self.scroll_offset = 0
        return True

    def next_page(self) -> bool:
        if self.current_page >= self.last_page:
            return False
        return self._set_page(self.current_page + 1)

    def prev_page(self) -> bool:
        if self.current_page <= 0:
            return False
        return self._set_page(self.current_page - 1)

    def scroll_down(self) -> None:
        self.scroll_offset += 1

    def scroll_up(self) -> None:
        self.scroll_offset = max(0, self.scroll_offset - 1)

    def jump_to_page(self, page_number: int) -> bool:
        """Jump to 1-based ``page_number``; return ``False`` when out of range."""
        if not 1 <= page_number <= self.page_count:
            return False
        self.current_page = page_number - 1
        self.scroll_offset = 0
        return True

    def go_to_home(self) -> None:
        self.current_page = 0
        self.scroll_offset = 0

    def go_to_end(self) -> None:
        self.current_page = self.last_page
        self.scroll_offset = 0

    def go_to_result(self, result: SearchResult) -> None:
        """Show ``result`` with a few lines of context above it."""
        self.current_page = result.page
        self.scroll_offset = max(0, result.line - RESULT_CONTEXT_LINES)
