"""Whole-document search and per-line match highlighting."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .document import Document
from .errors import EmptySearchQueryError


@dataclass(frozen=True, order=True)
class SearchResult:
    page: int  # 0-based page index
    line: int  # 0-based line index within the page


@dataclass(frozen=True)
class Span:
    text: str
    matched: bool = False


def search_document(document: Document, query: str) -> list[SearchResult]:
    """Return one result per line containing ``query``, case-insensitively.

    Pages and lines are scanned in document order, so results come back sorted
    by ``(page, line)``. A line holding the query several times still yields a
    single result.
    """
    if not query:
        raise EmptySearchQueryError("Search query is empty")
    needle = query.lower()
    results: list[SearchResult] = []
    for page_idx in range(document.page_count):
        for line_idx, line in enumerate(document.page_lines(page_idx)):
            if needle in line.lower():
                results.append(SearchResult(page=page_idx, line=line_idx))
    return results


def highlight_spans(line: str, query: str) -> list[Span]:
    """Split ``line`` into plain and matched spans for ``query``.

    Matches are found leftmost-first and never overlap. Span texts are slices
    of ``line``, so joining them gives back the original line.
    """
    if not query:
        return [Span(line)]

    spans: list[Span] = []
    last_end = 0
    for match in re.finditer(re.escape(query), line, flags=re.IGNORECASE):
        start, end = match.span()
        if start > last_end:
            spans.append(Span(line[last_end:start]))
        spans.append(Span(line[start:end], matched=True))
        last_end = end

    if not spans:
        return [Span(line)]
    if last_end < len(line):
        spans.append(Span(line[last_end:]))
    return spans


@dataclass
class SearchSession:
    """Active query, its ordered results, and the cycling cursor."""

    query: str = ""
    results: list[SearchResult] = field(default_factory=list)
    cursor: int = 0

    @property
    def active(self) -> bool:
        return bool(self.query)

    def run(self, document: Document, query: str) -> list[SearchResult]:
        """Search ``document`` and replace this session's query and results.

        An empty query raises before any state is touched.
        """
        results = search_document(document, query)
        self.query = query
        self.results = results
        self.cursor = 0
        return results

    def current(self) -> SearchResult | None:
        if not self.results:
            return None
        return self.results[self.cursor]

    def next_result(self) -> SearchResult | None:
        if not self.results:
            return None
        self.cursor = (self.cursor + 1) % len(self.results)
        return self.results[self.cursor]

    def previous_result(self) -> SearchResult | None:
        if not self.results:
            return None
        self.cursor = (self.cursor - 1) % len(self.results)
        return self.results[self.cursor]

    def clear(self) -> None:
        self.query = ""
        self.results = []
        self.cursor = 0

    def position_label(self) -> str:
        return f"Result {self.cursor + 1} of {len(self.results)} for '{self.query}'"


__all__ = [
    "SearchResult",
    "SearchSession",
    "Span",
    "highlight_spans",
    "search_document",
]
