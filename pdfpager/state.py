"""Application context and input modes.

Modes form a tagged variant: only the input-capturing modes carry a text
buffer, so a Normal mode with pending input cannot be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .document import Document
from .navigation import NavigationState
from .search import SearchSession


@dataclass(frozen=True)
class NormalMode:
    kind: ClassVar[str] = "normal"
    capturing: ClassVar[bool] = False


@dataclass(frozen=True)
class PageJumpMode:
    kind: ClassVar[str] = "page_jump"
    capturing: ClassVar[bool] = True

    buffer: str = ""


@dataclass(frozen=True)
class SearchMode:
    kind: ClassVar[str] = "search"
    capturing: ClassVar[bool] = True

    buffer: str = ""


InputMode = Union[NormalMode, PageJumpMode, SearchMode]

NORMAL = NormalMode()


@dataclass
class AppState:
    document: Document
    navigation: NavigationState
    search: SearchSession = field(default_factory=SearchSession)
    mode: InputMode = NORMAL
    status_message: str = ""
    should_quit: bool = False
    dirty: bool = True

    @classmethod
    def for_document(cls, document: Document) -> AppState:
        return cls(document=document, navigation=NavigationState(page_count=document.page_count))

    @property
    def input_buffer(self) -> str:
        return getattr(self.mode, "buffer", "")


__all__ = [
    "AppState",
    "InputMode",
    "NORMAL",
    "NormalMode",
    "PageJumpMode",
    "SearchMode",
]
