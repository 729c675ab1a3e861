"""Dispatch table keyed by ``(mode kind, key token)``."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..state import AppState

KeyHandler = Callable[[AppState], None]
TextHandler = Callable[[AppState, str], None]


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action."""

    keys: tuple[str, ...]
    handler: KeyHandler


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is one printable character rather than a named token."""
    return len(key) == 1 and key.isprintable()


class KeyDispatchTable:
    """Per-mode key bindings with an optional printable-character fallback.

    Named bindings win over the text fallback, so a mode can reserve specific
    characters and still capture free-form typing.
    """

    def __init__(self) -> None:
        self._handlers: dict[tuple[str, str], KeyHandler] = {}
        self._text_handlers: dict[str, TextHandler] = {}

    def bind(self, modes: Iterable[str], *bindings: KeyBinding) -> KeyDispatchTable:
        """Register ``bindings`` for every mode kind in ``modes``."""
        for mode in modes:
            for binding in bindings:
                for key in binding.keys:
                    self._handlers[(mode, key)] = binding.handler
        return self

    def bind_text(self, modes: Iterable[str], handler: TextHandler) -> KeyDispatchTable:
        for mode in modes:
            self._text_handlers[mode] = handler
        return self

    def dispatch(self, state: AppState, key: str) -> bool:
        """Apply the action bound to ``key`` in the current mode.

        Returns ``False`` when nothing is bound, leaving ``state`` untouched.
        """
        mode = state.mode.kind
        handler = self._handlers.get((mode, key))
        if handler is not None:
            handler(state)
            return True
        text_handler = self._text_handlers.get(mode)
        if text_handler is not None and is_text_key(key):
            text_handler(state, key)
            return True
        return False

    def bound_keys(self, mode: str) -> set[str]:
        return {key for (bound_mode, key) in self._handlers if bound_mode == mode}
