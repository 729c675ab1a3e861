"""Input-layer public API: key decoding and mode-aware dispatch."""

from .key_registry import KeyBinding, KeyDispatchTable, is_text_key
from .keys import DEFAULT_KEY_TABLE, build_key_table, handle_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key

__all__ = [
    "DEFAULT_KEY_TABLE",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyDispatchTable",
    "UNKNOWN_KEY",
    "build_key_table",
    "handle_key",
    "is_text_key",
    "read_key",
]
