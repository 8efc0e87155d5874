"""Input-layer public API for key decoding and key-to-action dispatch.

Low-level terminal decoding (`read_key`) is kept apart from the binding
table that turns key tokens into session actions.
"""

from .bindings import DEFAULT_BINDINGS, build_default_registry
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_BINDINGS",
    "build_default_registry",
]
