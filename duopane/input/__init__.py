"""Input-layer public API for key decoding and command dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
dispatcher that turns key tokens into navigation commands.
"""

from .dispatch import (
    DEFAULT_BINDINGS,
    IGNORED,
    Command,
    DispatchResult,
    InputDispatcher,
    KeyBinding,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "DEFAULT_BINDINGS",
    "IGNORED",
    "Command",
    "DispatchResult",
    "InputDispatcher",
    "KeyBinding",
]
