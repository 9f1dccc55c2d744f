"""Tokenizer driver states.

The driver is a two-state machine over the whole input: it keeps
SCANNING until END_OF_INPUT has been emitted, then stays DONE.
"""

from __future__ import annotations

from enum import Enum, auto


class DriverState(Enum):
    """Tokenizer driver states."""

    SCANNING = auto()  # more tokens to produce
    DONE = auto()  # END_OF_INPUT emitted; not restartable
