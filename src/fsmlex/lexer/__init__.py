"""Finite-state tokenizer for fsmlex.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, DriverState
├── core.py              # Tokenizer driver (mixin composition + main loop)
├── modes.py             # DriverState enum
├── cursor.py            # Character cursor with mark/reset/retract
├── patterns.py          # Pattern, PatternTable, PatternTableBuilder
├── diagrams.py          # Transition diagrams per token family
├── scanner.py           # State-machine scanner mixin
├── resolver.py          # Keyword/symbol resolver
└── recovery.py          # Error recovery mixin

Usage:
    >>> from fsmlex.lexer import Tokenizer
    >>> for token in Tokenizer("if x <= 3.5").tokenize():
    ...     print(token)
Token(IF, 'if', 1:1)
Token(IDENTIFIER, 'x', 1:4)
Token(LESS_EQUAL, '<=', 1:6)
Token(NUMBER, '3.5', 1:9)
Token(END_OF_INPUT, '', 1:12)

"""

from fsmlex.lexer.core import Tokenizer
from fsmlex.lexer.modes import DriverState

__all__ = ["DriverState", "Tokenizer"]
