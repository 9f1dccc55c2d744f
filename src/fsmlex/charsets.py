"""Character classes for transition-diagram lookups.

Every character belongs to exactly one CharClass. Transition diagrams
key their edges on an exact character, a CharClass, or a Wildcard, so
the scanner never branches on individual characters.

Only ASCII letters and digits are classified as such; any other
character (including non-ASCII letters) falls into OTHER.

Usage:
    from fsmlex.charsets import CharClass, classify

    if classify(char) is CharClass.DIGIT:  # O(1) lookup
        ...
"""

from __future__ import annotations

from enum import Enum, auto

# End-of-input sentinel returned by the cursor
EOF_CHAR = ""


class CharClass(Enum):
    """Disjoint character classes."""

    LETTER = auto()  # a-z A-Z
    DIGIT = auto()  # 0-9
    UNDERSCORE = auto()  # _
    BLANK = auto()  # space, tab, \r, \f, \v
    NEWLINE = auto()  # \n
    OTHER = auto()  # everything else


class Wildcard(Enum):
    """Catch-all transition symbols, consulted after exact and class keys."""

    NOT_NEWLINE = auto()  # any character except \n
    ANY = auto()  # any character


ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
BLANKS: frozenset[str] = frozenset(" \t\r\f\v")
NEWLINE = "\n"

_CLASS_CACHE: dict[str, CharClass] = {}


def classify(char: str) -> CharClass:
    """Return the CharClass of a single character."""
    cls = _CLASS_CACHE.get(char)
    if cls is not None:
        return cls
    if char in ASCII_LETTERS:
        cls = CharClass.LETTER
    elif char in ASCII_DIGITS:
        cls = CharClass.DIGIT
    elif char == "_":
        cls = CharClass.UNDERSCORE
    elif char in BLANKS:
        cls = CharClass.BLANK
    elif char == NEWLINE:
        cls = CharClass.NEWLINE
    else:
        cls = CharClass.OTHER
    # Only cache ASCII to keep the table bounded
    if len(char) == 1 and ord(char) < 128:
        _CLASS_CACHE[char] = cls
    return cls


def is_identifier_shaped(text: str) -> bool:
    """Check whether text could be accepted by the identifier diagram."""
    if not text:
        return False
    if text[0] not in ASCII_LETTERS and text[0] != "_":
        return False
    return all(c in ASCII_LETTERS or c in ASCII_DIGITS or c == "_" for c in text[1:])
