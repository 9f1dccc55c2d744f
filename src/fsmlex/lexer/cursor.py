"""Character cursor over an immutable source buffer.

Tracks two positions: the lexeme start (anchor of the token being
scanned) and the forward tip. Invariant:
``lexeme_start.offset <= forward <= len(source)``.

The forward tip only moves backward through ``retract_one`` and
``reset_to``; neither may cross the lexeme start.
"""

from __future__ import annotations

from dataclasses import dataclass

from fsmlex.charsets import EOF_CHAR, NEWLINE
from fsmlex.errors import InternalConsistencyError


@dataclass(frozen=True, slots=True)
class Position:
    """A marked cursor position (offset plus derived line/column)."""

    offset: int
    line: int
    column: int


class Cursor:
    """Positional reader with mark/reset backtracking.

    Usage:
            >>> cursor = Cursor("ab")
            >>> cursor.advance(), cursor.peek()
            ('a', 'b')
            >>> cursor.retract_one()
            >>> cursor.peek()
            'a'

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_line",
        "_col",
        "_start",
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._line = 1
        self._col = 1
        self._start = Position(0, 1, 1)

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        """Offset of the forward tip."""
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._col

    @property
    def lexeme_start(self) -> Position:
        return self._start

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def begin_lexeme(self) -> Position:
        """Anchor the lexeme start at the forward tip."""
        self._start = Position(self._pos, self._line, self._col)
        return self._start

    def peek(self) -> str:
        """Return the character at the forward tip, or EOF_CHAR."""
        if self._pos >= self._source_len:
            return EOF_CHAR
        return self._source[self._pos]

    def advance(self) -> str:
        """Consume one character, updating line/column.

        Returns:
            The consumed character, or EOF_CHAR at end of input
        """
        if self._pos >= self._source_len:
            return EOF_CHAR

        char = self._source[self._pos]
        self._pos += 1

        if char == NEWLINE:
            self._line += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def mark(self) -> Position:
        """Snapshot the forward tip."""
        return Position(self._pos, self._line, self._col)

    def reset_to(self, position: Position) -> None:
        """Move the forward tip to a previously marked position.

        Raises:
            InternalConsistencyError: If position lies before the lexeme
                start or beyond the end of the source
        """
        if position.offset < self._start.offset or position.offset > self._source_len:
            raise InternalConsistencyError(
                f"reset to offset {position.offset} outside "
                f"[{self._start.offset}, {self._source_len}]",
                self._line,
                self._col,
            )
        self._pos = position.offset
        self._line = position.line
        self._col = position.column

    def retract_one(self) -> None:
        """Move the forward tip back exactly one character.

        Raises:
            InternalConsistencyError: If the tip is already at the lexeme start
        """
        if self._pos <= self._start.offset:
            raise InternalConsistencyError(
                "retract past lexeme start", self._start.line, self._start.column
            )

        self._pos -= 1
        if self._source[self._pos] == NEWLINE:
            self._line -= 1
            line_start = self._source.rfind(NEWLINE, 0, self._pos) + 1
            self._col = self._pos - line_start + 1
        else:
            self._col -= 1

    def lexeme(self) -> str:
        """Text between the lexeme start and the forward tip."""
        return self._source[self._start.offset : self._pos]

    def __repr__(self) -> str:
        return f"Cursor(start={self._start.offset}, forward={self._pos}, {self._line}:{self._col})"
