"""Tests for the character cursor.

The cursor is the only component that moves through the source, so
its line/column bookkeeping and its lexeme-start guard are checked in
isolation here.
"""

from __future__ import annotations

import pytest

from fsmlex.charsets import EOF_CHAR
from fsmlex.errors import InternalConsistencyError
from fsmlex.lexer.cursor import Cursor, Position


class TestPeekAdvance:
    """peek() never moves; advance() consumes one character."""

    def test_peek_does_not_move(self) -> None:
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.offset == 0

    def test_advance_returns_consumed_char(self) -> None:
        cursor = Cursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.offset == 2

    def test_eof_sentinel(self) -> None:
        cursor = Cursor("a")
        cursor.advance()
        assert cursor.at_end
        assert cursor.peek() == EOF_CHAR
        assert cursor.advance() == EOF_CHAR
        assert cursor.offset == 1

    def test_empty_source(self) -> None:
        cursor = Cursor("")
        assert cursor.at_end
        assert cursor.advance() == EOF_CHAR


class TestLineColumn:
    """Line/column tracking across newlines."""

    def test_column_increments(self) -> None:
        cursor = Cursor("abc")
        cursor.advance()
        cursor.advance()
        assert (cursor.line, cursor.column) == (1, 3)

    def test_newline_resets_column(self) -> None:
        cursor = Cursor("a\nb")
        cursor.advance()
        cursor.advance()
        assert (cursor.line, cursor.column) == (2, 1)
        cursor.advance()
        assert (cursor.line, cursor.column) == (2, 2)

    def test_retract_over_newline_restores_previous_line(self) -> None:
        cursor = Cursor("abc\nd")
        for _ in range(4):
            cursor.advance()
        assert (cursor.line, cursor.column) == (2, 1)

        cursor.retract_one()
        assert (cursor.line, cursor.column) == (1, 4)
        assert cursor.peek() == "\n"

    def test_retract_over_newline_on_later_line(self) -> None:
        cursor = Cursor("a\nbc\nd")
        for _ in range(5):
            cursor.advance()
        cursor.retract_one()
        assert (cursor.line, cursor.column) == (2, 3)


class TestMarkReset:
    """mark()/reset_to() backtracking."""

    def test_reset_restores_position(self) -> None:
        cursor = Cursor("hello\nworld")
        cursor.advance()
        mark = cursor.mark()
        for _ in range(7):
            cursor.advance()
        cursor.reset_to(mark)

        assert cursor.mark() == mark
        assert cursor.peek() == "e"

    def test_reset_never_moves_lexeme_start(self) -> None:
        cursor = Cursor("abcdef")
        cursor.advance()
        start = cursor.begin_lexeme()
        cursor.advance()
        mark = cursor.mark()
        cursor.advance()
        cursor.reset_to(mark)

        assert cursor.lexeme_start == start
        assert cursor.lexeme() == "b"

    def test_reset_before_lexeme_start_is_fatal(self) -> None:
        cursor = Cursor("abc")
        cursor.advance()
        cursor.begin_lexeme()
        with pytest.raises(InternalConsistencyError):
            cursor.reset_to(Position(0, 1, 1))

    def test_reset_beyond_end_is_fatal(self) -> None:
        cursor = Cursor("abc")
        with pytest.raises(InternalConsistencyError):
            cursor.reset_to(Position(10, 1, 11))


class TestRetract:
    """retract_one() moves back exactly one character."""

    def test_retract_one(self) -> None:
        cursor = Cursor("xy")
        cursor.advance()
        cursor.advance()
        cursor.retract_one()
        assert cursor.offset == 1
        assert cursor.column == 2
        assert cursor.peek() == "y"

    def test_retract_past_lexeme_start_is_fatal(self) -> None:
        cursor = Cursor("xy")
        cursor.advance()
        cursor.begin_lexeme()
        with pytest.raises(InternalConsistencyError, match="retract past lexeme start"):
            cursor.retract_one()

    def test_retract_at_origin_is_fatal(self) -> None:
        with pytest.raises(InternalConsistencyError):
            Cursor("x").retract_one()


class TestLexeme:
    """lexeme() is the text between the anchor and the tip."""

    def test_lexeme_tracks_forward(self) -> None:
        cursor = Cursor("count = 1")
        cursor.begin_lexeme()
        for _ in range(5):
            cursor.advance()
        assert cursor.lexeme() == "count"

    def test_begin_lexeme_reanchors(self) -> None:
        cursor = Cursor("ab cd")
        for _ in range(3):
            cursor.advance()
        start = cursor.begin_lexeme()
        assert start == Position(3, 1, 4)
        assert cursor.lexeme() == ""
