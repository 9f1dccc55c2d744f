"""State-machine scanner mixin.

Tries each pattern's transition diagram in precedence order from the
lexeme start. The first pattern that reaches an accepting state wins;
precedence, not lexeme length, breaks ties between patterns.

Within one pattern the scanner keeps the longest accepting prefix: it
remembers the last position at which the diagram was accepting and
backtracks there when the walk stops in a non-accepting state.
"""

from __future__ import annotations

from dataclasses import dataclass

from fsmlex.charsets import EOF_CHAR
from fsmlex.lexer.cursor import Cursor, Position
from fsmlex.lexer.patterns import Pattern, PatternTable


@dataclass(frozen=True, slots=True)
class Match:
    """A successful scan: pattern plus the lexeme it accepted."""

    pattern: Pattern
    lexeme: str
    start: Position


@dataclass(frozen=True, slots=True)
class Attempt:
    """Where a failed pattern's walk stopped.

    Attributes:
        pattern: The pattern that failed
        state: Diagram state when no transition remained
        stop: Cursor position of the first character without a transition
        committed: The walk entered a commit state (unterminated construct)
    """

    pattern: Pattern
    state: int
    stop: Position
    committed: bool


@dataclass(frozen=True, slots=True)
class ScanFailure:
    """No pattern accepted any prefix at start."""

    start: Position
    attempts: tuple[Attempt, ...]

    @property
    def unterminated(self) -> Attempt | None:
        """The committed attempt, if an unterminated construct caused the failure."""
        for attempt in self.attempts:
            if attempt.committed:
                return attempt
        return None


class StateMachineScannerMixin:
    """Mixin providing pattern-driven scanning over a Cursor."""

    __slots__ = ()

    # These will be set by the Tokenizer class
    _cursor: Cursor
    _table: PatternTable

    def _scan(self) -> Match | ScanFailure:
        """Scan one lexeme starting at the cursor's lexeme start.

        On success the cursor's forward tip sits just past the lexeme.
        On failure it is reset to the lexeme start.
        """
        cursor = self._cursor
        start = cursor.lexeme_start
        attempts: list[Attempt] = []

        for pattern in self._table.patterns_in_precedence_order():
            cursor.reset_to(start)
            state, last_accept, committed = self._walk(pattern, pattern.start)

            if pattern.is_accepting(state):
                return Match(pattern, cursor.lexeme(), start)
            if last_accept is not None:
                cursor.reset_to(last_accept)
                return Match(pattern, cursor.lexeme(), start)

            attempts.append(Attempt(pattern, state, cursor.mark(), committed))
            cursor.reset_to(start)
            if committed:
                # The opening delimiter was read; no later pattern may claim it
                break

        return ScanFailure(start, tuple(attempts))

    def _walk(self, pattern: Pattern, state: int) -> tuple[int, Position | None, bool]:
        """Follow transitions from state until none applies.

        A lookahead character without a transition is handed back with
        retract_one(), so it starts the next lexeme.

        Returns:
            (final state, last accepting position or None, committed)
        """
        cursor = self._cursor
        last_accept = cursor.mark() if pattern.is_accepting(state) else None
        committed = state in pattern.commit_states

        while pattern.has_exits(state):
            char = cursor.advance()
            if char == EOF_CHAR:
                break
            target = pattern.step(state, char)
            if target is None:
                cursor.retract_one()
                break
            state = target
            if state in pattern.commit_states:
                committed = True
            if pattern.is_accepting(state):
                last_accept = cursor.mark()

        return state, last_accept, committed
