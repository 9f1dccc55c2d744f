"""Error recovery mixin.

Invoked when no pattern accepts at the lexeme start. Strategies are
applied in order, first applicable wins:

1. Deletion: the offending character cannot begin any pattern; drop it.
2. Insertion: one synthesized character completes exactly one pattern;
   emit that pattern's token, marked recovered. The synthesized
   character is never written back into the source.
3. Panic: drop the offending character and everything after it up to
   the next character that can begin a pattern. Unterminated strings
   and block comments synchronize on end of input instead.

Every recovery emits exactly one Diagnostic and consumes at least one
character, so the tokenizer always terminates.
"""

from __future__ import annotations

from dataclasses import dataclass

from fsmlex.diagnostics import Diagnostic, RecoveryStrategy
from fsmlex.lexer.cursor import Cursor, Position
from fsmlex.lexer.patterns import Pattern, PatternTable
from fsmlex.lexer.resolver import Resolver
from fsmlex.lexer.scanner import Attempt, ScanFailure
from fsmlex.tokens import Token
from fsmlex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RecoveryOutcome:
    """The diagnostic for one recovery, plus the repaired token if any."""

    diagnostic: Diagnostic
    token: Token | None = None


@dataclass(frozen=True, slots=True)
class _Repair:
    pattern: Pattern
    inserted: str
    stop: Position
    end: Position


class RecoveryMixin:
    """Mixin providing the deletion / insertion / panic recovery policy."""

    __slots__ = ()

    # These will be set by the Tokenizer class
    _cursor: Cursor
    _table: PatternTable
    _resolver: Resolver
    _source_file: str | None

    def _walk(self, pattern: Pattern, state: int) -> tuple[int, Position | None, bool]:
        """Follow transitions from state. Implemented by the scanner mixin."""
        raise NotImplementedError

    def _recover(self, failure: ScanFailure) -> RecoveryOutcome:
        """Apply the first applicable strategy at failure.start."""
        cursor = self._cursor
        start = failure.start
        cursor.reset_to(start)

        if not self._table.can_start(cursor.peek()):
            outcome = self._recover_by_deletion(start)
        elif failure.unterminated is not None:
            outcome = self._recover_by_panic(start, to_end=True)
        else:
            repair = self._find_repair(failure)
            if repair is not None:
                outcome = self._recover_by_insertion(start, repair)
            else:
                outcome = self._recover_by_panic(start, to_end=False)

        diagnostic = outcome.diagnostic
        logger.debug(
            "Recovered by %s at %d:%d (%r)",
            diagnostic.strategy.value,
            diagnostic.line,
            diagnostic.column,
            diagnostic.offending_text,
        )
        return outcome

    def _recover_by_deletion(self, start: Position) -> RecoveryOutcome:
        self._cursor.advance()
        return RecoveryOutcome(
            self._diagnostic(start, self._cursor.lexeme(), RecoveryStrategy.DELETION)
        )

    def _recover_by_panic(self, start: Position, *, to_end: bool) -> RecoveryOutcome:
        cursor = self._cursor
        table = self._table

        cursor.advance()
        while not cursor.at_end and (to_end or not table.can_start(cursor.peek())):
            cursor.advance()

        return RecoveryOutcome(
            self._diagnostic(
                start, cursor.lexeme(), RecoveryStrategy.PANIC, unterminated=to_end
            )
        )

    def _find_repair(self, failure: ScanFailure) -> _Repair | None:
        """Find the single pattern that one inserted character would complete.

        Only the stop point of each failed walk is considered. Returns
        None when no pattern, or more than one, can be repaired.
        """
        cursor = self._cursor
        repairs: list[_Repair] = []

        for attempt in failure.attempts:
            if attempt.committed or attempt.pattern.discard:
                continue
            if attempt.stop.offset <= failure.start.offset:
                continue
            repair = self._repair_attempt(attempt)
            if repair is not None:
                repairs.append(repair)

        cursor.reset_to(failure.start)
        if len(repairs) != 1:
            return None
        return repairs[0]

    def _repair_attempt(self, attempt: Attempt) -> _Repair | None:
        cursor = self._cursor
        pattern = attempt.pattern

        for char, target in pattern.exact_exits(attempt.state):
            cursor.reset_to(attempt.stop)
            state, last_accept, _ = self._walk(pattern, target)
            if pattern.is_accepting(state):
                return _Repair(pattern, char, attempt.stop, cursor.mark())
            if last_accept is not None:
                return _Repair(pattern, char, attempt.stop, last_accept)
        return None

    def _recover_by_insertion(self, start: Position, repair: _Repair) -> RecoveryOutcome:
        cursor = self._cursor
        cursor.reset_to(repair.end)
        lexeme = cursor.lexeme()
        pattern = repair.pattern

        token = self._resolver.resolve(
            lexeme,
            pattern.kind,  # type: ignore[arg-type]
            line=start.line,
            column=start.column,
            offset=start.offset,
            token_name=pattern.token_name,
            recovered=True,
        )
        diagnostic = self._diagnostic(
            start, lexeme, RecoveryStrategy.INSERTION, inserted=repair.inserted
        )
        return RecoveryOutcome(diagnostic, token)

    def _diagnostic(
        self,
        start: Position,
        text: str,
        strategy: RecoveryStrategy,
        *,
        inserted: str | None = None,
        unterminated: bool = False,
    ) -> Diagnostic:
        return Diagnostic(
            line=start.line,
            column=start.column,
            offset=start.offset,
            offending_text=text,
            strategy=strategy,
            inserted=inserted,
            unterminated=unterminated,
            source_file=self._source_file,
        )
