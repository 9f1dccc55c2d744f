"""Recovery diagnostics emitted alongside the token stream.

Every lexical error produces exactly one Diagnostic. Diagnostics are a
side channel: they never interrupt the token stream and are never raised.

Thread Safety:
Diagnostic is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fsmlex.location import SourceLocation
from fsmlex.tokens import TokenKind


class RecoveryStrategy(Enum):
    """Recovery strategies, in the order they are attempted."""

    DELETION = "deletion"  # drop one noise character
    INSERTION = "insertion"  # synthesize one missing character
    PANIC = "panic"  # drop input up to a synchronizing character


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single lexical error and the recovery applied to it.

    Attributes:
        line: Line of the offending text (1-indexed)
        column: Column of the offending text (1-indexed)
        offset: Absolute offset of the offending text
        offending_text: Source text the error was reported on
        strategy: Recovery strategy that was applied
        inserted: Character synthesized by insertion recovery, if any
        unterminated: True when a string or block comment reached end
            of input before its closing delimiter
        source_file: Source file path (optional)

    """

    line: int
    column: int
    offset: int
    offending_text: str
    strategy: RecoveryStrategy
    inserted: str | None = None
    unterminated: bool = False
    source_file: str | None = None

    @property
    def kind(self) -> TokenKind:
        """Diagnostics are always ERROR-kind records."""
        return TokenKind.ERROR

    @property
    def discarded(self) -> str:
        """Source text removed from the token stream by this recovery."""
        if self.strategy is RecoveryStrategy.INSERTION:
            return ""
        return self.offending_text

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.offset,
            end_offset=self.offset + len(self.offending_text),
            source_file=self.source_file,
        )

    @property
    def message(self) -> str:
        """Human-readable description (not localized)."""
        shown = self.offending_text
        if len(shown) > 20:
            shown = shown[:17] + "..."
        if self.strategy is RecoveryStrategy.INSERTION:
            return f"missing {self.inserted!r} after {shown!r}"
        if self.unterminated:
            return f"unterminated construct {shown!r} discarded"
        if self.strategy is RecoveryStrategy.DELETION:
            return f"unexpected character {shown!r} deleted"
        return f"unrecognized input {shown!r} skipped"

    def __str__(self) -> str:
        return f"{self.location} {self.message} [{self.strategy.value}]"
