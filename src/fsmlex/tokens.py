"""Token and TokenKind definitions for the fsmlex tokenizer.

The tokenizer produces a stream of Token objects that a parser consumes.
Each Token has a kind, the exact source lexeme, a kind-dependent
attribute, and a source position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fsmlex.location import SourceLocation


class TokenKind(Enum):
    """Token categories produced by the tokenizer."""

    KEYWORD = auto()  # reserved word, reclassified from an identifier
    IDENTIFIER = auto()  # user name, interned in the symbol table
    NUMBER = auto()  # 42, 3.14
    OPERATOR = auto()  # = <= &&
    DELIMITER = auto()  # ( ) ; ,
    STRING = auto()  # "text"
    END_OF_INPUT = auto()  # synthetic final token
    ERROR = auto()  # diagnostic category


# Kinds whose tag is the pattern's symbolic name
FIXED_TEXT_KINDS = frozenset({TokenKind.OPERATOR, TokenKind.DELIMITER})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        kind: The token category (from TokenKind enum)
        lexeme: Exact source substring (empty only for END_OF_INPUT)
        attribute: Kind-dependent payload: int/float for NUMBER, the
            SymbolEntry for IDENTIFIER, the unescaped body for STRING,
            the symbolic name for OPERATOR/DELIMITER, the reserved word
            for KEYWORD, None for END_OF_INPUT
        line: Line of the lexeme's first character (1-indexed)
        column: Column of the lexeme's first character (1-indexed)
        offset: Absolute start position in source
        name: Symbolic name for fixed-text tokens (e.g. "LESS_EQUAL")
        recovered: True when the token was repaired by insertion recovery
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    lexeme: str
    attribute: Any
    line: int
    column: int
    offset: int = 0
    name: str | None = None
    recovered: bool = False
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from fsmlex.location import SourceLocation

        loc = SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.offset,
            end_offset=self.offset + len(self.lexeme),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def tag(self) -> str:
        """Parser-facing tag: symbolic name, upper-cased keyword, or kind name."""
        if self.name is not None:
            return self.name
        if self.kind is TokenKind.KEYWORD:
            return self.lexeme.upper()
        return self.kind.name

    @property
    def is_end(self) -> bool:
        return self.kind is TokenKind.END_OF_INPUT

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lexeme = self.lexeme
        if len(lexeme) > 20:
            lexeme = lexeme[:17] + "..."
        flag = " recovered" if self.recovered else ""
        return f"Token({self.tag}, {lexeme!r}, {self.line}:{self.column}{flag})"
