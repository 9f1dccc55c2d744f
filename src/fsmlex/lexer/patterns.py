"""Pattern definitions and the precedence-ordered pattern table.

A Pattern is a transition diagram stored as data: a mapping from
``(state, symbol)`` to the next state, a start state, and a set of
accepting states. Symbols are exact characters, CharClass members, or
Wildcard members, looked up in that order.

Thread Safety:
Pattern and PatternTable are immutable after creation. Safe to share.
Use PatternTableBuilder for mutable construction.

Example:
    >>> from fsmlex.lexer.diagrams import identifier_pattern
    >>> builder = PatternTableBuilder(keywords=frozenset({"if"}))
    >>> table = builder.add(identifier_pattern()).build()
    >>> [p.name for p in table.patterns_in_precedence_order()]
    ['identifier']
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Union

from fsmlex.charsets import NEWLINE, CharClass, Wildcard, classify
from fsmlex.errors import PatternTableError
from fsmlex.tokens import FIXED_TEXT_KINDS, TokenKind

TransitionKey = Union[str, CharClass, Wildcard]
Transitions = Mapping[tuple[int, TransitionKey], int]


@dataclass(frozen=True, slots=True, eq=False)
class Pattern:
    """Immutable transition diagram for one token family.

    Attributes:
        name: Unique pattern name within a table
        kind: TokenKind produced, or None for discarded patterns
        transitions: ``(state, symbol) -> next state``
        start: Start state
        accepting: States in which the lexeme read so far is complete
        rank: Precedence rank (lower is tried first); set by the builder
        commit_states: States after which a failure means the construct
            is unterminated rather than a mismatch
        discard: Whitespace/comment patterns that produce no token
        token_name: Symbolic name for fixed-text tokens (e.g. "LESS_EQUAL")
        text: The fixed text, for fixed-text patterns

    Raises:
        PatternTableError: If the diagram is inconsistent

    """

    name: str
    kind: TokenKind | None
    transitions: Transitions
    start: int
    accepting: frozenset[int]
    rank: int = 0
    commit_states: frozenset[int] = frozenset()
    discard: bool = False
    token_name: str | None = None
    text: str | None = None
    # Derived index of outgoing symbols per state
    _exits: Mapping[int, tuple[TransitionKey, ...]] | None = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "transitions", MappingProxyType(dict(self.transitions)))

        exits: dict[int, list[TransitionKey]] = {}
        defined = {self.start}
        for (state, symbol), target in self.transitions.items():
            exits.setdefault(state, []).append(symbol)
            defined.add(state)
            defined.add(target)
        object.__setattr__(
            self, "_exits", MappingProxyType({s: tuple(k) for s, k in exits.items()})
        )

        if self.start not in exits:
            raise PatternTableError(self.name, "start state has no transitions")
        if self.start in self.accepting:
            raise PatternTableError(self.name, "start state must not be accepting")
        if not self.accepting:
            raise PatternTableError(self.name, "no accepting states")
        missing = (self.accepting | self.commit_states) - defined
        if missing:
            raise PatternTableError(
                self.name, f"states {sorted(missing)} are not defined by the diagram"
            )
        if self.discard != (self.kind is None):
            raise PatternTableError(
                self.name, "discarded patterns must have no kind and vice versa"
            )
        if (self.kind in FIXED_TEXT_KINDS) != (self.token_name is not None):
            raise PatternTableError(
                self.name, "operator and delimiter patterns need a token_name"
            )

    def step(self, state: int, char: str) -> int | None:
        """Follow the transition for char, or return None if there is none."""
        transitions = self.transitions
        target = transitions.get((state, char))
        if target is not None:
            return target
        target = transitions.get((state, classify(char)))
        if target is not None:
            return target
        if char != NEWLINE:
            target = transitions.get((state, Wildcard.NOT_NEWLINE))
            if target is not None:
                return target
        return transitions.get((state, Wildcard.ANY))

    def has_exits(self, state: int) -> bool:
        return state in (self._exits or {})

    def is_accepting(self, state: int) -> bool:
        return state in self.accepting

    def exact_exits(self, state: int) -> Iterator[tuple[str, int]]:
        """Yield (character, target) for exact-character transitions from state."""
        for symbol in (self._exits or {}).get(state, ()):
            if isinstance(symbol, str):
                yield symbol, self.transitions[(state, symbol)]

    def can_start(self, char: str) -> bool:
        """Check whether char has a transition out of the start state."""
        return self.step(self.start, char) is not None

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, rank={self.rank})"


class PatternTable:
    """Immutable, precedence-ordered collection of patterns.

    Also carries the keyword set and string quote character, the other
    static configuration shared by every tokenizer using this table.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_patterns", "_by_name", "_keywords", "_string_quote_char")

    def __init__(
        self,
        patterns: tuple[Pattern, ...],
        keywords: frozenset[str],
        string_quote_char: str,
    ) -> None:
        """Initialize table with ranked patterns.

        Use PatternTableBuilder to create instances.
        """
        self._patterns = patterns
        self._by_name = {p.name: p for p in patterns}
        self._keywords = keywords
        self._string_quote_char = string_quote_char

    def patterns_in_precedence_order(self) -> tuple[Pattern, ...]:
        return self._patterns

    def get(self, name: str) -> Pattern | None:
        """Get pattern by name, or None if absent."""
        return self._by_name.get(name)

    def can_start(self, char: str) -> bool:
        """Check whether any pattern can begin with char."""
        return any(p.can_start(char) for p in self._patterns)

    @property
    def keywords(self) -> frozenset[str]:
        return self._keywords

    @property
    def string_quote_char(self) -> str:
        return self._string_quote_char

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternTable({len(self._patterns)} patterns)"


class PatternTableBuilder:
    """Mutable builder for PatternTable.

    Precedence order assigned by build():
    1. Discarded patterns (whitespace, comments), in registration order
    2. Fixed-text patterns, longest text first (stable for equal length),
       so ``<=`` is tried before ``<``
    3. Every other pattern, in registration order

    Comments come before fixed-text operators because their openers
    (``//``, ``/*``) would otherwise be split by a shorter operator.

    Example:
        >>> from fsmlex.lexer.diagrams import fixed_text_pattern
        >>> builder = PatternTableBuilder()
        >>> _ = builder.add(fixed_text_pattern("<", "LESS", TokenKind.OPERATOR))
        >>> _ = builder.add(fixed_text_pattern("<=", "LESS_EQUAL", TokenKind.OPERATOR))
        >>> [p.text for p in builder.build()]
        ['<=', '<']
    """

    __slots__ = ("_patterns", "_names", "_keywords", "_string_quote_char")

    def __init__(
        self,
        keywords: frozenset[str] = frozenset(),
        string_quote_char: str = '"',
    ) -> None:
        self._patterns: list[Pattern] = []
        self._names: set[str] = set()
        self._keywords = keywords
        self._string_quote_char = string_quote_char

    def add(self, pattern: Pattern) -> PatternTableBuilder:
        """Register a pattern.

        Returns:
            Self for chaining

        Raises:
            PatternTableError: If a pattern with the same name was registered
        """
        if pattern.name in self._names:
            raise PatternTableError(pattern.name, "registered twice")
        self._names.add(pattern.name)
        self._patterns.append(pattern)
        return self

    def build(self) -> PatternTable:
        """Rank the registered patterns and create an immutable table."""
        if not self._patterns:
            raise PatternTableError("<table>", "no patterns registered")

        discarded = [p for p in self._patterns if p.discard]
        fixed = [p for p in self._patterns if not p.discard and p.text is not None]
        others = [p for p in self._patterns if not p.discard and p.text is None]
        # sorted() is stable, so equal-length texts keep declaration order
        fixed = sorted(fixed, key=lambda p: -len(p.text or ""))

        ordered = tuple(
            replace(p, rank=rank) for rank, p in enumerate(discarded + fixed + others)
        )
        return PatternTable(ordered, self._keywords, self._string_quote_char)
