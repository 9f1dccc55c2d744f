"""Pull-based tokenizer driver.

The driver is a two-state machine (SCANNING, DONE). Each call to
next_token() skips whitespace and comments, then returns one complete
token: a resolved lexeme, a token repaired by insertion recovery, or the
single END_OF_INPUT sentinel. Lexical errors never escape; they are
recorded as diagnostics.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
All mutable state (cursor, symbol table, diagnostics) is instance-local;
the pattern table is immutable and shared.

"""

from __future__ import annotations

from collections.abc import Iterator

from fsmlex.config import LexerConfig, get_lexer_config
from fsmlex.diagnostics import Diagnostic
from fsmlex.errors import TokenizerExhaustedError
from fsmlex.lexer.cursor import Cursor
from fsmlex.lexer.diagrams import pattern_table_for
from fsmlex.lexer.modes import DriverState
from fsmlex.lexer.patterns import PatternTable
from fsmlex.lexer.recovery import RecoveryMixin
from fsmlex.lexer.resolver import Resolver
from fsmlex.lexer.scanner import Match, StateMachineScannerMixin
from fsmlex.symbols import SymbolTable
from fsmlex.tokens import Token, TokenKind


class Tokenizer(
    StateMachineScannerMixin,
    RecoveryMixin,
):
    """Finite-state tokenizer with symbol interning and error recovery.

    Usage:
            >>> tokenizer = Tokenizer("count = 42;")
            >>> [t.tag for t in tokenizer.tokenize()]
            ['IDENTIFIER', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'END_OF_INPUT']
            >>> tokenizer.diagnostics
            ()

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_table",
        "_cursor",
        "_symbols",
        "_resolver",
        "_diagnostics",
        "_state",
    )

    def __init__(
        self,
        source: str,
        config: LexerConfig | None = None,
        *,
        source_file: str | None = None,
        symbols: SymbolTable | None = None,
        pattern_table: PatternTable | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Already-decoded source text
            config: Lexer configuration (defaults to the context's config)
            source_file: Optional source file path for diagnostics
            symbols: Symbol table to intern identifiers into (a fresh
                table by default)
            pattern_table: Prebuilt table; overrides config when given

        Raises:
            ConfigError: If config is inconsistent
        """
        if pattern_table is None:
            pattern_table = pattern_table_for(config if config is not None else get_lexer_config())

        self._source = source
        self._source_file = source_file
        self._table = pattern_table
        self._cursor = Cursor(source)
        self._symbols = symbols if symbols is not None else SymbolTable()
        self._resolver = Resolver(
            pattern_table.keywords,
            self._symbols,
            pattern_table.string_quote_char,
            source_file,
        )
        self._diagnostics: list[Diagnostic] = []
        self._state = DriverState.SCANNING

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def symbols(self) -> SymbolTable:
        return self._symbols

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Recovery records emitted so far, in source order."""
        return tuple(self._diagnostics)

    @property
    def pattern_table(self) -> PatternTable:
        return self._table

    def next_token(self) -> Token:
        """Produce the next token.

        Returns:
            The next Token; the last one is END_OF_INPUT

        Raises:
            TokenizerExhaustedError: If END_OF_INPUT was already returned
        """
        if self._state is DriverState.DONE:
            raise TokenizerExhaustedError("END_OF_INPUT already emitted; create a new Tokenizer")

        cursor = self._cursor
        while True:
            start = cursor.begin_lexeme()
            if cursor.at_end:
                self._state = DriverState.DONE
                return Token(
                    kind=TokenKind.END_OF_INPUT,
                    lexeme="",
                    attribute=None,
                    line=start.line,
                    column=start.column,
                    offset=start.offset,
                    _source_file=self._source_file,
                )

            result = self._scan()
            if isinstance(result, Match):
                pattern = result.pattern
                if pattern.discard:
                    continue
                return self._resolver.resolve(
                    result.lexeme,
                    pattern.kind,  # type: ignore[arg-type]
                    line=start.line,
                    column=start.column,
                    offset=start.offset,
                    token_name=pattern.token_name,
                )

            outcome = self._recover(result)
            self._diagnostics.append(outcome.diagnostic)
            if outcome.token is not None:
                return outcome.token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining source into a token stream.

        Yields:
            Token objects one at a time, ending with END_OF_INPUT

        Complexity: bounded by len(source) scan steps per pattern
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        while self._state is DriverState.SCANNING:
            yield self.next_token()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._state is DriverState.DONE:
            raise StopIteration
        return self.next_token()
