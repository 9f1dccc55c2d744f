"""
fsmlex: Finite-State Lexical Analyzer for Python

A hand-built tokenizer driven by transition diagrams stored as data.
Patterns are tried in a fixed precedence order with mark/reset
backtracking, identifiers are interned into a per-unit symbol table,
and lexical errors are recovered locally (deletion, insertion, panic)
and reported as diagnostics instead of exceptions.

Quick Start:
    >>> from fsmlex import tokenize
    >>> [t.tag for t in tokenize("count = 42;")]
    ['IDENTIFIER', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'END_OF_INPUT']

    >>> # Pull tokens one at a time and inspect diagnostics
    >>> from fsmlex import Tokenizer
    >>> tokenizer = Tokenizer("int x@ = 5;")
    >>> tokens = list(tokenizer)
    >>> tokenizer.diagnostics[0].strategy
    <RecoveryStrategy.DELETION: 'deletion'>

Custom Languages:
    >>> from fsmlex import LexerConfig
    >>> config = LexerConfig.from_dict({
    ...     "keywords": ["let", "fn"],
    ...     "operators": {"=": "ASSIGN", "=>": "FAT_ARROW"},
    ...     "number_format": "integer-only",
    ...     "string_quote_char": "'",
    ... })
    >>> [t.tag for t in tokenize("let f => 'x'", config)]
    ['LET', 'IDENTIFIER', 'FAT_ARROW', 'STRING', 'END_OF_INPUT']

Installation:
    pip install fsmlex              # Core tokenizer (zero deps)
"""

from pathlib import Path

from fsmlex.config import (
    LexerConfig,
    NumberFormat,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from fsmlex.diagnostics import Diagnostic, RecoveryStrategy
from fsmlex.errors import (
    ConfigError,
    FsmlexError,
    InternalConsistencyError,
    PatternTableError,
    TokenizerExhaustedError,
)
from fsmlex.lexer import DriverState, Tokenizer
from fsmlex.lexer.diagrams import build_pattern_table, pattern_table_for
from fsmlex.lexer.patterns import Pattern, PatternTable, PatternTableBuilder
from fsmlex.location import SourceLocation
from fsmlex.symbols import SymbolEntry, SymbolTable
from fsmlex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(
    source: str,
    config: LexerConfig | None = None,
    *,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Lexical errors never raise; use a Tokenizer directly to read the
    diagnostics and the symbol table.

    Args:
        source: Source text
        config: Lexer configuration (defaults to the context's config)
        source_file: Optional source file path for token locations

    Returns:
        All tokens, ending with END_OF_INPUT

    Example:
        >>> [t.lexeme for t in tokenize("x <= 1")]
        ['x', '<=', '1', '']
    """
    return list(Tokenizer(source, config, source_file=source_file).tokenize())


def tokenize_file(
    path: str | Path,
    config: LexerConfig | None = None,
    *,
    encoding: str = "utf-8",
) -> list[Token]:
    """Read and tokenize a source file.

    Args:
        path: Path to the source file
        config: Lexer configuration (defaults to the context's config)
        encoding: Text encoding of the file

    Returns:
        All tokens, ending with END_OF_INPUT

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    source = path.read_text(encoding=encoding)
    return tokenize(source, config, source_file=str(path))


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    "tokenize_file",
    "Tokenizer",
    "DriverState",
    # Tokens
    "Token",
    "TokenKind",
    "SourceLocation",
    # Symbols
    "SymbolEntry",
    "SymbolTable",
    # Diagnostics
    "Diagnostic",
    "RecoveryStrategy",
    # Patterns
    "Pattern",
    "PatternTable",
    "PatternTableBuilder",
    "build_pattern_table",
    "pattern_table_for",
    # Configuration
    "LexerConfig",
    "NumberFormat",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
    # Errors
    "ConfigError",
    "FsmlexError",
    "InternalConsistencyError",
    "PatternTableError",
    "TokenizerExhaustedError",
]
