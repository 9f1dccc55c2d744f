"""ContextVar-based lexer configuration for fsmlex.

The pattern table and keyword set are static configuration supplied at
tokenizer construction. A Tokenizer built without an explicit config
reads the configuration of the current context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed. LexerConfig itself is frozen and hashable.

Usage:
    from fsmlex.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(keywords=frozenset({"let"}))):
        tokens = tokenize("let x = 1;")

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum

from fsmlex.charsets import is_identifier_shaped
from fsmlex.errors import ConfigError


class NumberFormat(Enum):
    """Accepted numeric literal shapes."""

    INTEGER_ONLY = "integer-only"
    INTEGER_AND_FLOAT = "integer-and-float"


DEFAULT_KEYWORDS: frozenset[str] = frozenset(
    {
        "if",
        "else",
        "while",
        "for",
        "do",
        "return",
        "break",
        "continue",
        "int",
        "float",
        "char",
        "void",
        "bool",
        "true",
        "false",
        "struct",
        "const",
    }
)

DEFAULT_OPERATORS: tuple[tuple[str, str], ...] = (
    ("==", "EQUAL"),
    ("!=", "NOT_EQUAL"),
    ("<=", "LESS_EQUAL"),
    (">=", "GREATER_EQUAL"),
    ("&&", "LOGICAL_AND"),
    ("||", "LOGICAL_OR"),
    ("++", "INCREMENT"),
    ("--", "DECREMENT"),
    ("+=", "PLUS_ASSIGN"),
    ("-=", "MINUS_ASSIGN"),
    ("*=", "MULTIPLY_ASSIGN"),
    ("/=", "DIVIDE_ASSIGN"),
    ("->", "ARROW"),
    ("=", "ASSIGN"),
    ("<", "LESS"),
    (">", "GREATER"),
    ("+", "PLUS"),
    ("-", "MINUS"),
    ("*", "MULTIPLY"),
    ("/", "DIVIDE"),
    ("%", "MODULO"),
    ("!", "LOGICAL_NOT"),
)

DEFAULT_DELIMITERS: tuple[tuple[str, str], ...] = (
    ("(", "LEFT_PAREN"),
    (")", "RIGHT_PAREN"),
    ("{", "LEFT_BRACE"),
    ("}", "RIGHT_BRACE"),
    ("[", "LEFT_BRACKET"),
    ("]", "RIGHT_BRACKET"),
    (";", "SEMICOLON"),
    (",", "COMMA"),
    (":", "COLON"),
)


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Frozen and hashable, so pattern tables can be cached per config.

    Attributes:
        keywords: Reserved words, reclassified from identifier lexemes
        operators: (text, name) pairs for fixed-text operators
        delimiters: (text, name) pairs for fixed-text delimiters
        number_format: Whether NUMBER accepts a radix point
        string_quote_char: Opening and closing quote of STRING literals

    """

    keywords: frozenset[str] = DEFAULT_KEYWORDS
    operators: tuple[tuple[str, str], ...] = DEFAULT_OPERATORS
    delimiters: tuple[tuple[str, str], ...] = DEFAULT_DELIMITERS
    number_format: NumberFormat = NumberFormat.INTEGER_AND_FLOAT
    string_quote_char: str = '"'

    def __post_init__(self) -> None:
        # Plain sets and lists would make the config unhashable
        object.__setattr__(self, "keywords", frozenset(self.keywords))
        object.__setattr__(self, "operators", _as_pairs(self.operators))
        object.__setattr__(self, "delimiters", _as_pairs(self.delimiters))

    @classmethod
    def from_dict(cls, config_dict: Mapping) -> LexerConfig:
        """Create LexerConfig from a plain mapping.

        Unknown keys are silently ignored. Operators and delimiters may be
        given as dicts (insertion order is kept) or as pair sequences;
        keywords as any iterable; number_format as a NumberFormat or its
        string value. Collections are normalized by the constructor.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "keywords": ["let", "fn"],
            ...     "number_format": "integer-only",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.number_format
            <NumberFormat.INTEGER_ONLY: 'integer-only'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        if "number_format" in filtered:
            try:
                filtered["number_format"] = NumberFormat(filtered["number_format"])
            except ValueError as e:
                raise ConfigError(
                    f"Unknown number_format {filtered['number_format']!r}"
                ) from e
        return cls(**filtered)

    def fixed_texts(self) -> Iterator[str]:
        """Iterate all operator and delimiter texts in declaration order."""
        for text, _ in self.operators:
            yield text
        for text, _ in self.delimiters:
            yield text

    def validate(self) -> LexerConfig:
        """Check the configuration is consistent.

        Returns:
            Self, for chaining

        Raises:
            ConfigError: On the first inconsistency found
        """
        quote = self.string_quote_char
        if len(quote) != 1 or quote.isalnum() or quote.isspace() or quote in "_/\\":
            raise ConfigError(
                f"string_quote_char must be one punctuation character, got {quote!r}"
            )

        seen: set[str] = set()
        for text in self.fixed_texts():
            if not text or any(c.isspace() for c in text):
                raise ConfigError(f"Invalid fixed-text pattern {text!r}")
            if text in seen:
                raise ConfigError(f"Duplicate fixed-text pattern {text!r}")
            if quote in text:
                raise ConfigError(
                    f"Fixed-text pattern {text!r} contains the string quote character"
                )
            seen.add(text)

        for keyword in self.keywords:
            if not is_identifier_shaped(keyword):
                raise ConfigError(f"Keyword {keyword!r} is not identifier-shaped")

        return self


def _as_pairs(value: Mapping[str, str] | Iterable) -> tuple[tuple[str, str], ...]:
    if isinstance(value, Mapping):
        return tuple((str(k), str(v)) for k, v in value.items())
    return tuple((str(k), str(v)) for k, v in value)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (context-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for the current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to the default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(keywords=frozenset())):
        ...     tokens = tokenize("if x")
        ...     # "if" is an identifier here

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "DEFAULT_DELIMITERS",
    "DEFAULT_KEYWORDS",
    "DEFAULT_OPERATORS",
    "LexerConfig",
    "NumberFormat",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
]
