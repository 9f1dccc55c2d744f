"""Transition diagrams for each token family, and the table built from them.

Each factory returns a Pattern whose diagram is plain data. Keywords have
no diagram of their own: they are scanned by the identifier diagram and
reclassified by the resolver, which keeps the state machine small.

Diagrams (``*`` marks accepting states, ``!`` commit states):

    identifier      0 -[letter _]-> 1*  1 -[letter digit _]-> 1*
    number          0 -digit-> 1*  1 -digit-> 1*
                    1 -'.'-> 2  2 -digit-> 3*  3 -digit-> 3*   (float only)
    string          0 -q-> 1!  1 -'\\'-> 2!  2 -any-> 1!  1 -q-> 3*  1 -any-> 1!
    whitespace      0 -[blank newline]-> 1*  (loops)
    line comment    0 -'/'-> 1 -'/'-> 2*  2 -not newline-> 2*
    block comment   0 -'/'-> 1 -'*'-> 2!  2 -'*'-> 3!  3 -'/'-> 4*
                    2 -any-> 2!  3 -'*'-> 3!  3 -any-> 2!
"""

from __future__ import annotations

from functools import lru_cache

from fsmlex.charsets import CharClass, Wildcard
from fsmlex.config import LexerConfig, NumberFormat
from fsmlex.lexer.patterns import Pattern, PatternTable, PatternTableBuilder
from fsmlex.tokens import TokenKind
from fsmlex.utils.logger import get_logger

logger = get_logger(__name__)


def fixed_text_pattern(text: str, token_name: str, kind: TokenKind) -> Pattern:
    """Diagram accepting exactly ``text``: a chain of len(text) states."""
    transitions = {(i, char): i + 1 for i, char in enumerate(text)}
    return Pattern(
        name=repr(text),
        kind=kind,
        transitions=transitions,
        start=0,
        accepting=frozenset({len(text)}),
        token_name=token_name,
        text=text,
    )


def identifier_pattern() -> Pattern:
    return Pattern(
        name="identifier",
        kind=TokenKind.IDENTIFIER,
        transitions={
            (0, CharClass.LETTER): 1,
            (0, CharClass.UNDERSCORE): 1,
            (1, CharClass.LETTER): 1,
            (1, CharClass.DIGIT): 1,
            (1, CharClass.UNDERSCORE): 1,
        },
        start=0,
        accepting=frozenset({1}),
    )


def number_pattern(number_format: NumberFormat) -> Pattern:
    """Decimal integers, plus ``digits.digits`` floats when enabled.

    A radix point must be followed by at least one digit; ``3.`` is
    scanned as ``3`` with the ``.`` left for the next token.
    """
    transitions: dict = {
        (0, CharClass.DIGIT): 1,
        (1, CharClass.DIGIT): 1,
    }
    accepting = {1}
    if number_format is NumberFormat.INTEGER_AND_FLOAT:
        transitions[(1, ".")] = 2
        transitions[(2, CharClass.DIGIT)] = 3
        transitions[(3, CharClass.DIGIT)] = 3
        accepting.add(3)
    return Pattern(
        name="number",
        kind=TokenKind.NUMBER,
        transitions=transitions,
        start=0,
        accepting=frozenset(accepting),
    )


def string_pattern(quote: str) -> Pattern:
    """Quoted string with backslash escapes; may span lines."""
    return Pattern(
        name="string",
        kind=TokenKind.STRING,
        transitions={
            (0, quote): 1,
            (1, "\\"): 2,
            (1, quote): 3,
            (1, Wildcard.ANY): 1,
            (2, Wildcard.ANY): 1,
        },
        start=0,
        accepting=frozenset({3}),
        commit_states=frozenset({1, 2}),
    )


def whitespace_pattern() -> Pattern:
    return Pattern(
        name="whitespace",
        kind=None,
        transitions={
            (0, CharClass.BLANK): 1,
            (0, CharClass.NEWLINE): 1,
            (1, CharClass.BLANK): 1,
            (1, CharClass.NEWLINE): 1,
        },
        start=0,
        accepting=frozenset({1}),
        discard=True,
    )


def line_comment_pattern() -> Pattern:
    """``//`` up to, not including, the next newline."""
    return Pattern(
        name="line_comment",
        kind=None,
        transitions={
            (0, "/"): 1,
            (1, "/"): 2,
            (2, Wildcard.NOT_NEWLINE): 2,
        },
        start=0,
        accepting=frozenset({2}),
        discard=True,
    )


def block_comment_pattern() -> Pattern:
    """``/* ... */``, not nested; may span lines."""
    return Pattern(
        name="block_comment",
        kind=None,
        transitions={
            (0, "/"): 1,
            (1, "*"): 2,
            (2, "*"): 3,
            (2, Wildcard.ANY): 2,
            (3, "/"): 4,
            (3, "*"): 3,
            (3, Wildcard.ANY): 2,
        },
        start=0,
        accepting=frozenset({4}),
        commit_states=frozenset({2, 3}),
        discard=True,
    )


def build_pattern_table(config: LexerConfig) -> PatternTable:
    """Build the pattern table for a configuration.

    Raises:
        ConfigError: If the configuration is inconsistent
    """
    config.validate()

    builder = PatternTableBuilder(
        keywords=config.keywords,
        string_quote_char=config.string_quote_char,
    )
    builder.add(whitespace_pattern())
    builder.add(line_comment_pattern())
    builder.add(block_comment_pattern())
    for text, name in config.operators:
        builder.add(fixed_text_pattern(text, name, TokenKind.OPERATOR))
    for text, name in config.delimiters:
        builder.add(fixed_text_pattern(text, name, TokenKind.DELIMITER))
    builder.add(identifier_pattern())
    builder.add(number_pattern(config.number_format))
    builder.add(string_pattern(config.string_quote_char))

    table = builder.build()
    logger.debug(
        "Built pattern table: %d patterns, %d keywords, numbers=%s",
        len(table),
        len(table.keywords),
        config.number_format.value,
    )
    return table


@lru_cache(maxsize=32)
def pattern_table_for(config: LexerConfig) -> PatternTable:
    """Shared, read-only pattern table for config (cached per config)."""
    return build_pattern_table(config)
