"""Keyword and symbol resolution for scanned lexemes.

Turns a scanned lexeme into a Token: identifier-shaped lexemes found in
the keyword set become KEYWORD tokens, other identifiers are interned in
the symbol table, numbers get their numeric value, strings their
unescaped body.
"""

from __future__ import annotations

from typing import Any

from fsmlex.symbols import SymbolTable
from fsmlex.tokens import FIXED_TEXT_KINDS, Token, TokenKind

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def unescape(body: str, quote: str = '"') -> str:
    """Process backslash escapes in a string body.

    Unknown escapes keep the escaped character (``\\q`` -> ``q``).
    """
    if "\\" not in body:
        return body

    parts: list[str] = []
    i = 0
    body_len = len(body)
    while i < body_len:
        char = body[i]
        if char == "\\" and i + 1 < body_len:
            escaped = body[i + 1]
            parts.append(quote if escaped == quote else _ESCAPES.get(escaped, escaped))
            i += 2
        else:
            parts.append(char)
            i += 1
    return "".join(parts)


class Resolver:
    """Builds tokens from scanned lexemes.

    Owns no state of its own: the keyword set is shared and read-only,
    the symbol table belongs to the tokenizer that created the resolver.
    """

    __slots__ = ("_keywords", "_symbols", "_quote", "_source_file")

    def __init__(
        self,
        keywords: frozenset[str],
        symbols: SymbolTable,
        string_quote_char: str = '"',
        source_file: str | None = None,
    ) -> None:
        self._keywords = keywords
        self._symbols = symbols
        self._quote = string_quote_char
        self._source_file = source_file

    def resolve(
        self,
        lexeme: str,
        kind: TokenKind,
        *,
        line: int,
        column: int,
        offset: int,
        token_name: str | None = None,
        recovered: bool = False,
    ) -> Token:
        """Create the token for a lexeme scanned as kind.

        Args:
            lexeme: Exact source text
            kind: Kind of the pattern that accepted the lexeme
            line: Line of the first character
            column: Column of the first character
            offset: Offset of the first character
            token_name: Symbolic name for fixed-text kinds
            recovered: Whether insertion recovery produced the lexeme

        Returns:
            The resolved Token
        """
        attribute: Any = None

        if kind is TokenKind.IDENTIFIER:
            if lexeme in self._keywords:
                kind = TokenKind.KEYWORD
                attribute = lexeme
            else:
                attribute = self._symbols.insert(lexeme, line, column)
        elif kind is TokenKind.NUMBER:
            attribute = float(lexeme) if "." in lexeme else int(lexeme)
        elif kind is TokenKind.STRING:
            attribute = unescape(lexeme[1:-1], self._quote)
        elif kind in FIXED_TEXT_KINDS:
            attribute = token_name

        return Token(
            kind=kind,
            lexeme=lexeme,
            attribute=attribute,
            line=line,
            column=column,
            offset=offset,
            name=token_name if kind in FIXED_TEXT_KINDS else None,
            recovered=recovered,
            _source_file=self._source_file,
        )
