"""Tests for precedence-ordered, backtracking pattern scanning."""

from __future__ import annotations

import pytest

from fsmlex import LexerConfig, NumberFormat, Tokenizer, tokenize
from fsmlex.lexer.scanner import Match, ScanFailure
from fsmlex.tokens import TokenKind


def tags(source: str, config: LexerConfig | None = None) -> list[str]:
    return [t.tag for t in tokenize(source, config)]


def lexemes(source: str, config: LexerConfig | None = None) -> list[str]:
    return [t.lexeme for t in tokenize(source, config)]


class TestFixedTextPrecedence:
    """Longer operators are tried before their prefixes."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("a<=b", "LESS_EQUAL"),
            ("a<b", "LESS"),
            ("a==b", "EQUAL"),
            ("a=b", "ASSIGN"),
            ("a!=b", "NOT_EQUAL"),
            ("!a", "LOGICAL_NOT"),
            ("a->b", "ARROW"),
            ("a-b", "MINUS"),
            ("a/=b", "DIVIDE_ASSIGN"),
        ],
    )
    def test_operator(self, source: str, expected: str) -> None:
        assert expected in tags(source)

    def test_operator_runs_split_greedily(self) -> None:
        """``<==`` is ``<=`` then ``=``, never ``<`` then ``==``."""
        assert lexemes("a<==b") == ["a", "<=", "=", "b", ""]

    def test_increment_then_plus(self) -> None:
        assert lexemes("a+++b") == ["a", "++", "+", "b", ""]

    def test_delimiters(self) -> None:
        assert tags("f(a, b[0]);") == [
            "IDENTIFIER",
            "LEFT_PAREN",
            "IDENTIFIER",
            "COMMA",
            "IDENTIFIER",
            "LEFT_BRACKET",
            "NUMBER",
            "RIGHT_BRACKET",
            "RIGHT_PAREN",
            "SEMICOLON",
            "END_OF_INPUT",
        ]

    def test_operator_and_delimiter_kinds(self) -> None:
        tokens = tokenize("x;")
        assert tokens[1].kind is TokenKind.DELIMITER
        assert tokenize("x+")[1].kind is TokenKind.OPERATOR


class TestLongestAcceptingPrefix:
    """Within one pattern the scanner keeps the longest accepting prefix."""

    def test_identifier_is_maximal(self) -> None:
        assert lexemes("abc_12 x") == ["abc_12", "x", ""]

    def test_number_then_identifier(self) -> None:
        assert lexemes("12ab") == ["12", "ab", ""]

    def test_float(self) -> None:
        token = tokenize("3.14")[0]
        assert token.kind is TokenKind.NUMBER
        assert token.lexeme == "3.14"

    def test_trailing_radix_point_backtracks(self) -> None:
        """``3.`` accepts ``3``; the ``.`` is retried as the next lexeme."""
        tokenizer = Tokenizer("3.")
        tokens = list(tokenizer.tokenize())

        assert [t.lexeme for t in tokens] == ["3", ""]
        assert tokens[0].attribute == 3
        assert [d.offending_text for d in tokenizer.diagnostics] == ["."]

    def test_radix_point_before_letter(self) -> None:
        tokenizer = Tokenizer("3.x")
        assert [t.lexeme for t in tokenizer.tokenize()] == ["3", "x", ""]
        assert tokenizer.diagnostics[0].column == 2

    def test_integer_only_format(self) -> None:
        config = LexerConfig(number_format=NumberFormat.INTEGER_ONLY)
        tokenizer = Tokenizer("3.5", config)
        tokens = list(tokenizer.tokenize())

        assert [t.lexeme for t in tokens] == ["3", "5", ""]
        assert [t.attribute for t in tokens[:2]] == [3, 5]
        assert len(tokenizer.diagnostics) == 1


class TestKeywordsAndIdentifiers:
    """Keywords are identifier lexemes found in the keyword set."""

    def test_keyword(self) -> None:
        token = tokenize("while")[0]
        assert token.kind is TokenKind.KEYWORD
        assert token.tag == "WHILE"
        assert token.attribute == "while"

    def test_keyword_prefix_is_identifier(self) -> None:
        tokens = tokenize("iffy if_ whilex")
        assert [t.kind for t in tokens[:3]] == [TokenKind.IDENTIFIER] * 3

    def test_keywords_are_case_sensitive(self) -> None:
        assert tokenize("If")[0].kind is TokenKind.IDENTIFIER

    def test_empty_keyword_set(self) -> None:
        config = LexerConfig(keywords=frozenset())
        assert tokenize("if", config)[0].kind is TokenKind.IDENTIFIER


class TestDiscardedInput:
    """Whitespace and comments produce no tokens."""

    def test_whitespace_only(self) -> None:
        assert tags(" \t\r\n  ") == ["END_OF_INPUT"]

    def test_line_comment(self) -> None:
        tokens = tokenize("a // note\nb")
        assert [t.lexeme for t in tokens] == ["a", "b", ""]
        assert (tokens[1].line, tokens[1].column) == (2, 1)

    def test_line_comment_at_end(self) -> None:
        assert tags("x // trailing") == ["IDENTIFIER", "END_OF_INPUT"]

    def test_block_comment(self) -> None:
        tokens = tokenize("/* c */x")
        assert tokens[0].lexeme == "x"
        assert tokens[0].column == 8

    def test_block_comment_with_stars(self) -> None:
        assert tags("/* a ** b **/") == ["END_OF_INPUT"]

    def test_block_comment_spans_lines(self) -> None:
        tokens = tokenize("/* one\ntwo */ y")
        assert (tokens[0].line, tokens[0].column) == (2, 8)

    def test_comments_are_not_nested(self) -> None:
        assert lexemes("/* /* */ x */") == ["x", "*", "/", ""]

    def test_divide_is_not_a_comment(self) -> None:
        assert tags("a / b") == ["IDENTIFIER", "DIVIDE", "IDENTIFIER", "END_OF_INPUT"]


class TestStrings:
    """Quoted strings with escapes."""

    def test_simple(self) -> None:
        token = tokenize('"hello"')[0]
        assert token.kind is TokenKind.STRING
        assert token.lexeme == '"hello"'
        assert token.attribute == "hello"

    def test_escaped_quote(self) -> None:
        token = tokenize(r'"a\"b"')[0]
        assert token.lexeme == r'"a\"b"'
        assert token.attribute == 'a"b'

    def test_escaped_backslash_before_quote(self) -> None:
        tokens = tokenize(r'"a\\" x')
        assert tokens[0].attribute == "a\\"
        assert tokens[1].lexeme == "x"

    def test_empty_string(self) -> None:
        assert tokenize('""')[0].attribute == ""

    def test_string_spans_lines(self) -> None:
        tokens = tokenize('"a\nb" c')
        assert tokens[0].attribute == "a\nb"
        assert (tokens[1].line, tokens[1].column) == (2, 4)

    def test_comment_markers_inside_string(self) -> None:
        assert tags('"// not a comment"') == ["STRING", "END_OF_INPUT"]

    def test_custom_quote(self) -> None:
        config = LexerConfig(string_quote_char="'")
        token = tokenize("'it\\'s'", config)[0]
        assert token.attribute == "it's"


class TestScanDirect:
    """_scan() reports matches and failures without consuming on failure."""

    def test_match(self) -> None:
        tokenizer = Tokenizer("<= 1")
        tokenizer._cursor.begin_lexeme()
        result = tokenizer._scan()

        assert isinstance(result, Match)
        assert result.lexeme == "<="
        assert result.pattern.token_name == "LESS_EQUAL"
        assert tokenizer._cursor.offset == 2

    def test_failure_resets_cursor(self) -> None:
        tokenizer = Tokenizer("&x")
        tokenizer._cursor.begin_lexeme()
        result = tokenizer._scan()

        assert isinstance(result, ScanFailure)
        assert tokenizer._cursor.offset == 0
        assert result.unterminated is None
        assert [a.pattern.text for a in result.attempts if a.stop.offset > 0] == ["&&"]

    def test_unterminated_failure(self) -> None:
        tokenizer = Tokenizer('"abc')
        tokenizer._cursor.begin_lexeme()
        result = tokenizer._scan()

        assert isinstance(result, ScanFailure)
        assert result.unterminated is not None
        assert result.unterminated.pattern.name == "string"
