"""Swap the default C-like language for a small scripting language."""

from fsmlex import LexerConfig, Tokenizer

config = LexerConfig.from_dict(
    {
        "keywords": ["let", "fn", "end"],
        "operators": {"=": "ASSIGN", "=>": "FAT_ARROW", "+": "PLUS"},
        "delimiters": {"(": "LEFT_PAREN", ")": "RIGHT_PAREN", ",": "COMMA"},
        "number_format": "integer-only",
        "string_quote_char": "'",
    }
)

tokenizer = Tokenizer("let add = fn(a, b) => a + b end\nlet s = 'hi'", config)
for token in tokenizer:
    print(f"{token.tag:12} {token.lexeme!r}")

print("Symbols:", ", ".join(tokenizer.symbols.names))
