"""Lexical errors are repaired and reported, never raised."""

from fsmlex import Tokenizer

tokenizer = Tokenizer('int x@ = a & b;\nmsg = "never closed', source_file="broken.c")
tokens = list(tokenizer)

print("Tokens:", " ".join(t.tag for t in tokens))
for diagnostic in tokenizer.diagnostics:
    print(diagnostic)
