"""Tokenize a statement with the default C-like language."""

from fsmlex import tokenize

for token in tokenize("if (count <= 10) count += 1;"):
    print(token)
