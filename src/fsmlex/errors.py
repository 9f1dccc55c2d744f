"""Exception classes for fsmlex.

Lexical errors in the scanned text are never raised; they are recovered
locally and reported as diagnostics. The exceptions here signal misuse
of the API or a malformed engine (bad configuration, broken patterns).
"""

from __future__ import annotations


class FsmlexError(Exception):
    """Base exception for all fsmlex errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(FsmlexError, ValueError):
    """Invalid static lexer configuration.

    Raised when keywords, fixed-text operators, or the string quote
    character cannot form a consistent pattern table.
    """

    pass


class InternalConsistencyError(FsmlexError):
    """The lexing engine itself is malformed.

    Raised when the cursor is moved before the start of the current
    lexeme, or when a pattern's transition diagram is inconsistent.
    Never caused by the scanned text alone.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize error with optional location.

        Args:
            message: Error description
            line: Line where the fault was detected (1-indexed)
            column: Column where the fault was detected (1-indexed)
        """
        self.message = message
        self.line = line
        self.column = column

        location = ""
        if line is not None:
            location = f"{line}:"
            if column is not None:
                location += f"{column}:"
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class PatternTableError(InternalConsistencyError):
    """A pattern or pattern table failed validation at construction."""

    def __init__(self, pattern_name: str, message: str) -> None:
        """Initialize pattern table error.

        Args:
            pattern_name: Name of the offending pattern
            message: Description of the inconsistency
        """
        self.pattern_name = pattern_name
        super().__init__(f"Pattern '{pattern_name}': {message}")


class TokenizerExhaustedError(FsmlexError):
    """A token was requested after END_OF_INPUT was emitted.

    Tokenizers are single-use; construct a new one to rescan.
    """

    pass
