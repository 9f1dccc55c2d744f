"""Source location tracking for tokens and diagnostics.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All line/column positions are 1-indexed; offsets are 0-indexed
    positions in the source buffer.

    Attributes:
        line: Starting line number (1-indexed)
        column: Starting column (1-indexed)
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(3, 7, 41, 45, "main.c")
            >>> str(loc)
            'main.c:3:7'

    """

    line: int
    column: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.c:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return self.end_offset - self.offset

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            source_file=self.source_file,
        )
