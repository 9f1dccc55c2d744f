"""Symbol table for identifiers seen during tokenization.

One SymbolTable belongs to one compilation unit. The tokenizer interns
each distinct identifier name exactly once; later phases may attach
type or scope information through ``SymbolEntry.attributes``.

Thread Safety:
SymbolTable is mutated only by the tokenizer that owns it. Use one
table per compilation unit when scanning units concurrently.

Example:
    >>> table = SymbolTable()
    >>> first = table.insert("count", line=1, column=1)
    >>> table.insert("count", line=9, column=4) is first
    True
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, eq=False)
class SymbolEntry:
    """Entry for one distinct identifier name.

    Entries compare by identity: two tokens refer to the same symbol
    exactly when their attributes are the same entry object.

    Attributes:
        name: Identifier text (unique key)
        line: Line of first sighting (1-indexed)
        column: Column of first sighting (1-indexed)
        attributes: Slot for later phases (type, scope); never populated
            by the tokenizer
    """

    name: str
    line: int
    column: int
    attributes: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"SymbolEntry({self.name!r}, {self.line}:{self.column})"


class SymbolTable:
    """Insertion-ordered collection of unique SymbolEntry objects."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, SymbolEntry] = {}

    def lookup(self, name: str) -> SymbolEntry | None:
        """Get the entry for name, or None if it was never inserted."""
        return self._entries.get(name)

    def insert(self, name: str, line: int, column: int) -> SymbolEntry:
        """Intern name, returning the existing entry if already present.

        The recorded position of an existing entry is never changed.
        """
        entry = self._entries.get(name)
        if entry is None:
            entry = SymbolEntry(name, line, column)
            self._entries[name] = entry
        return entry

    @property
    def names(self) -> tuple[str, ...]:
        """All interned names in first-seen order."""
        return tuple(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._entries)} entries)"
