"""In-memory menu store. Every operation returns a new store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from chef_menu.errors import DuplicateEntryError
from chef_menu.models import MenuEntry


@dataclass(frozen=True)
class MenuStore:
    """Committed entries, newest first."""

    entries: tuple[MenuEntry, ...] = ()

    def add(self, entry: MenuEntry) -> MenuStore:
        if self.find(entry.id) is not None:
            raise DuplicateEntryError(entry.id)
        return MenuStore((entry, *self.entries))

    def remove_by_id(self, entry_id: str) -> MenuStore:
        """Drop the entry with ``entry_id``; unknown ids leave the store as is."""
        if self.find(entry_id) is None:
            return self
        return MenuStore(tuple(entry for entry in self.entries if entry.id != entry_id))

    def clear(self) -> MenuStore:
        if not self.entries:
            return self
        return MenuStore()

    def count(self) -> int:
        return len(self.entries)

    def find(self, entry_id: str) -> MenuEntry | None:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
