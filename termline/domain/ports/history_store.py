"""History store port - durable persistence of history entries."""

from typing import Protocol

from ..values import FilePermission


class HistoryStore(Protocol):
    """Protocol for loading and saving history entries.

    Entries are ordered oldest first and must round-trip exactly.
    """

    def load(self) -> list[str]:
        """Load persisted entries, oldest first."""
        ...

    def save(self, entries: list[str], permission: FilePermission) -> None:
        """Persist entries and apply the permission to the backing store."""
        ...
