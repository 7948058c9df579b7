"""History entity - bounded log of submitted lines with recall and search."""

import logging

from ..ports import HistoryStore
from ..values import FilePermission, SearchDirection, SearchMatch

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 500


class History:
    """Ordered, capacity-bounded log of entries.

    Two independent access protocols share the log:

    - fetch: linear previous/next recall, clamped at both ends and reset
      to "past the newest entry" by every push.
    - search: circular incremental substring search that remembers the
      last match and direction across calls and survives pushes.

    Not thread-safe; callers serialize access.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        store: HistoryStore | None = None,
        permission: FilePermission | None = None,
        match: SearchMatch = SearchMatch.CONTAINS,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._max_size = max_size
        self._store = store
        self._permission = permission or FilePermission()
        self._match = match
        self._entries: list[str] = []
        self._enabled = True

        self._fetch_index = 0
        self._search_direction = SearchDirection.REVERSE
        self._last_search_index: int | None = None
        self._last_search_direction: SearchDirection | None = None

        if store is not None:
            self._load()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        """Ignore pushes until re-enabled; recall still works."""
        self._enabled = False

    @property
    def search_direction(self) -> SearchDirection:
        return self._search_direction

    @property
    def match(self) -> SearchMatch:
        return self._match

    def get(self, index: int) -> str:
        return self._entries[index]

    def get_all(self) -> list[str]:
        """Copy of all entries, oldest first."""
        return list(self._entries)

    def push(self, entry: str) -> None:
        """Append an entry.

        An entry equal to the newest one is collapsed. The oldest entry is
        evicted once capacity is exceeded. The fetch cursor is always reset
        so the next previous-fetch yields the newest entry.
        """
        if not self._enabled:
            return
        if not self._entries or self._entries[-1] != entry:
            self._entries.append(entry)
            if len(self._entries) > self._max_size:
                del self._entries[0]
                if self._last_search_index is not None:
                    self._last_search_index = max(self._last_search_index - 1, 0)
        self._fetch_index = len(self._entries)

    def clear(self) -> None:
        """Remove every entry and reset both cursors."""
        self._entries.clear()
        self._fetch_index = 0
        self._last_search_index = None
        self._last_search_direction = None

    def get_previous_fetch(self) -> str | None:
        """Step toward older entries, stopping at the oldest."""
        if not self._entries:
            return None
        self._fetch_index = max(self._fetch_index - 1, 0)
        return self._entries[self._fetch_index]

    def get_next_fetch(self) -> str | None:
        """Step toward newer entries, stopping at the newest."""
        if not self._entries:
            return None
        self._fetch_index = min(self._fetch_index + 1, len(self._entries) - 1)
        return self._entries[self._fetch_index]

    def set_search_direction(self, direction: SearchDirection) -> None:
        """Select the direction used by the next search."""
        self._search_direction = direction

    def search(self, term: str) -> str | None:
        """Find the next entry matching ``term`` in the active direction.

        Scanning wraps around the log. After a direction change the last
        match is tested again before moving on. A match also anchors the
        fetch cursor on it, so recall continues from there.

        Returns:
            The matching entry, or None when nothing matches (cursors are
            left untouched).
        """
        length = len(self._entries)
        if length == 0:
            return None

        direction = self._search_direction
        if self._last_search_index is None:
            start = length - 1 if direction is SearchDirection.REVERSE else 0
        elif direction is not self._last_search_direction:
            start = self._last_search_index
        else:
            start = (self._last_search_index + direction.step) % length

        for offset in range(length):
            index = (start + offset * direction.step) % length
            entry = self._entries[index]
            if self._match.matches(entry, term):
                self._last_search_index = index
                self._last_search_direction = direction
                self._fetch_index = index
                return entry
        return None

    def stop(self) -> None:
        """Persist entries to the backing store, if any.

        Raises:
            OSError: The store could not be written. The log is unaffected.
        """
        if self._store is None:
            return
        self._store.save(self._entries[-self._max_size :], self._permission)
        logger.debug("History saved entries=%d", len(self._entries))

    def _load(self) -> None:
        for entry in self._store.load():
            self.push(entry)
        logger.debug("History loaded entries=%d", len(self._entries))
