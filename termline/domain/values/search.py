"""History search value objects."""

from enum import Enum


class SearchDirection(Enum):
    """Direction of incremental history search."""

    FORWARD = "forward"
    REVERSE = "reverse"

    @property
    def step(self) -> int:
        return 1 if self is SearchDirection.FORWARD else -1


class SearchMatch(Enum):
    """Predicate deciding whether an entry matches a search term."""

    CONTAINS = "contains"
    PREFIX = "prefix"

    def matches(self, entry: str, term: str) -> bool:
        if self is SearchMatch.PREFIX:
            return entry.startswith(term)
        return term in entry
