"""File permission descriptor for persisted history."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilePermission:
    """Desired access to a persisted history file (value object).

    Purely descriptive; the persistence adapter turns it into platform
    mode bits. An owner-only flag restricts the matching capability to
    the file owner.
    """

    readable: bool = True
    readable_owner_only: bool = True
    writable: bool = True
    writable_owner_only: bool = True
    executable: bool = False
    executable_owner_only: bool = True
