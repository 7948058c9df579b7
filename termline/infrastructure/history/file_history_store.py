"""File-backed history store (one escaped entry per line)."""

import logging
import os
import stat
from pathlib import Path

from termline.domain import FilePermission

logger = logging.getLogger(__name__)

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}


def permission_to_mode(permission: FilePermission) -> int:
    """Translate a permission descriptor into file mode bits.

    A granted capability sets the owner bit, and the group and other bits
    too unless it is owner-only. A denied capability sets nothing.
    """
    mode = 0
    for granted, owner_only, owner_bit, group_bit, other_bit in (
        (permission.readable, permission.readable_owner_only, stat.S_IRUSR, stat.S_IRGRP, stat.S_IROTH),
        (permission.writable, permission.writable_owner_only, stat.S_IWUSR, stat.S_IWGRP, stat.S_IWOTH),
        (permission.executable, permission.executable_owner_only, stat.S_IXUSR, stat.S_IXGRP, stat.S_IXOTH),
    ):
        if not granted:
            continue
        mode |= owner_bit
        if not owner_only:
            mode |= group_bit | other_bit
    return mode


def escape_entry(entry: str) -> str:
    """Encode an entry so it fits on a single line."""
    return "".join(_ESCAPES.get(ch, ch) for ch in entry)


def unescape_entry(line: str) -> str:
    """Decode a line written by ``escape_entry``.

    Raises:
        ValueError: The line contains an invalid escape sequence.
    """
    out = []
    chars = iter(line)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        code = next(chars, None)
        if code not in _UNESCAPES:
            raise ValueError(f"invalid escape sequence: \\{code or ''}")
        out.append(_UNESCAPES[code])
    return "".join(out)


class FileHistoryStore:
    """Persist history entries to a text file.

    Newest entries go toward the end of the file. Loading is best effort:
    lines that fail to decode are skipped rather than aborting the load.
    """

    def __init__(self, path: Path | str, max_size: int) -> None:
        self._path = Path(path).expanduser()
        self._max_size = max_size

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[str]:
        """Load entries, oldest first; empty if the file does not exist."""
        if not self._path.exists():
            return []

        lines = self._path.read_bytes().split(b"\n")
        if lines and not lines[-1]:
            lines.pop()

        entries = []
        skipped = 0
        for number, raw in enumerate(lines, start=1):
            try:
                entries.append(unescape_entry(raw.decode("utf-8")))
            except ValueError as e:  # includes UnicodeDecodeError
                skipped += 1
                logger.warning("Skipping corrupt history line path=%s line=%d: %s", self._path, number, e)

        if skipped:
            logger.warning("Skipped %d corrupt history lines path=%s", skipped, self._path)
        return entries[-self._max_size :]

    def save(self, entries: list[str], permission: FilePermission) -> None:
        """Write entries with the permission mode bits applied.

        A new file is created with the mode; an existing one is truncated
        and narrowed to the mode before any entry is written.

        Raises:
            OSError: The file or its directory could not be written.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        lines = [escape_entry(entry) + "\n" for entry in entries[-self._max_size :]]
        mode = permission_to_mode(permission)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            # umask may have narrowed the creation mode; pre-existing files keep theirs
            os.fchmod(fd, mode)
            f.writelines(lines)
        logger.debug("History written path=%s entries=%d", self._path, len(lines))
