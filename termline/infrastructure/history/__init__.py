"""History persistence implementations."""

from .file_history_store import FileHistoryStore, escape_entry, permission_to_mode, unescape_entry

__all__ = [
    "FileHistoryStore",
    "permission_to_mode",
    "escape_entry",
    "unescape_entry",
]
