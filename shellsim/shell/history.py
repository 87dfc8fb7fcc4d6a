"""
Input History Module

Remembers entered lines so they can be recalled.

The newest entry has index 0. A read index starts at -1; ``previous``
moves it towards older entries and ``next`` back towards newer ones.
Adding an entry resets the read index.

Version: 1.0.0
"""

from typing import Iterable, List, Optional


class InputHistory:
    """
    A bounded history of input lines.

    Example:
        >>> history = InputHistory()
        >>> history.add("ls")
        >>> history.add("cd /tmp")
        >>> history.previous()
        'cd /tmp'
        >>> history.previous()
        'ls'
        >>> history.next()
        'cd /tmp'
    """

    def __init__(self, entries: Iterable[str] = (), max_size: Optional[int] = None) -> None:
        """
        Args:
            entries: Initial entries, newest first
            max_size: Maximum number of entries kept; None keeps everything
        """
        self._max_size = max_size
        self._entries: List[str] = list(entries)
        self._trim()
        self._index = -1

    def _trim(self) -> None:
        if self._max_size is not None:
            del self._entries[self._max_size:]

    @property
    def entries(self) -> List[str]:
        """A copy of the entries, newest first."""
        return list(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def add(self, entry: str) -> None:
        """
        Add an entry and reset the read index.

        Blank entries, and entries equal to the newest one, are not stored.
        """
        stripped = entry.strip()
        if stripped and (not self._entries or stripped != self._entries[0].strip()):
            self._entries.insert(0, entry)
            self._trim()
        self.reset_index()

    def clear(self) -> None:
        self._entries.clear()
        self.reset_index()

    def get(self, index: int) -> str:
        """
        Return the entry at ``index``, where 0 is the newest entry.

        Index -1 yields an empty string.

        Raises:
            IndexError: If the index is out of bounds
        """
        if index < -1 or index >= len(self._entries):
            raise IndexError(f"Index '{index}' is out of bounds.")
        if index == -1:
            return ""
        return self._entries[index]

    def next(self) -> str:
        """Move to the next newer entry and return it, or "" past the newest."""
        self._index = max(self._index - 1, -1)
        return self.get(self._index)

    def previous(self) -> str:
        """Move to the next older entry and return it, stopping at the oldest."""
        self._index = min(self._index + 1, len(self._entries) - 1)
        return self.get(self._index)

    def reset_index(self) -> None:
        self._index = -1

    def __len__(self) -> int:
        return len(self._entries)
