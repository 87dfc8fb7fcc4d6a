"""
Stream Module

Text streams used by the file system and the shell:
- FileStream: a cursor into the contents of a File
- Buffer: an in-memory first-in first-out stream
- StreamSet: the input, output and error streams of a command

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Any


class OpenMode(Enum):
    """File open modes."""
    READ = 'r'
    WRITE = 'w'
    APPEND = 'a'


class Stream(ABC):
    """
    Shared reading and writing behaviour of text streams.

    Subclasses provide ``_remaining`` (the unread text), ``read`` and
    ``write``.
    """

    @abstractmethod
    def _remaining(self) -> str:
        """The text not read yet."""

    def has(self, count: int = 1) -> bool:
        """
        Check whether at least ``count`` characters can be read.

        Raises:
            ValueError: If ``count`` is negative
        """
        if count < 0:
            raise ValueError("Count must be non-negative.")
        return len(self._remaining()) >= count

    @abstractmethod
    def read(self, count: Optional[int] = None) -> str:
        """Read and consume up to ``count`` characters, or everything left."""

    def peek(self, count: Optional[int] = None) -> str:
        """Same as ``read`` but without consuming the characters."""
        remaining = self._remaining()
        return remaining if count is None else remaining[:count]

    def _line_length(self) -> Optional[int]:
        newline = self._remaining().find("\n")
        return None if newline < 0 else newline + 1

    def read_line(self) -> str:
        """Read up to and including the next newline, or everything left."""
        return self.read(self._line_length())

    def peek_line(self) -> str:
        """Same as ``read_line`` but without consuming the characters."""
        return self.peek(self._line_length())

    @abstractmethod
    def write(self, text: str) -> None:
        """Write ``text`` to the stream."""

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a newline."""
        self.write(text + "\n")


class FileStream(Stream):
    """
    A cursor into the contents of a file.

    Writing overwrites existing contents from the pointer onwards and
    appends whatever extends beyond the current end; nothing is inserted.

    Example:
        >>> file = File("old")
        >>> FileStream(file, 1).write("new")
        >>> file.contents
        'onew'
    """

    def __init__(self, file: Any, pointer: int = 0) -> None:
        """
        Args:
            file: The File whose contents are read and written
            pointer: Initial position of the cursor

        Raises:
            ValueError: If the pointer lies outside the file's contents
        """
        if pointer < 0 or pointer > len(file.contents):
            raise ValueError(
                f"Pointer {pointer} is outside file of length {len(file.contents)}."
            )
        self._file = file
        self._pointer = pointer

    @property
    def pointer(self) -> int:
        return self._pointer

    def _remaining(self) -> str:
        return self._file.contents[self._pointer:]

    def read(self, count: Optional[int] = None) -> str:
        """
        Read ``count`` characters, or everything left when ``count`` is None.

        The pointer advances by the number of characters returned.
        """
        text = self.peek(count)
        self._pointer += len(text)
        return text

    def write(self, text: str) -> None:
        contents = self._file.contents
        self._file.contents = (
            contents[:self._pointer] + text + contents[self._pointer + len(text):]
        )
        self._pointer = min(self._pointer + len(text), len(self._file.contents))


class Buffer(Stream):
    """An in-memory stream; text is read in the order it was written."""

    def __init__(self, contents: str = "") -> None:
        self._buffer = contents

    def _remaining(self) -> str:
        return self._buffer

    def read(self, count: Optional[int] = None) -> str:
        text = self.peek(count)
        self._buffer = self._buffer[len(text):]
        return text

    def write(self, text: str) -> None:
        self._buffer += text


class StreamSet:
    """
    The input, output and error streams of a command.

    Stream sets are mutable; hand a ``copy()`` to callees that may
    redirect streams.
    """

    def __init__(self, ins: Stream, out: Stream, err: Stream) -> None:
        self.ins = ins
        self.out = out
        self.err = err

    def copy(self) -> 'StreamSet':
        return StreamSet(self.ins, self.out, self.err)
