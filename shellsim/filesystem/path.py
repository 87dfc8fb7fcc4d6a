"""
Path Module

Immutable, normalized absolute paths into the in-memory file system.

A path is built from one or more string fragments. The fragments are
joined with slashes and resolved: empty and ``.`` segments are dropped,
``..`` pops the previous segment and is absorbed at the root. A path
written with a trailing slash denotes a directory.

Version: 1.0.0
"""

from typing import List, Tuple, Union


class Path:
    """
    A normalized absolute path.

    Example:
        >>> str(Path("/a//b/../c"))
        '/a/c'
        >>> Path("/home/user/").is_directory
        True
        >>> str(Path.interpret("/home/user", "docs", "../notes.txt"))
        '/home/user/notes.txt'
    """

    __slots__ = ('_parts', '_is_directory')

    def __init__(self, *paths: str) -> None:
        """
        Construct a path from the given fragments.

        Args:
            *paths: Fragments that are joined with ``/`` before normalizing

        Raises:
            ValueError: If no fragments are given
        """
        if not paths:
            raise ValueError("A path requires at least one fragment.")

        joined = "/".join(paths)

        parts: List[str] = []
        for segment in joined.split("/"):
            if segment in ("", "."):
                continue
            if segment == "..":
                if parts:
                    parts.pop()
                continue
            parts.append(segment)

        self._parts: Tuple[str, ...] = tuple(parts)
        self._is_directory = not parts or joined.endswith("/")

    @staticmethod
    def interpret(cwd: Union[str, 'Path'], *paths: str) -> 'Path':
        """
        Interpret paths that may or may not be absolute.

        Args:
            cwd: The current working directory, used when the first path
                is relative
            *paths: Fragments to resolve

        Returns:
            ``cwd`` itself when no fragments are given, the fragments alone
            when the first starts with ``/``, and ``cwd`` followed by the
            fragments otherwise
        """
        if not paths:
            return Path(str(cwd))
        if paths[0].startswith("/"):
            return Path(*paths)
        return Path(str(cwd), *paths)

    @property
    def parts(self) -> Tuple[str, ...]:
        """The segments of this path, root first."""
        return self._parts

    @property
    def is_root(self) -> bool:
        return not self._parts

    @property
    def is_directory(self) -> bool:
        """True if this path was written with a trailing slash, or is the root."""
        return self._is_directory

    @property
    def file_name(self) -> str:
        """The last segment, or an empty string for the root."""
        return self._parts[-1] if self._parts else ""

    @property
    def parent(self) -> 'Path':
        """The path one segment up. The parent of the root is the root."""
        return Path("/" + "/".join(self._parts[:-1]))

    @property
    def ancestors(self) -> List['Path']:
        """All ancestors, from the parent up to and including the root."""
        return [
            Path("/" + "/".join(self._parts[:depth]))
            for depth in range(len(self._parts) - 1, -1, -1)
        ]

    def is_ancestor_of(self, other: 'Path') -> bool:
        """
        Check whether this path is a strict ancestor of ``other``.

        A path is not its own ancestor.
        """
        return (
            len(self._parts) < len(other._parts)
            and other._parts[:len(self._parts)] == self._parts
        )

    def get_ancestors_until(self, ancestor: 'Path') -> List['Path']:
        """
        Return the ancestors of this path up to and including ``ancestor``.

        Args:
            ancestor: An ancestor of this path, or this path itself

        Returns:
            The ancestors ordered from the parent upwards; empty if
            ``ancestor`` denotes this path

        Raises:
            ValueError: If ``ancestor`` is neither this path nor one of its ancestors
        """
        if ancestor._parts == self._parts:
            return []
        if not ancestor.is_ancestor_of(self):
            raise ValueError(f"'{ancestor}' is not an ancestor of '{self}'.")

        return self.ancestors[:len(self._parts) - len(ancestor._parts)]

    def get_child(self, child: str) -> 'Path':
        """Return the path to ``child``, interpreted relative to this path."""
        return Path(str(self), child)

    def __str__(self) -> str:
        return "/" + "/".join(self._parts)

    def __repr__(self) -> str:
        suffix = "/" if self._is_directory and self._parts else ""
        return f"Path('{self}{suffix}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._parts == other._parts and self._is_directory == other._is_directory

    def __hash__(self) -> int:
        return hash((self._parts, self._is_directory))

    def __lt__(self, other: 'Path') -> bool:
        return self._parts < other._parts
