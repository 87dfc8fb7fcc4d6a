"""
Node Module

The nodes of the in-memory file system tree.

Nodes do not know their own name or parent: a name is the key under
which a directory stores a node, and ancestry is derived from Path.
The set of node variants is closed and enumerated by NodeType.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from .path import Path
from .stream import FileStream, OpenMode
from shellsim.exceptions import InvalidNodeNameError


class NodeType(Enum):
    """The variants of file system nodes."""
    DIRECTORY = "Directory"
    FILE = "File"
    NULL_FILE = "NullFile"


Visitor = Callable[['Node', Path], None]


class Node(ABC):
    """Abstract base of every file system node."""

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """The variant of this node."""

    @abstractmethod
    def copy(self) -> 'Node':
        """Return a deep copy of this node."""

    @abstractmethod
    def name_string(self, name: str, path: Path) -> str:
        """
        Render this node for a listing.

        Args:
            name: The name of this node in its directory
            path: The path to this node
        """

    def visit(
        self,
        path: Path,
        fun: Visitor,
        pre: Optional[Visitor] = None,
        post: Optional[Visitor] = None
    ) -> None:
        """
        Apply ``fun`` to this node and, recursively, to every node below it.

        Args:
            path: The path to this node
            fun: Function applied to each node
            pre: Function applied to each node before ``fun``
            post: Function applied to each node after its descendants
        """
        if pre is not None:
            pre(self, path)
        fun(self, path)
        if post is not None:
            post(self, path)


class Directory(Node):
    """
    A directory that contains other nodes, indexed by name.

    Example:
        >>> directory = Directory({"notes.txt": File("hello")})
        >>> directory.has("notes.txt")
        True
        >>> directory.node_count
        1
    """

    def __init__(self, nodes: Optional[dict[str, Node]] = None) -> None:
        self._nodes: dict[str, Node] = {}
        for name, node in (nodes or {}).items():
            self.add(name, node)

    @property
    def node_type(self) -> NodeType:
        return NodeType.DIRECTORY

    @property
    def nodes(self) -> dict[str, Node]:
        """A shallow copy of the name to node mapping."""
        return dict(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return name not in ("", ".", "..") and "/" not in name

    def get(self, name: str) -> Optional[Node]:
        """Return the node with the given name, or None if there is none."""
        if not self.is_valid_name(name):
            return None
        return self._nodes.get(name)

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def add(self, name: str, node: Node) -> None:
        """
        Store ``node`` under ``name``, replacing any existing entry.

        Raises:
            InvalidNodeNameError: If the name is empty, ``.``, ``..``, or contains a slash
        """
        if not self.is_valid_name(name):
            raise InvalidNodeNameError(name)
        self._nodes[name] = node

    def remove(self, name: str) -> None:
        """
        Remove the node with the given name.

        Removing ``""`` or ``"."`` removes every node in this directory.
        Unknown names are ignored.
        """
        if name in ("", "."):
            self._nodes.clear()
            return
        self._nodes.pop(name, None)

    def copy(self) -> 'Directory':
        return Directory({name: node.copy() for name, node in self._nodes.items()})

    def name_string(self, name: str, path: Path) -> str:
        return f"{name}/"

    def visit(
        self,
        path: Path,
        fun: Visitor,
        pre: Optional[Visitor] = None,
        post: Optional[Visitor] = None
    ) -> None:
        if pre is not None:
            pre(self, path)
        fun(self, path)
        for name in sorted(self._nodes):
            self._nodes[name].visit(path.get_child(name), fun, pre, post)
        if post is not None:
            post(self, path)


class File(Node):
    """A file holding text contents."""

    def __init__(self, contents: str = "") -> None:
        self.contents = contents

    @property
    def node_type(self) -> NodeType:
        return NodeType.FILE

    def open(self, mode: OpenMode) -> FileStream:
        """
        Open a stream on this file.

        ``WRITE`` truncates the file, ``APPEND`` places the pointer at the
        end, and ``READ`` places it at the start.
        """
        if mode == OpenMode.WRITE:
            self.contents = ""
            return FileStream(self, 0)
        if mode == OpenMode.APPEND:
            return FileStream(self, len(self.contents))
        return FileStream(self, 0)

    def copy(self) -> 'File':
        return File(self.contents)

    def name_string(self, name: str, path: Path) -> str:
        return name


class NullFile(File):
    """A file that is always empty and discards everything written to it."""

    def __init__(self) -> None:
        super().__init__()

    @property
    def node_type(self) -> NodeType:
        return NodeType.NULL_FILE

    @property
    def contents(self) -> str:
        return ""

    @contents.setter
    def contents(self, value: str) -> None:
        pass

    def copy(self) -> 'NullFile':
        return NullFile()
