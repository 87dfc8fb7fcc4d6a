"""
Virtual File System (VFS) Module

An in-memory hierarchical file system:
- A single root directory owning every node through the tree
- Path-addressed add, get, copy, move and remove
- Text streams on files

Version: 1.0.0
"""

from typing import Iterable, List, Optional, Tuple, Union

from .node import Directory, File, Node, NullFile
from .path import Path
from .stream import FileStream, OpenMode
from shellsim.core.config_loader import get_config
from shellsim.exceptions import (
    FileNotFoundError,
    FileExistsError,
    NotAFileError,
    NotADirectoryError,
    InvalidOperationError,
)
from shellsim.logger import get_logger


PathLike = Union[Path, str]


def _as_path(target: PathLike) -> Path:
    """Convert a path string to a Path; strings are read as absolute."""
    if isinstance(target, Path):
        return target
    return Path(target)


class FileSystem:
    """
    An in-memory file system.

    Every path that resolves denotes exactly one node. A path written
    with a trailing slash resolves only to a directory.

    Example:
        >>> fs = FileSystem()
        >>> fs.add(Path("/home/user/notes.txt"), File("hi"), True)
        >>> fs.open(Path("/home/user/notes.txt"), OpenMode.READ).read()
        'hi'
    """

    def __init__(self, root: Optional[Directory] = None) -> None:
        self._root = root if root is not None else Directory()
        self._logger = get_logger('filesystem')

    @classmethod
    def create_default(cls) -> 'FileSystem':
        """
        Create a file system holding the configured standard directories
        and the null device.
        """
        config = get_config().filesystem
        file_system = cls()

        for directory in config.standard_dirs:
            if not file_system.has(directory):
                file_system.add(directory, Directory(), True)
        if config.null_device and not file_system.has(config.null_device):
            file_system.add(config.null_device, NullFile(), True)

        file_system._logger.debug(
            "Default file system created",
            context={'directories': len(config.standard_dirs)}
        )
        return file_system

    @property
    def root(self) -> Directory:
        return self._root

    def add(self, target: PathLike, node: Node, create_parents: bool = False) -> None:
        """
        Add ``node`` at ``target``.

        Args:
            target: Where to add the node
            node: The node to add
            create_parents: Whether missing parent directories are created

        Raises:
            FileExistsError: If ``target`` is the root or already exists
            NotADirectoryError: If ``target`` has a trailing slash but ``node``
                is not a directory, or if the parent is not a directory
            FileNotFoundError: If the parent is missing and ``create_parents``
                is False
        """
        target = _as_path(target)

        if target.is_root:
            raise FileExistsError(str(target))
        if target.is_directory and not isinstance(node, Directory):
            raise NotADirectoryError(str(target))

        parent_path = target.parent
        parent = self.get(parent_path)
        if parent is None:
            if not create_parents:
                raise FileNotFoundError(str(parent_path))
            self.add(parent_path, Directory(), True)
            parent = self.get(parent_path)

        if not isinstance(parent, Directory):
            raise NotADirectoryError(str(parent_path))
        if parent.has(target.file_name):
            raise FileExistsError(str(target))

        parent.add(target.file_name, node)
        self._logger.debug(
            "Added node",
            context={'path': str(target), 'type': node.node_type.value}
        )

    def get(self, target: PathLike) -> Optional[Node]:
        """
        Return the node at ``target``, or None if there is none.

        A path with a trailing slash that resolves to a file yields None.
        """
        target = _as_path(target)

        node: Optional[Node] = self._root
        for name in target.parts:
            if not isinstance(node, Directory):
                return None
            node = node.get(name)
            if node is None:
                return None

        if target.is_directory and not isinstance(node, Directory):
            return None
        return node

    def has(self, target: PathLike) -> bool:
        return self.get(target) is not None

    def copy(self, source: PathLike, destination: PathLike, recursive: bool = False) -> None:
        """
        Copy the node at ``source`` to ``destination``.

        The copy is deep: later changes to either node do not affect the other.

        Raises:
            InvalidOperationError: If ``destination`` lies inside ``source``
            FileNotFoundError: If ``source`` does not exist
            NotAFileError: If ``source`` is a directory and ``recursive`` is False
        """
        source = _as_path(source)
        destination = _as_path(destination)

        if source.is_ancestor_of(destination):
            raise InvalidOperationError(
                str(source),
                operation="copy",
                reason=f"Cannot copy '{source}' into itself."
            )

        node = self.get(source)
        if node is None:
            raise FileNotFoundError(str(source))
        if isinstance(node, Directory) and not recursive:
            raise NotAFileError(str(source), actual_type="directory")

        self.add(destination, node.copy(), False)
        self._logger.debug(
            "Copied node",
            context={'source': str(source), 'destination': str(destination)}
        )

    def move(self, source: PathLike, destination: PathLike) -> None:
        """
        Move the node at ``source`` to ``destination``.

        The node itself is transferred, not copied.

        Raises:
            InvalidOperationError: If ``destination`` lies inside ``source``
            FileNotFoundError: If ``source`` does not exist
        """
        source = _as_path(source)
        destination = _as_path(destination)

        if source.is_ancestor_of(destination):
            raise InvalidOperationError(
                str(source),
                operation="move",
                reason=f"Cannot move '{source}' into itself."
            )

        node = self.get(source)
        if node is None:
            raise FileNotFoundError(str(source))

        self.add(destination, node, False)
        parent = self.get(source.parent)
        if isinstance(parent, Directory):
            parent.remove(source.file_name)
        self._logger.debug(
            "Moved node",
            context={'source': str(source), 'destination': str(destination)}
        )

    def remove(self, target: PathLike) -> None:
        """
        Remove the node at ``target`` together with everything below it.

        Removing a node that does not exist does nothing. Removing the root
        removes all of its children; the root itself remains.
        """
        target = _as_path(target)

        if target.is_root:
            self._root.remove("")
            self._logger.debug("Emptied root directory")
            return

        if self.get(target) is None:
            return
        parent = self.get(target.parent)
        if not isinstance(parent, Directory):
            return

        parent.remove(target.file_name)
        self._logger.debug("Removed node", context={'path': str(target)})

    def open(self, target: PathLike, mode: OpenMode) -> FileStream:
        """
        Open a stream on the file at ``target``.

        In ``WRITE`` and ``APPEND`` mode a missing file is created first;
        its parent directory must already exist.

        Raises:
            NotAFileError: If ``target`` is a directory
            FileNotFoundError: If the file (or, when creating it, its parent)
                does not exist
        """
        target = _as_path(target)

        node = self.get(target)
        if isinstance(node, Directory):
            raise NotAFileError(str(target), actual_type="directory")
        if node is None:
            if mode == OpenMode.READ:
                raise FileNotFoundError(str(target))
            node = File()
            self.add(target, node, False)

        return node.open(mode)

    def determine_move_mappings(
        self,
        sources: Iterable[PathLike],
        destination: PathLike
    ) -> List[Tuple[Path, Path]]:
        """
        Determine where each source ends up when moved or copied to ``destination``.

        With a single source, ``destination`` is either an existing directory
        to move into, or a new name inside an existing directory. With
        several sources, ``destination`` must be an existing directory.

        Returns:
            ``(source, target)`` pairs in the order of ``sources``

        Raises:
            FileExistsError: If a single source would replace an existing file
            FileNotFoundError: If the destination (or its parent) does not exist
            NotADirectoryError: If the destination (or its parent) is a file
        """
        source_paths = [_as_path(source) for source in sources]
        destination = _as_path(destination)
        target = self.get(destination)

        if len(source_paths) == 1:
            source = source_paths[0]
            if isinstance(target, Directory):
                return [(source, destination.get_child(source.file_name))]
            if target is not None:
                raise FileExistsError(str(destination))

            parent = self.get(destination.parent)
            if parent is None:
                raise FileNotFoundError(str(destination.parent))
            if not isinstance(parent, Directory):
                raise NotADirectoryError(str(destination.parent))
            return [(source, destination)]

        if target is None:
            raise FileNotFoundError(str(destination))
        if not isinstance(target, Directory):
            raise NotADirectoryError(str(destination))
        return [(source, destination.get_child(source.file_name)) for source in source_paths]
