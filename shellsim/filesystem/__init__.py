"""
ShellSim Filesystem Module

In-memory file system components:
- Path: normalized absolute paths
- Directory, File, NullFile: the node tree
- FileStream, Buffer, StreamSet: text streams
- FileSystem: path-addressed operations on the tree
- persistence: JSON codec for node trees
"""

from .path import Path
from .node import Node, NodeType, Directory, File, NullFile
from .stream import OpenMode, Stream, FileStream, Buffer, StreamSet
from .vfs import FileSystem
from . import persistence

__all__ = [
    'Path',
    'Node',
    'NodeType',
    'Directory',
    'File',
    'NullFile',
    'OpenMode',
    'Stream',
    'FileStream',
    'Buffer',
    'StreamSet',
    'FileSystem',
    'persistence',
]
