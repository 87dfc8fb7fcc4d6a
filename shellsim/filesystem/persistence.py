"""
Persistence Module

Converts node trees to and from JSON-compatible dictionaries.

Serialized form:
    {"type": "Directory", "nodes": {"<name>": <node>, ...}}
    {"type": "File", "contents": "<text>"}
    {"type": "NullFile"}

The string tags exist only in the serialized form; in memory the
variant of a node is its NodeType.

Version: 1.0.0
"""

import json
from typing import Any, List

from .node import Directory, File, Node, NodeType, NullFile
from .path import Path
from .vfs import FileSystem
from shellsim.exceptions import InvalidNodeNameError, SerializationError
from shellsim.logger import get_logger


logger = get_logger('filesystem')


def _encode(node: Node) -> dict[str, Any]:
    node_type = node.node_type
    if node_type == NodeType.DIRECTORY:
        return {"type": node_type.value, "nodes": {}}
    if node_type == NodeType.FILE:
        return {"type": node_type.value, "contents": node.contents}
    if node_type == NodeType.NULL_FILE:
        return {"type": node_type.value}
    raise SerializationError(f"Cannot serialize node of type '{node_type}'.")


def to_dict(node: Node) -> dict[str, Any]:
    """
    Serialize a node and everything below it.

    Args:
        node: The node to serialize

    Returns:
        A JSON-compatible dictionary describing the node tree
    """
    open_directories: List[dict[str, Any]] = []
    finished: List[dict[str, Any]] = []

    def enter(current: Node, path: Path) -> None:
        entry = _encode(current)
        if open_directories:
            open_directories[-1]["nodes"][path.file_name] = entry
        open_directories.append(entry)

    def leave(current: Node, path: Path) -> None:
        entry = open_directories.pop()
        if not open_directories:
            finished.append(entry)

    node.visit(Path("/"), enter, post=leave)
    return finished[0]


def from_dict(obj: Any) -> Node:
    """
    Deserialize a node tree produced by ``to_dict``.

    Raises:
        SerializationError: If the object does not describe a node tree
    """
    if not isinstance(obj, dict):
        raise SerializationError(f"Expected an object, got {type(obj).__name__}.")

    tag = obj.get("type")
    try:
        node_type = NodeType(tag)
    except ValueError:
        raise SerializationError(f"Unknown node type '{tag}'.") from None

    if node_type == NodeType.DIRECTORY:
        children = obj.get("nodes", {})
        if not isinstance(children, dict):
            raise SerializationError("Directory nodes must be an object.")
        try:
            return Directory({name: from_dict(child) for name, child in children.items()})
        except InvalidNodeNameError as e:
            raise SerializationError(e.message, context={'name': e.name}) from e

    if node_type == NodeType.FILE:
        contents = obj.get("contents", "")
        if not isinstance(contents, str):
            raise SerializationError("File contents must be a string.")
        return File(contents)

    return NullFile()


def dumps(file_system: FileSystem, **kwargs: Any) -> str:
    """
    Serialize a file system to a JSON string.

    Args:
        file_system: The file system to serialize
        **kwargs: Passed on to ``json.dumps``
    """
    text = json.dumps(to_dict(file_system.root), **kwargs)
    logger.debug("Serialized file system", context={'size': len(text)})
    return text


def loads(text: str) -> FileSystem:
    """
    Deserialize a file system from a JSON string.

    Raises:
        SerializationError: If the text is not valid JSON or does not
            describe a directory
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    root = from_dict(data)
    if not isinstance(root, Directory):
        raise SerializationError("The root of a file system must be a directory.")

    logger.debug("Deserialized file system", context={'nodes': root.node_count})
    return FileSystem(root)
