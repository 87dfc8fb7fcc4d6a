"""
Filesystem Exceptions

Exceptions related to the in-memory file system: path lookups,
node creation, copy/move and (de)serialization of the node tree.

Version: 1.0.0
"""

from typing import Optional, Any


class FileSystemException(Exception):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class FileNotFoundError(FileSystemException):
    """
    The specified file or directory does not exist.

    Example:
        >>> raise FileNotFoundError("/path/to/file")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File or directory not found: {path}",
            path=path,
            error_code=4001,
            context=context
        )


class FileExistsError(FileSystemException):
    """
    A node already exists at the target path.

    Example:
        >>> raise FileExistsError("/path/to/file")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"A file or directory already exists: {path}",
            path=path,
            error_code=4002,
            context=context
        )


class NotAFileError(FileSystemException):
    """
    Path is not a regular file.

    Raised when a file operation (opening a stream, copying without
    recursion) is attempted on a directory.

    Example:
        >>> raise NotAFileError("/path/to/directory", actual_type="directory")
    """

    def __init__(
        self,
        path: str,
        actual_type: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if actual_type:
            ctx["actual_type"] = actual_type
        super().__init__(
            message=f"Not a file: {path}",
            path=path,
            error_code=4008,
            context=ctx
        )
        self.actual_type = actual_type


class NotADirectoryError(FileSystemException):
    """
    Path is not a directory.

    Raised when a node is added below a file, or when a non-directory
    node is added at a directory path (one ending in a slash).

    Example:
        >>> raise NotADirectoryError("/path/to/file")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=context
        )


class InvalidOperationError(FileSystemException):
    """
    The operation is structurally impossible.

    The typical case is copying or moving a directory into one of its
    own descendants.

    Example:
        >>> raise InvalidOperationError("/dir", operation="move",
        ...                             reason="Cannot move a directory into itself.")
    """

    def __init__(
        self,
        path: str,
        operation: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=reason or f"Invalid {operation or 'operation'}: {path}",
            path=path,
            error_code=4010,
            context=ctx
        )
        self.operation = operation
        self.reason = reason


class InvalidNodeNameError(FileSystemException):
    """
    A directory entry name is empty, reflexive, or contains a slash.

    Example:
        >>> raise InvalidNodeNameError("..")
    """

    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__(
            message=f"Cannot add node with name '{name}'.",
            error_code=4011,
            context=ctx
        )
        self.name = name


class SerializationError(FileSystemException):
    """
    A node tree could not be serialized or deserialized.

    Example:
        >>> raise SerializationError("Unknown node type 'Symlink'.")
    """

    def __init__(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=4012,
            context=context
        )
