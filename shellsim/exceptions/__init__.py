"""
ShellSim Exception Hierarchy

Every error raised by the package derives from one of four subsystem
bases, each carrying a numeric error code and a context dictionary.

Architecture:
    CoreException
    └── ConfigurationError
    EnvironmentException
    ├── InvalidVariableKeyError
    ├── ReadOnlyVariableError
    └── UndefinedVariableError
    FileSystemException
    ├── FileNotFoundError
    ├── FileExistsError
    ├── NotAFileError
    ├── NotADirectoryError
    ├── InvalidOperationError
    ├── InvalidNodeNameError
    └── SerializationError
    ParseException
    ├── TokenizeError
    ├── ExpansionError
    ├── GlobError
    ├── OptionError
    └── RedirectError
"""

from .core_exceptions import (
    CoreException,
    ConfigurationError,
)

from .environment_exceptions import (
    EnvironmentException,
    InvalidVariableKeyError,
    ReadOnlyVariableError,
    UndefinedVariableError,
)

from .fs_exceptions import (
    FileSystemException,
    FileNotFoundError,
    FileExistsError,
    NotAFileError,
    NotADirectoryError,
    InvalidOperationError,
    InvalidNodeNameError,
    SerializationError,
)

from .parser_exceptions import (
    ParseException,
    TokenizeError,
    ExpansionError,
    GlobError,
    OptionError,
    RedirectError,
)

__all__ = [
    # Core exceptions
    "CoreException",
    "ConfigurationError",
    # Environment exceptions
    "EnvironmentException",
    "InvalidVariableKeyError",
    "ReadOnlyVariableError",
    "UndefinedVariableError",
    # Filesystem exceptions
    "FileSystemException",
    "FileNotFoundError",
    "FileExistsError",
    "NotAFileError",
    "NotADirectoryError",
    "InvalidOperationError",
    "InvalidNodeNameError",
    "SerializationError",
    # Parser exceptions
    "ParseException",
    "TokenizeError",
    "ExpansionError",
    "GlobError",
    "OptionError",
    "RedirectError",
]
