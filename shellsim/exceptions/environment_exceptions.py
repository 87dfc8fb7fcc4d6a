"""
Environment Exceptions

Exceptions raised by the environment variable store.

Version: 1.0.0
"""

from typing import Optional, Any


class EnvironmentException(Exception):
    """
    Base exception for environment variable errors.

    Attributes:
        message: Human-readable error description
        key: The variable key involved, if any
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.error_code = error_code or 2000
        self.context = context or {}
        if key is not None:
            self.context["key"] = key

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"


class InvalidVariableKeyError(EnvironmentException):
    """
    The key contains characters other than letters, digits and underscores.

    Example:
        >>> raise InvalidVariableKeyError("in-valid")
    """

    def __init__(self, key: str) -> None:
        super().__init__(
            message=(
                f"Invalid environment variable key '{key}'; keys can only "
                f"contain alphanumerical characters and underscores."
            ),
            key=key,
            error_code=2001
        )


class ReadOnlyVariableError(EnvironmentException):
    """
    A read-only variable was changed through a protected setter.

    Example:
        >>> raise ReadOnlyVariableError("cwd")
    """

    def __init__(self, key: str) -> None:
        super().__init__(
            message=f"Cannot modify read-only environment variable '{key}'.",
            key=key,
            error_code=2002
        )


class UndefinedVariableError(EnvironmentException):
    """
    A variable was read that has not been set.

    Example:
        >>> raise UndefinedVariableError("home")
    """

    def __init__(self, key: str) -> None:
        super().__init__(
            message=f"Cannot read non-existing environment variable '{key}'.",
            key=key,
            error_code=2003
        )
