"""
Core Exceptions

Exceptions raised outside of the filesystem and parser subsystems,
mostly while loading configuration and preparing a shell session.

Version: 1.0.0
"""

from typing import Optional, Any


class CoreException(Exception):
    """
    Base exception for configuration and session set-up errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        recoverable: Whether the session can continue after the error
        context: Additional context about the error

    Example:
        >>> raise CoreException("Session set-up failed", error_code=1000)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        recoverable: bool = False,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.recoverable = recoverable
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"recoverable={self.recoverable})"
        )


class ConfigurationError(CoreException):
    """
    The configuration could not be loaded or updated.

    Common causes:
    - Configuration file missing or unreadable
    - Invalid JSON
    - Unknown dot-notation key passed to ``ConfigLoader.set``

    Example:
        >>> raise ConfigurationError("Invalid configuration key: shell.colour")
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(
            message=message,
            error_code=1001,
            recoverable=True,
            context=ctx
        )
        self.key = key
