"""
Parser Exceptions

Exceptions raised while turning an input line into InputArgs:
tokenizing, expansion, globbing, option classification and
redirection.

Version: 1.0.0
"""

from typing import Optional, Any


class ParseException(Exception):
    """
    Base exception for all input-parsing errors.

    A parse exception is fatal to the command whose tokens produced it;
    commands before it on the same line are unaffected.

    Attributes:
        message: Human-readable error description
        token: The raw token or input that could not be parsed, if known
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.error_code = error_code or 5000
        self.context = context or {}
        if token is not None:
            self.context["token"] = token

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"


class TokenizeError(ParseException):
    """
    The input line could not be split into tokens.

    Causes: unterminated quotes, unbalanced or mismatched curly braces,
    and a trailing backslash with nothing to escape.

    Example:
        >>> raise TokenizeError("Missing closing quotation mark.", position=4)
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if position is not None:
            ctx["position"] = position
        super().__init__(
            message=message,
            error_code=5001,
            context=ctx
        )
        self.position = position


class ExpansionError(ParseException):
    """
    A token could not be expanded.

    Example:
        >>> raise ExpansionError("Missing variable name after '$'.", token="$")
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            token=token,
            error_code=5002,
            context=context
        )


class GlobError(ParseException):
    """
    A glob pattern did not match any file or directory.

    Example:
        >>> raise GlobError("x?")
    """

    def __init__(
        self,
        pattern: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"No matches found for '{pattern}'.",
            token=pattern,
            error_code=5003,
            context=context
        )
        self.pattern = pattern


class OptionError(ParseException):
    """
    An option token could not be classified.

    Example:
        >>> raise OptionError("Cannot assign value to multiple short options.", token="-ab=1")
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            token=token,
            error_code=5004,
            context=context
        )


class RedirectError(ParseException):
    """
    A redirect operator has no usable destination.

    Example:
        >>> raise RedirectError("Missing redirect target after '>'.", token=">")
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            token=token,
            error_code=5005,
            context=context
        )
