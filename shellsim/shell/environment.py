"""
Environment Module

The variables of a shell session.

Variables can be marked read-only. Read-only variables are protected
from ``safe_set`` and ``safe_delete``; the plain setters still change
them, since the shell itself maintains variables such as ``cwd``.

Version: 1.0.0
"""

import re
from typing import Any, Iterable, Optional

from shellsim.exceptions import (
    InvalidVariableKeyError,
    ReadOnlyVariableError,
    UndefinedVariableError,
)
from shellsim.logger import get_logger


class Environment:
    """
    A set of environment variables.

    Example:
        >>> env = Environment(["cwd"], {"cwd": "/", "user": "felix"})
        >>> env.get("user")
        'felix'
        >>> env.safe_set("cwd", "/tmp")
        Traceback (most recent call last):
        ...
        ReadOnlyVariableError: [Error 2002] Cannot modify read-only environment variable 'cwd'.
    """

    KEY_PATTERN = re.compile(r"[0-9a-z_]+", re.IGNORECASE)

    def __init__(
        self,
        readonly_keys: Iterable[str] = (),
        variables: Optional[dict[str, Any]] = None
    ) -> None:
        self._variables: dict[str, str] = {}
        self._readonly_keys = frozenset(readonly_keys)
        self._logger = get_logger('environment')
        self.load(variables or {})

    @classmethod
    def is_key_valid(cls, key: str) -> bool:
        return bool(cls.KEY_PATTERN.fullmatch(key))

    def _check_key(self, key: str) -> None:
        if not self.is_key_valid(key):
            raise InvalidVariableKeyError(key)

    @property
    def variables(self) -> dict[str, str]:
        """A copy of all variables."""
        return dict(self._variables)

    @property
    def readonly_keys(self) -> frozenset:
        return self._readonly_keys

    def clear(self) -> None:
        """Delete every variable, including read-only ones."""
        self._variables.clear()

    def delete(self, key: str) -> None:
        """
        Delete a variable, even if it is read-only.

        Raises:
            InvalidVariableKeyError: If the key is invalid
        """
        self._check_key(key)
        self._variables.pop(key, None)

    def safe_delete(self, key: str) -> None:
        """
        Delete a variable unless it is read-only.

        Raises:
            ReadOnlyVariableError: If the variable is read-only
            InvalidVariableKeyError: If the key is invalid
        """
        if key in self._readonly_keys:
            raise ReadOnlyVariableError(key)
        self.delete(key)

    def get(self, key: str) -> str:
        """
        Return the value of a variable.

        Raises:
            UndefinedVariableError: If there is no such variable
        """
        if key not in self._variables:
            raise UndefinedVariableError(key)
        return self._variables[key]

    def get_or_default(self, key: str, default: Any = None) -> Any:
        return self._variables.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._variables

    def load(self, variables: dict[str, Any]) -> None:
        """Set every variable in ``variables``, read-only ones included."""
        for key, value in variables.items():
            self.set(key, value)

    def set(self, key: str, value: Any) -> None:
        """
        Set a variable, even if it is read-only.

        Raises:
            InvalidVariableKeyError: If the key is invalid
        """
        self._check_key(key)
        self._variables[key] = str(value)
        self._logger.debug("Variable set", context={'key': key})

    def safe_set(self, key: str, value: Any) -> None:
        """
        Set a variable unless it is read-only.

        Raises:
            ReadOnlyVariableError: If the variable is read-only
            InvalidVariableKeyError: If the key is invalid
        """
        if key in self._readonly_keys:
            raise ReadOnlyVariableError(key)
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.has(key)
