"""
Input Arguments Module

The parsed form of a single command.

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional


class StandardStream(IntEnum):
    """Identifiers of the standard streams of a command."""
    INPUT = 0
    OUTPUT = 1
    ERROR = 2


class RedirectType(Enum):
    """How a redirect target is opened."""
    WRITE = "write"
    APPEND = "append"


@dataclass(frozen=True)
class RedirectTarget:
    """A file that a stream is redirected to."""
    type: RedirectType
    target: str


class InputArgs:
    """
    A command with its options, arguments and redirect targets.

    All collection properties return copies.

    Example:
        >>> args = InputParser.create(env, fs).parse("cmd -o=1 -p arg1 > out.txt")[0]
        >>> args.command, args.options, args.args
        ('cmd', {'o': '1', 'p': None}, ['arg1'])
        >>> args.get_redirect_target()
        RedirectTarget(type=<RedirectType.WRITE: 'write'>, target='out.txt')
    """

    def __init__(
        self,
        command: Optional[str],
        options: Optional[dict[str, Optional[str]]] = None,
        args: Optional[List[str]] = None,
        redirect_targets: Optional[dict[int, RedirectTarget]] = None
    ) -> None:
        self._command = command
        self._options = dict(options or {})
        self._args = list(args or [])
        self._redirect_targets = dict(redirect_targets or {})

    @property
    def command(self) -> str:
        return self._command or ""

    @property
    def is_empty(self) -> bool:
        """True when the command has no words, as in a redirect-only line."""
        return self._command is None

    @property
    def options(self) -> dict[str, Optional[str]]:
        """Option names mapped to their value, or None for flags."""
        return dict(self._options)

    @property
    def args(self) -> List[str]:
        """Positional arguments in input order."""
        return list(self._args)

    @property
    def argc(self) -> int:
        return len(self._args)

    @property
    def redirect_targets(self) -> dict[int, RedirectTarget]:
        """Stream identifiers mapped to where they are redirected."""
        return dict(self._redirect_targets)

    def has_any_option(self, *keys: str) -> bool:
        """Check whether at least one of ``keys`` was given as an option."""
        return any(key in self._options for key in keys)

    def get_redirect_target(self, stream: int = StandardStream.OUTPUT) -> Optional[RedirectTarget]:
        """Return where ``stream`` is redirected to, or None."""
        return self._redirect_targets.get(int(stream))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputArgs):
            return NotImplemented
        return (
            self._command == other._command
            and self._options == other._options
            and self._args == other._args
            and self._redirect_targets == other._redirect_targets
        )

    def __repr__(self) -> str:
        return (
            f"InputArgs(command={self._command!r}, options={self._options!r}, "
            f"args={self._args!r}, redirect_targets={self._redirect_targets!r})"
        )
