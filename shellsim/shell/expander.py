"""
Expander Module

Turns a raw word into the literal strings it stands for.

Expansion runs in two stages:
1. ``mark`` resolves escapes, quotes, curly braces, variables and ``~``
   and marks the remaining wildcards (see ``escapes``).
2. ``expand`` hands the marked text to the Globber and converts the
   matches back to plain text.

Quoting rules:
- Unquoted: a backslash makes the next shell-significant character
  literal; before any other character it is kept. ``$name`` and a
  leading ``~`` are substituted; ``?`` and ``*`` are wildcards.
- Single quotes: only ``\\'`` is an escape; nothing is substituted.
- Double quotes: only ``\\"`` is an escape; ``$name`` is substituted.
- Curly braces: ``$name`` is substituted; wildcards and ``~`` are
  literal; quotes inside braces are kept along with their contents.

Version: 1.0.0
"""

import re
from typing import List, Optional, Tuple

from .environment import Environment
from .escapes import escape_literal, mark_glob, unmark
from .globber import Globber
from shellsim.exceptions import ExpansionError
from shellsim.logger import get_logger


ESCAPABLE = frozenset("\\ \t\n\r\f\v;~$>?*'\"{}")
VARIABLE_NAME = re.compile(r"[0-9A-Za-z_]+")
QUOTES = ("'", '"')


class Expander:
    """
    Expands words using an environment and a globber.

    Example:
        >>> env = Environment(variables={"a": "b", "cwd": "/"})
        >>> expander = Expander(env, Globber(FileSystem()))
        >>> expander.expand("'$a'")
        ['$a']
        >>> expander.expand('"$a"')
        ['b']
    """

    def __init__(self, environment: Environment, globber: Globber) -> None:
        self._environment = environment
        self._globber = globber
        self._logger = get_logger('parser')

    def expand(self, token: str) -> List[str]:
        """
        Expand a raw word into literal strings.

        Args:
            token: A word as produced by the Tokenizer

        Returns:
            The expanded strings. A word with wildcards yields every match;
            an unquoted word that expands to nothing yields no strings.

        Raises:
            ExpansionError: If a ``$`` is not followed by a variable name
            GlobError: If a wildcard matches nothing
        """
        marked, grouped = self._mark(token)
        if not marked and not grouped:
            return []

        cwd = self._environment.get_or_default("cwd", "/")
        return [unmark(match) for match in self._globber.glob(marked, cwd)]

    def mark(self, token: str) -> str:
        """
        Resolve everything but wildcards, returning marked text.

        Raises:
            ExpansionError: If a ``$`` is not followed by a variable name
        """
        return self._mark(token)[0]

    def _mark(self, token: str) -> Tuple[str, bool]:
        """Return the marked text and whether the token contained any group."""
        out: List[str] = []
        groups: List[str] = []
        grouped = False
        i = 0

        while i < len(token):
            char = token[i]
            top: Optional[str] = groups[-1] if groups else None
            in_braces = "{" in groups

            if char == "\\":
                pair = token[i:i + 2]
                following = pair[1:]
                if not following:
                    out.append(escape_literal(char))
                elif top in QUOTES:
                    if following == top and not in_braces:
                        out.append(escape_literal(following))
                    else:
                        out.append(escape_literal(pair))
                elif following in ESCAPABLE:
                    out.append(escape_literal(following))
                else:
                    out.append(escape_literal(pair))
                i += len(pair)
                continue

            if top in QUOTES:
                if char == top:
                    groups.pop()
                    if in_braces:
                        out.append(char)
                elif char == "$" and top == '"':
                    i = self._substitute(token, i, out)
                    continue
                else:
                    out.append(escape_literal(char))
                i += 1
                continue

            if char in QUOTES:
                groups.append(char)
                grouped = True
                if in_braces:
                    out.append(char)
                i += 1
                continue

            if char == "{":
                groups.append(char)
                grouped = True
                i += 1
                continue

            if char == "}":
                if top != "{":
                    raise ExpansionError("Unexpected closing '}' without corresponding '{'.", token=token)
                groups.pop()
                i += 1
                continue

            if char == "$":
                i = self._substitute(token, i, out)
                continue

            if top is None and char == "~" and i == 0 and token[1:2] in ("", "/"):
                home = self._environment.get_or_default("home")
                out.append(escape_literal(home if home is not None else char))
                i += 1
                continue

            if top is None and char in ("?", "*"):
                out.append(mark_glob(char))
                i += 1
                continue

            out.append(escape_literal(char))
            i += 1

        if groups:
            raise ExpansionError("Unterminated quote or group.", token=token)

        marked = "".join(out)
        self._logger.debug("Marked token", context={'token': token})
        return marked, grouped

    def _substitute(self, token: str, index: int, out: List[str]) -> int:
        """Append the value of the variable named after ``$`` at ``index``; return the next index."""
        match = VARIABLE_NAME.match(token, index + 1)
        if match is None:
            raise ExpansionError("Missing variable name after '$'.", token=token)

        value = self._environment.get_or_default(match.group(0), "")
        out.append(escape_literal(value))
        return match.end()
