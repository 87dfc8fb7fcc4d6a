"""
Globber Module

Resolves wildcards in marked text against the file system.

``?`` matches one character and ``*`` any number of characters; neither
matches ``/``, and neither matches the leading ``.`` of a hidden name.
Patterns are expanded segment by segment, so a wildcard never crosses
a directory boundary.

Version: 1.0.0
"""

import re
from typing import List, Union

from .escapes import escape_literal, has_glob, iter_marked, unmark
from shellsim.exceptions import GlobError
from shellsim.filesystem import Directory, FileSystem, Path
from shellsim.logger import get_logger


class Globber:
    """
    Expands marked wildcards into the paths they match.

    Input and output are marked text (see ``escapes``). A token without
    wildcards is returned unchanged, whether or not it exists.

    Example:
        >>> fs = FileSystem()
        >>> fs.add(Path("/a1"), File(), False)
        >>> fs.add(Path("/a2"), File(), False)
        >>> Globber(fs).glob("a" + mark_glob("?"), Path("/"))
        ['a1', 'a2']
    """

    def __init__(self, file_system: FileSystem) -> None:
        self._file_system = file_system
        self._logger = get_logger('parser')

    def glob(self, token: str, cwd: Union[Path, str] = "/") -> List[str]:
        """
        Expand the wildcards in ``token``.

        Args:
            token: Marked text
            cwd: Directory that relative patterns are resolved against

        Returns:
            The matching paths as marked text, rendered the way the token
            wrote them; directories matched through a trailing ``/`` keep it

        Raises:
            GlobError: If the token has wildcards but nothing matches
        """
        if not has_glob(token):
            return [token]

        if token.startswith("/"):
            history = "/"
            base = Path("/")
            pattern = token[1:]
        else:
            history = ""
            base = cwd if isinstance(cwd, Path) else Path(cwd)
            pattern = token

        if not isinstance(self._file_system.get(base), Directory):
            return [token]

        matches = self._expand(base, history, pattern.split("/"))
        if not matches:
            raise GlobError(unmark(token))

        self._logger.debug(
            "Expanded glob",
            context={'pattern': unmark(token), 'matches': len(matches)}
        )
        return matches

    def _expand(self, path: Path, history: str, segments: List[str]) -> List[str]:
        remaining = "/".join(segments)
        if not has_glob(remaining):
            return [history + remaining]

        segment, rest = segments[0], segments[1:]

        if not has_glob(segment):
            name = unmark(segment)
            if name in ("", "."):
                next_path = path
            elif name == "..":
                next_path = path.parent
            else:
                next_path = path.get_child(name)

            if not isinstance(self._file_system.get(next_path), Directory):
                return []
            return self._expand(next_path, f"{history}{segment}/", rest)

        directory = self._file_system.get(path)
        if not isinstance(directory, Directory):
            return []

        regex = self._compile(segment)
        results: List[str] = []
        for name, node in sorted(directory.nodes.items()):
            if not regex.fullmatch(name):
                continue

            rendered = history + escape_literal(name)
            if rest:
                if isinstance(node, Directory):
                    results.extend(self._expand(path.get_child(name), rendered + "/", rest))
            else:
                results.append(rendered)
        return results

    @staticmethod
    def _compile(segment: str) -> 're.Pattern[str]':
        """Translate one marked path segment into a regular expression."""
        parts: List[str] = []
        for char, is_glob in iter_marked(segment):
            if not is_glob:
                parts.append(re.escape(char))
            elif char == "?":
                parts.append("[^/]")
            else:
                parts.append("[^/]*")

        prefix = r"(?!\.)" if next(iter_marked(segment))[1] else ""
        return re.compile(prefix + "".join(parts), re.DOTALL)
