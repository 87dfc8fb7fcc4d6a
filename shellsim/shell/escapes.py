"""
Glob Marker Module

The text passed from the Expander to the Globber distinguishes
wildcards from literal characters by prefixing every wildcard with
MARKER. A literal MARKER character is written as two markers.

    "a" MARKER "*"    a followed by a wildcard
    "a*"              a followed by a literal asterisk
"""

from typing import Iterator, Tuple


MARKER = "\x1b"
GLOB_CHARACTERS = ("?", "*")


def mark_glob(char: str) -> str:
    """Return ``char`` marked as a wildcard."""
    return MARKER + char


def escape_literal(text: str) -> str:
    """Return ``text`` as literal marked text."""
    return text.replace(MARKER, MARKER + MARKER)


def iter_marked(text: str) -> Iterator[Tuple[str, bool]]:
    """Yield ``(char, is_wildcard)`` for each character that ``text`` denotes."""
    i = 0
    while i < len(text):
        char = text[i]
        if char == MARKER and i + 1 < len(text):
            following = text[i + 1]
            if following in GLOB_CHARACTERS:
                yield following, True
                i += 2
                continue
            if following == MARKER:
                yield MARKER, False
                i += 2
                continue
        yield char, False
        i += 1


def unmark(text: str) -> str:
    """Return the plain text that marked ``text`` denotes."""
    return "".join(char for char, _ in iter_marked(text))


def has_glob(text: str) -> bool:
    """Check whether ``text`` contains a wildcard."""
    return any(is_glob for _, is_glob in iter_marked(text))
