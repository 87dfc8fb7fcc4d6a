"""
Tokenizer Module

Splits an input line into words, command separators and redirect
operators.

Quote characters, curly braces and backslashes are kept in the words
verbatim; the Expander interprets them later.

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from shellsim.exceptions import TokenizeError
from shellsim.logger import get_logger


class TokenType(Enum):
    """Token types for command parsing."""
    WORD = "word"
    SEPARATOR = "separator"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class Token:
    """A token of an input line."""
    type: TokenType
    value: str


QUOTES = ("'", '"')


class Tokenizer:
    """
    Splits input lines into tokens.

    Handles:
    - Whitespace-separated words
    - Backslash escapes
    - Single and double quotes
    - Curly-brace groups
    - ``;`` command separators
    - ``>`` and ``>>`` redirects with an optional numeric stream id

    Example:
        >>> [token.value for token in Tokenizer().tokenize("a 'b c' 2>>log")]
        ['a', "'b c'", '2>>', 'log']
    """

    def __init__(self) -> None:
        self._logger = get_logger('parser')

    def tokenize(self, line: str) -> List[Token]:
        """
        Convert a line into tokens.

        Args:
            line: The raw input line

        Returns:
            The tokens in input order

        Raises:
            TokenizeError: On unterminated quotes, unbalanced or mismatched
                braces, or a trailing backslash
        """
        tokens: List[Token] = []
        current = ""
        groups: List[str] = []
        i = 0

        def flush() -> None:
            nonlocal current
            if current:
                tokens.append(Token(TokenType.WORD, current))
                current = ""

        while i < len(line):
            char = line[i]
            top = groups[-1] if groups else None

            if char == "\\":
                if i + 1 >= len(line):
                    raise TokenizeError(
                        "Unexpected end of input. '\\' was used but there was nothing to escape.",
                        position=i
                    )
                current += line[i:i + 2]
                i += 2
                continue

            if char in QUOTES:
                if top == char:
                    groups.pop()
                elif top not in QUOTES:
                    groups.append(char)
                current += char
                i += 1
                continue

            if char == "{":
                if top not in QUOTES:
                    groups.append(char)
                current += char
                i += 1
                continue

            if char == "}":
                if top == "{":
                    groups.pop()
                elif top is None:
                    raise TokenizeError(
                        "Unexpected closing '}' without corresponding '{'.",
                        position=i
                    )
                elif "{" in groups:
                    raise TokenizeError(
                        "Unexpected closing '}' before closing quotation mark.",
                        position=i
                    )
                current += char
                i += 1
                continue

            if groups:
                current += char
                i += 1
                continue

            if char.isspace():
                flush()
                i += 1
                continue

            if char == ";":
                flush()
                tokens.append(Token(TokenType.SEPARATOR, char))
                i += 1
                continue

            if char == ">":
                stream = current if current.isascii() and current.isdigit() else ""
                if stream:
                    current = ""
                else:
                    flush()

                operator = ">>" if line[i:i + 2] == ">>" else ">"
                tokens.append(Token(TokenType.REDIRECT, stream + operator))
                i += len(operator)
                continue

            current += char
            i += 1

        if groups:
            if groups[-1] == "{":
                raise TokenizeError("Unexpected end of input. Missing closing '}'.", position=len(line))
            raise TokenizeError(
                f"Unexpected end of input. Missing closing {groups[-1]}.",
                position=len(line)
            )

        flush()

        self._logger.debug("Tokenized input", context={'tokens': len(tokens)})
        return tokens
