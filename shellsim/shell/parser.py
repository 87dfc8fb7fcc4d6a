"""
Input Parser Module

Parses input lines into InputArgs, one per ``;``-separated command.

Parsing a command:
1. Every word is expanded (variables, quotes, globs).
2. The first resulting string is the command, lowercased.
3. Options follow until the first string that does not start with
   ``-``, or until ``--``, which is dropped.
4. The remaining strings are positional arguments.
5. A redirect operator takes the next word as its target and is not
   an option or an argument; the last redirect of a stream wins.

Version: 1.0.0
"""

from typing import List, Optional, Tuple

from .environment import Environment
from .expander import Expander
from .globber import Globber
from .input_args import InputArgs, RedirectTarget, RedirectType, StandardStream
from .tokenizer import Token, Tokenizer, TokenType
from shellsim.exceptions import OptionError, RedirectError
from shellsim.filesystem import FileSystem
from shellsim.logger import get_logger


class InputParser:
    """
    Parses shell input lines.

    Example:
        >>> parser = InputParser.create(Environment(variables={"cwd": "/"}), FileSystem())
        >>> [args.command for args in parser.parse("a;;b")]
        ['a', 'b']
    """

    def __init__(self, tokenizer: Tokenizer, expander: Expander) -> None:
        self._tokenizer = tokenizer
        self._expander = expander
        self._logger = get_logger('parser')

    @classmethod
    def create(cls, environment: Environment, file_system: FileSystem) -> 'InputParser':
        """Create a parser that expands against ``environment`` and ``file_system``."""
        return cls(Tokenizer(), Expander(environment, Globber(file_system)))

    def parse(self, line: str) -> List[InputArgs]:
        """
        Parse every command in ``line``.

        Raises:
            ParseException: If any command cannot be parsed
        """
        return [self.parse_command(tokens) for tokens in self.split(line)]

    def split(self, line: str) -> List[List[Token]]:
        """
        Tokenize ``line`` into the token lists of its commands.

        Empty commands are dropped.

        Raises:
            TokenizeError: If the line cannot be tokenized
        """
        commands: List[List[Token]] = [[]]
        for token in self._tokenizer.tokenize(line):
            if token.type == TokenType.SEPARATOR:
                commands.append([])
            else:
                commands[-1].append(token)
        return [command for command in commands if command]

    def parse_command(self, tokens: List[Token]) -> InputArgs:
        """
        Expand and classify the tokens of one command.

        Raises:
            ExpansionError: If a word cannot be expanded
            GlobError: If a wildcard matches nothing
            OptionError: If an option cannot be classified
            RedirectError: If a redirect has no single target
        """
        words: List[str] = []
        redirects: dict[int, RedirectTarget] = {}

        i = 0
        while i < len(tokens):
            token = tokens[i]

            if token.type == TokenType.REDIRECT:
                stream, target = self._parse_redirect(token, tokens[i + 1] if i + 1 < len(tokens) else None)
                redirects[stream] = target
                i += 2
                continue

            if token.type == TokenType.WORD:
                words.extend(self._expander.expand(token.value))
            i += 1

        if not words:
            return InputArgs(None, redirect_targets=redirects)

        options, args = self._parse_options(words[1:])
        result = InputArgs(words[0].lower(), options, args, redirects)

        self._logger.debug(
            "Parsed command",
            context={'command': result.command, 'argc': result.argc}
        )
        return result

    def _parse_redirect(self, operator: Token, target: Optional[Token]) -> Tuple[int, RedirectTarget]:
        if target is None or target.type != TokenType.WORD:
            raise RedirectError(f"Missing redirect target after '{operator.value}'.", token=operator.value)

        paths = self._expander.expand(target.value)
        if len(paths) != 1:
            raise RedirectError(
                f"Ambiguous redirect target '{target.value}'.",
                token=target.value
            )

        digits = operator.value.rstrip(">")
        stream = int(digits) if digits else int(StandardStream.OUTPUT)
        redirect_type = RedirectType.APPEND if operator.value.endswith(">>") else RedirectType.WRITE
        return stream, RedirectTarget(redirect_type, paths[0])

    @staticmethod
    def _parse_options(words: List[str]) -> Tuple[dict[str, Optional[str]], List[str]]:
        """
        Split ``words`` into options and positional arguments.

        Raises:
            OptionError: If a value is assigned to a group of short options
        """
        options: dict[str, Optional[str]] = {}

        i = 0
        while i < len(words):
            word = words[i]
            if not word.startswith("-"):
                break
            if word == "--":
                i += 1
                break

            key, has_value, value = word.partition("=")
            option_value = value if has_value else None
            if " " in key:
                break

            if key.startswith("--"):
                name = key[2:]
                if not name or name[0].isdigit():
                    break
                options[name] = option_value
            else:
                name = key[1:]
                if not name or name[0].isdigit():
                    break
                if len(name) == 1:
                    options[name] = option_value
                elif option_value is not None:
                    raise OptionError("Cannot assign value to multiple short options.", token=word)
                else:
                    for short in name:
                        options[short] = None

            i += 1

        return options, words[i:]
