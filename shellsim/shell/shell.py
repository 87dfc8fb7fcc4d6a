"""
ShellSim Shell Module

Runs input lines: parses them command by command, sets up
redirections on the file system and dispatches to registered command
handlers.

Version: 1.0.0
"""

import sys
from typing import Callable, List, Optional, TextIO

from .environment import Environment
from .history import InputHistory
from .input_args import InputArgs, RedirectType, StandardStream
from .parser import InputParser
from .tokenizer import Token
from shellsim.core.config_loader import get_config
from shellsim.exceptions import (
    EnvironmentException,
    FileSystemException,
    ParseException,
)
from shellsim.filesystem import Buffer, Directory, FileSystem, OpenMode, Path, Stream, StreamSet
from shellsim.logger import get_logger


CommandHandler = Callable[[InputArgs, StreamSet], int]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_COMMAND_NOT_FOUND = 127


class ConsoleStream(Stream):
    """A write-only stream onto a text file such as ``sys.stdout``."""

    def __init__(self, target: TextIO) -> None:
        self._target = target

    def _remaining(self) -> str:
        return ""

    def read(self, count: Optional[int] = None) -> str:
        return ""

    def write(self, text: str) -> None:
        self._target.write(text)
        self._target.flush()


class Shell:
    """
    ShellSim Interactive Shell.

    Provides:
    - Command parsing
    - Output and error redirection into the file system
    - Dispatch to registered command handlers
    - Command history

    The shell has no built-in commands. A handler receives the parsed
    InputArgs and the command's streams and returns an exit code.

    Example:
        >>> shell = Shell.create_default()
        >>> shell.register("echo", lambda args, streams: streams.out.write_line(" ".join(args.args)) or 0)
        >>> shell.execute("echo hello > greeting.txt")
        0
    """

    def __init__(
        self,
        environment: Environment,
        file_system: FileSystem,
        commands: Optional[dict[str, CommandHandler]] = None,
        fallback: Optional[CommandHandler] = None,
        streams: Optional[StreamSet] = None
    ) -> None:
        self._environment = environment
        self._file_system = file_system
        self._parser = InputParser.create(environment, file_system)
        self._commands: dict[str, CommandHandler] = {}
        self._fallback = fallback
        self._streams = streams or StreamSet(
            Buffer(), ConsoleStream(sys.stdout), ConsoleStream(sys.stderr)
        )
        self._history = InputHistory(max_size=get_config().shell.history_size)
        self._logger = get_logger('shell')
        self._running = False
        self._last_exit_code = EXIT_SUCCESS

        for name, handler in (commands or {}).items():
            self.register(name, handler)

    @classmethod
    def create_default(
        cls,
        commands: Optional[dict[str, CommandHandler]] = None,
        fallback: Optional[CommandHandler] = None,
        streams: Optional[StreamSet] = None
    ) -> 'Shell':
        """Create a shell over the default file system and configured environment."""
        config = get_config().environment
        environment = Environment(config.readonly_keys, config.defaults)
        file_system = FileSystem.create_default()

        for key in ("home", "cwd"):
            directory = environment.get_or_default(key)
            if directory and not file_system.has(directory):
                file_system.add(Path(directory + "/"), Directory(), True)

        return cls(environment, file_system, commands, fallback, streams)

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def file_system(self) -> FileSystem:
        return self._file_system

    @property
    def parser(self) -> InputParser:
        return self._parser

    @property
    def history(self) -> InputHistory:
        return self._history

    @property
    def commands(self) -> dict[str, CommandHandler]:
        return dict(self._commands)

    @property
    def last_exit_code(self) -> int:
        return self._last_exit_code

    def register(self, name: str, handler: CommandHandler) -> None:
        """Register ``handler`` for the command ``name`` (case-insensitive)."""
        self._commands[name.lower()] = handler
        self._logger.debug("Registered command", context={'command': name.lower()})

    def prompt(self) -> str:
        """Render the prompt, showing the home directory as ``~``."""
        config = get_config().shell
        user = self._environment.get_or_default("user", "")
        cwd = self._environment.get_or_default("cwd", "/")
        home = self._environment.get_or_default("home")

        if home and home != "/" and (cwd == home or cwd.startswith(home + "/")):
            cwd = "~" + cwd[len(home):]

        return f"{user}@{config.hostname}:{cwd}{config.prompt_suffix}"

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        self._running = True

        while self._running:
            try:
                try:
                    line = input(self.prompt())
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    print("^C")
                    continue

                self.execute(line)

            except Exception as e:
                self._logger.exception("Shell error", exc=e)
                print(f"shell: error: {e}")

        self._running = False

    def stop(self) -> None:
        """Stop the shell after the current line."""
        self._running = False

    def execute(self, line: str, streams: Optional[StreamSet] = None) -> int:
        """
        Execute a command line.

        Commands run in order. A command that fails to parse writes its
        error to the error stream and exits with 1; later commands still run.

        Args:
            line: Command line string
            streams: Streams to run with instead of the shell's own

        Returns:
            Exit code of the last command
        """
        streams = streams or self._streams
        self._history.add(line)

        try:
            commands = self._parser.split(line)
        except ParseException as e:
            self._report(e, streams)
            self._last_exit_code = EXIT_FAILURE
            return EXIT_FAILURE

        exit_code = EXIT_SUCCESS
        for tokens in commands:
            exit_code = self._execute_command(tokens, streams)
        self._last_exit_code = exit_code
        return exit_code

    def run_script(self, script: str, streams: Optional[StreamSet] = None) -> int:
        """
        Run a script (multiple lines).

        Blank lines and lines starting with ``#`` are skipped.

        Returns:
            Last exit code
        """
        exit_code = EXIT_SUCCESS

        for line in script.split('\n'):
            line = line.strip()
            if line and not line.startswith('#'):
                exit_code = self.execute(line, streams)

        return exit_code

    def _execute_command(self, tokens: List[Token], streams: StreamSet) -> int:
        try:
            input_args = self._parser.parse_command(tokens)
        except ParseException as e:
            self._report(e, streams)
            return EXIT_FAILURE

        try:
            command_streams = self._redirect(input_args, streams)
        except FileSystemException as e:
            self._report(e, streams)
            return EXIT_FAILURE

        if input_args.is_empty:
            return EXIT_SUCCESS

        handler = self._commands.get(input_args.command, self._fallback)
        if handler is None:
            command_streams.err.write_line(f"Unknown command '{input_args.command}'.")
            self._logger.warning("Unknown command", context={'command': input_args.command})
            return EXIT_COMMAND_NOT_FOUND

        try:
            return handler(input_args, command_streams)
        except (FileSystemException, EnvironmentException) as e:
            self._report(e, command_streams, input_args.command)
            return EXIT_FAILURE

    def _redirect(self, input_args: InputArgs, streams: StreamSet) -> StreamSet:
        """Return a copy of ``streams`` with the command's redirect targets opened."""
        result = streams.copy()
        cwd = self._environment.get_or_default("cwd", "/")

        for stream, target in input_args.redirect_targets.items():
            mode = OpenMode.APPEND if target.type == RedirectType.APPEND else OpenMode.WRITE
            file_stream = self._file_system.open(Path.interpret(cwd, target.target), mode)

            if stream == StandardStream.OUTPUT:
                result.out = file_stream
            elif stream == StandardStream.ERROR:
                result.err = file_stream
            else:
                self._logger.debug("Redirect of unsupported stream ignored", context={'stream': stream})

        return result

    def _report(self, error: Exception, streams: StreamSet, command: Optional[str] = None) -> None:
        message = getattr(error, 'message', str(error))
        streams.err.write_line(message)
        context = {'error_code': getattr(error, 'error_code', None)}
        if command:
            context['command'] = command
        self._logger.warning(message, context=context)
