#!/usr/bin/env python3
"""
ShellSim - An In-Process POSIX-like Shell Simulator

This is the main entry point for ShellSim.

The shell ships without built-in commands. The entry point installs a
parse inspector as fallback handler: every command is answered with
the structure the parser produced for it.

Usage:
    python -m shellsim [--config FILE] [--log-level LEVEL] [--headless]

Version: 1.0.0
"""

import argparse
import sys
from typing import List, Optional

from shellsim import __version__
from shellsim.core.config_loader import ConfigLoader, get_config
from shellsim.exceptions import ConfigurationError
from shellsim.filesystem import Buffer, StreamSet, persistence
from shellsim.logger import Logger, LogLevel
from shellsim.shell import InputArgs, Shell


HEADLESS_SCRIPT = """
# Variables, quoting and redirection
greet "Hello, $user" > greeting.txt
note 'single $quoted text' >> greeting.txt
# Globbing against the file system
list /home/*/greeting.tx?
list -v --depth=2 -- -not-an-option {literal * and ?}
# Expansion errors stay local to one command
missing $ ; after error
nomatch /tmp/*.log ; after error
# Tokenizing errors reject the whole line
broken 'unterminated ; never parsed
"""


def inspect(input_args: InputArgs, streams: StreamSet) -> int:
    """Write the parsed structure of a command."""
    streams.out.write_line(f"command: {input_args.command}")
    streams.out.write_line(f"options: {input_args.options}")
    streams.out.write_line(f"args:    {input_args.args}")
    for stream, target in sorted(input_args.redirect_targets.items()):
        streams.out.write_line(f"redirect {stream}: {target.type.value} {target.target}")
    return 0


def _setup(config_path: Optional[str], log_level: Optional[str]) -> None:
    """Load configuration and initialize logging."""
    if config_path:
        ConfigLoader().load(config_path)

    config = get_config().logging
    level_name = (log_level or config.level).upper()
    if level_name not in LogLevel.__members__:
        raise ConfigurationError(f"Unknown log level: {level_name}", key="logging.level")

    Logger.initialize(
        level=LogLevel[level_name],
        log_file=config.log_file,
        console_output=config.console_output,
        max_buffer_entries=config.max_buffer_entries
    )


def run_headless() -> int:
    """
    Run ShellSim in headless mode.

    Executes a scripted session against a default file system, prints
    what the parser made of each command and dumps the resulting tree.
    """
    out = Buffer()
    shell = Shell.create_default(fallback=inspect, streams=StreamSet(Buffer(), out, out))

    print("\n=== Running scripted session ===\n")
    for line in HEADLESS_SCRIPT.strip().split('\n'):
        if not line or line.startswith('#'):
            continue
        print(shell.prompt() + line)
        exit_code = shell.execute(line)
        print(out.read(), end="")
        print(f"(exit {exit_code})")

    print("\n=== File system ===\n")
    print(persistence.dumps(shell.file_system, indent=2))
    print("\n=== Session complete ===\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for ShellSim."""
    parser = argparse.ArgumentParser(prog="shellsim", description="In-process shell simulator")
    parser.add_argument("--config", help="path to a JSON configuration file")
    parser.add_argument("--log-level", help="minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    parser.add_argument("--headless", action="store_true", help="run a scripted session and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    options = parser.parse_args(argv)

    try:
        _setup(options.config, options.log_level)
    except ConfigurationError as e:
        print(f"shellsim: {e}", file=sys.stderr)
        return 1

    if options.headless:
        return run_headless()

    shell = Shell.create_default(fallback=inspect)
    shell.register("exit", lambda input_args, streams: shell.stop() or 0)

    print(f"ShellSim {__version__}. Every command is answered with its parsed form; type 'exit' to leave.\n")
    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted")
    finally:
        Logger.shutdown()
    return shell.last_exit_code


if __name__ == '__main__':
    sys.exit(main())
