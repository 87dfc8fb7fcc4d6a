"""
ShellSim Shell Module

Input parsing and command execution:
- Tokenizer, Expander and Globber
- InputParser producing InputArgs
- Environment variables and input history
- Shell wiring parsing, redirection and command handlers together
"""

from .environment import Environment
from .history import InputHistory
from .tokenizer import Tokenizer, Token, TokenType
from .expander import Expander
from .globber import Globber
from .input_args import InputArgs, RedirectTarget, RedirectType, StandardStream
from .parser import InputParser
from .shell import Shell, ConsoleStream, CommandHandler

__all__ = [
    'Environment',
    'InputHistory',
    'Tokenizer',
    'Token',
    'TokenType',
    'Expander',
    'Globber',
    'InputArgs',
    'RedirectTarget',
    'RedirectType',
    'StandardStream',
    'InputParser',
    'Shell',
    'ConsoleStream',
    'CommandHandler',
]
