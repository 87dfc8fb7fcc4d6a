"""
ShellSim Core Module

Session-wide configuration shared by the file system and the shell.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    ShellConfig,
    EnvironmentConfig,
    FilesystemConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'ShellConfig',
    'EnvironmentConfig',
    'FilesystemConfig',
    'LoggingConfig',
    'get_config',
]
