"""
ShellSim Configuration Loader

Configuration management for shell sessions:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates through dot-notation keys
- Typed access to configuration values

Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, List

from shellsim.exceptions import ConfigurationError
from shellsim.logger import get_logger


logger = get_logger('config')


@dataclass
class ShellConfig:
    """Shell prompt and history settings."""
    prompt_suffix: str = "$ "
    hostname: str = "shellsim"
    history_size: int = 1000


@dataclass
class EnvironmentConfig:
    """Initial environment of a shell session."""
    readonly_keys: List[str] = field(default_factory=lambda: [
        "cwd", "home", "user"
    ])
    defaults: dict[str, str] = field(default_factory=lambda: {
        "user": "user",
        "home": "/home/user",
        "cwd": "/home/user",
    })


@dataclass
class FilesystemConfig:
    """Layout of the default file system."""
    standard_dirs: List[str] = field(default_factory=lambda: [
        "/bin/", "/dev/", "/home/user/", "/root/", "/tmp/",
    ])
    null_device: str = "/dev/null"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    max_buffer_entries: int = 10000


@dataclass
class Config:
    """
    Main configuration container.

    Holds every configuration section of a shell session.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge_section(section_type: type, data: Any, current: Any) -> Any:
    """Build a section from ``data``, falling back to ``current`` per field."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration section must be an object, got {type(data).__name__}"
        )
    values = {
        f.name: data.get(f.name, getattr(current, f.name))
        for f in fields(section_type)
    }
    return section_type(**values)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files and providing runtime
    configuration access. A single instance is shared by the process.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('shellsim.json')
        >>> print(config.shell.hostname)
        shellsim
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    _SECTIONS = {
        'shell': ShellConfig,
        'environment': EnvironmentConfig,
        'filesystem': FilesystemConfig,
        'logging': LoggingConfig,
    }

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Sections and fields missing from the file keep their defaults.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                context={'path': config_path}
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                context={'path': config_path}
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                context={'path': config_path}
            ) from e

        self._config = self._parse_config(data)
        self._loaded = True
        logger.info("Configuration loaded", context={'path': config_path})
        return self._config

    def _parse_config(self, data: Any) -> Config:
        """Parse configuration data into Config object."""
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a JSON object")

        config = Config()
        for name, section_type in self._SECTIONS.items():
            if name in data:
                section = _merge_section(section_type, data[name], getattr(config, name))
                setattr(config, name, section)
        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        """Whether a configuration file has been loaded."""
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.hostname')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config
        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default
        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'shell.history_size')
            value: Value to set

        Raises:
            ConfigurationError: If the key does not name a configuration field

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigurationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, '__dataclass_fields__') or final_key not in obj.__dataclass_fields__:
            raise ConfigurationError(f"Invalid configuration key: {key}", key=key)
        setattr(obj, final_key, value)
        logger.debug("Configuration updated", context={'key': key})

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Restore the built-in defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
