"""
Configuration handling for the media saver
"""
import copy
import os
import yaml
from typing import Dict, Any, Optional

from .services.errors import ConfigError


class Config:
    """Application configuration: defaults, YAML file and CLI overrides"""

    DEFAULT_CONFIG = {
        'source_dir': None,
        'destination_dir': None,
        'follow_symlinks': False,
        'log_level': 'WARNING',
        'inspect': {
            'show_errors': True,   # list files whose metadata could not be read
        },
    }

    # Keys whose values are dicts merged key by key instead of replaced
    NESTED_KEYS = ('inspect',)

    # Flags that must be real YAML booleans
    BOOL_KEYS = (('follow_symlinks',), ('inspect', 'show_errors'))

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        # Deep copy so instances never share the nested defaults
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigError: if the file cannot be read, is not a YAML mapping
                or holds a value of the wrong type
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {config_file}")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS:
                if value is None:
                    continue
                if not isinstance(value, dict):
                    raise ConfigError(f"'{key}' must be a mapping in {config_file}")
                if not isinstance(self.config.get(key), dict):
                    self.config[key] = {}
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

        self._check_booleans(config_file)

    def _check_booleans(self, config_file: str) -> None:
        """
        Reject non-boolean flags ('no' or "false" in YAML quotes are strings)

        Raises:
            ConfigError: if a flag is not true/false
        """
        for path in self.BOOL_KEYS:
            value = self.config
            for part in path:
                value = value.get(part) if isinstance(value, dict) else None
            if not isinstance(value, bool):
                raise ConfigError(f"'{'.'.join(path)}' must be true or false in {config_file}, got {value!r}")

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Deep merge of nested dictionaries

        Args:
            base: Dictionary updated in place
            update: Dictionary with the new values
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Overlay CLI arguments; they take precedence over the file.
        None values are ignored.

        Args:
            args: Dictionary of CLI arguments
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return a configuration value

        Args:
            key: Configuration key
            default: Value returned when the key is missing
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Return a shallow copy of the whole configuration"""
        return self.config.copy()
