"""Configuration loader for the terraform wrapper."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from pyterraform.exceptions import ConfigError
from pyterraform.lib.paths import get_config_file, get_project_config_file

ENV_PREFIX = "PYTERRAFORM_"

TRUE_VALUES = ("1", "true", "yes", "on")

DEFAULT_CONFIG = {
    "terraform_binary": "terraform",
    "work_dir": None,
    "no_color": False,
    "debug": False,
    "vars": {},
    "log_format": "console",
}

BOOLEAN_KEYS = ("no_color", "debug")


class ConfigLoader:
    """
    Load and merge configuration from multiple sources.

    The ConfigLoader merges, lowest to highest priority:
    1. Built-in defaults
    2. User config (~/.config/pyterraform/config.yaml), or an explicit file
    3. Project config (./pyterraform.yaml)
    4. Environment variables (PYTERRAFORM_*)

    Attributes
    ----------
    config_path : Path
        Path to user or explicit configuration file.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration loader.

        Parameters
        ----------
        config_path : Path or None, optional
            Explicit config file. If None, uses the XDG config.yaml location,
            by default None.
        """
        self.explicit = config_path is not None
        self.config_path = Path(config_path) if config_path else get_config_file()

    def _load_yaml_file(self, path: Path) -> dict:
        """
        Load and parse a YAML configuration file.

        Parameters
        ----------
        path : Path
            Path to YAML file to load.

        Returns
        -------
        dict
            Parsed YAML content, or empty dict if file doesn't exist.

        Raises
        ------
        ConfigError
            If the file is unreadable, has invalid syntax, or is not a mapping.
        """
        if not path.exists():
            return {}

        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if not content:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(f"Expected a mapping in {path}", {"type": type(content).__name__})
        return content

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """
        Deep merge two dictionaries recursively.

        Nested dictionaries are merged recursively. For non-dict values,
        the override value replaces the base value.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: dict) -> dict:
        """
        Apply environment variable overrides to configuration.

        ``PYTERRAFORM_NO_COLOR=true`` sets the top-level ``no_color`` key.
        Keys stay flat since option names contain underscores themselves.
        """
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            key = env_key[len(ENV_PREFIX) :].lower()
            if key in BOOLEAN_KEYS:
                config[key] = env_value.strip().lower() in TRUE_VALUES
            else:
                config[key] = env_value

        return config

    def load(self) -> dict:
        """
        Load and merge configuration from all sources.

        Returns
        -------
        dict
            Merged configuration dictionary with a ``_meta`` section.
        """
        sources = []
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.explicit and not self.config_path.exists():
            raise ConfigError(f"Config file not found: {self.config_path}")

        for path in (self.config_path, get_project_config_file()):
            content = self._load_yaml_file(path)
            if path.exists():
                sources.append(str(path))
            config = self._deep_merge(config, content)

        config = self._apply_env_overrides(config)

        config["_meta"] = {"config_sources": sources}

        return config


def get_config_value(config: dict, key_path: str, default: Any = None) -> Any:
    """
    Get configuration value using dot notation path.

    Parameters
    ----------
    config : dict
        Configuration dictionary to query.
    key_path : str
        Key path in dot notation (e.g., "vars.region").
    default : Any, optional
        Default value to return if key doesn't exist, by default None.

    Returns
    -------
    Any
        Configuration value if found, default value otherwise.

    Examples
    --------
    >>> config = {"vars": {"region": "eu-west-1"}}
    >>> get_config_value(config, "vars.region")
    'eu-west-1'
    >>> get_config_value(config, "nonexistent.key", "default")
    'default'
    """
    value = config

    for key in key_path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value
