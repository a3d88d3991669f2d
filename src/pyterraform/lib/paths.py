"""XDG-compliant path management for pyterraform."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "pyterraform"


def get_config_dir() -> Path:
    """
    Get the configuration directory following XDG Base Directory spec.

    Returns
    -------
    Path
        Path to ~/.config/pyterraform/ or $XDG_CONFIG_HOME/pyterraform/.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"

    return base / APP_NAME


def _resolve_yaml_file(directory: Path, stem: str) -> Path:
    """
    Resolve ``stem.yaml`` or ``stem.yml`` inside a directory.

    ``.yaml`` wins when both exist. When neither exists the ``.yaml``
    path is returned.
    """
    yaml_path = directory / f"{stem}.yaml"
    yml_path = directory / f"{stem}.yml"

    if yaml_path.exists():
        if yml_path.exists():
            logger.warning(f"Both {stem}.yaml and {stem}.yml found in {directory}, using {stem}.yaml")
        return yaml_path
    if yml_path.exists():
        return yml_path
    return yaml_path


def get_config_file() -> Path:
    """
    Get path to the user configuration file.

    Returns
    -------
    Path
        Path to config.yaml (or config.yml) in the configuration directory.
    """
    return _resolve_yaml_file(get_config_dir(), "config")


def get_project_config_file() -> Path:
    """
    Get path to project-local configuration file.

    Returns
    -------
    Path
        Path to ./pyterraform.yaml in the current working directory.
    """
    return _resolve_yaml_file(Path.cwd(), APP_NAME)
