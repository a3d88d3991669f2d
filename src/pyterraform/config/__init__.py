"""Configuration loading for pyterraform."""

from .loader import ConfigLoader, get_config_value

__all__ = ["ConfigLoader", "get_config_value"]
