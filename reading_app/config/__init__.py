"""
Configuration for the reading package.

Defaults are overridden by a YAML file in the config directory, then by
environment variables, then by explicit overrides (command-line flags).
"""
from .defaults import ReadingConfig, get_default_config
from .loader import ConfigLoader, load_config

__all__ = ["ConfigLoader", "ReadingConfig", "get_default_config", "load_config"]
