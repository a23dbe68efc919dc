"""Configuration loader with 4-tier parameter precedence."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DEFAULT_PLANS_DIR, ReadingConfig, get_default_config
from .validation import ConfigValidator

CONFIG_FILENAME = "config.yaml"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "READING_PLANS_DIR": ("storage", "plans_dir"),
    "READING_LOG_LEVEL": ("logging", "level"),
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 4-tier precedence."""

    config_dir: Path
    defaults: ReadingConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = DEFAULT_PLANS_DIR

        return cls(
            config_dir=Path(config_dir).expanduser(),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from config.yaml, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"could not parse {config_file}: {e}",
                context={"path": str(config_file)}
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping",
                context={"path": str(config_file)}
            )
        return file_config

    def load_env_config(self, environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
        """Collect overrides from READING_* environment variables."""
        environ = os.environ if environ is None else environ
        config: dict[str, Any] = {}

        for var, (section, key) in ENV_OVERRIDES.items():
            value = environ.get(var)
            if value:
                config.setdefault(section, {})[key] = value

        return config

    def merge_config(
        self,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 4-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Environment variables
        3. config.yaml in the config directory
        4. Defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())
        config = self._deep_merge(config, self.load_env_config(environ))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> ReadingConfig:
        """Merge, validate and build the configuration object."""
        config = self.merge_config(overrides, environ)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{error.field}: {error.message}" for error in errors)
            raise ConfigurationError(f"invalid configuration: {details}", errors=errors)

        return ReadingConfig.from_dict(config)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None
) -> ReadingConfig:
    """Load the effective configuration."""
    return ConfigLoader.create(config_dir).load(overrides)
