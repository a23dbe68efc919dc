"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

KNOWN_SECTIONS = {
    "storage": {"plans_dir", "extension"},
    "display": {"color", "view_count", "label_width"},
    "logging": {"level", "format_json"},
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate storage parameters."""
        errors = []

        if "plans_dir" in params:
            value = params["plans_dir"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="storage.plans_dir",
                    message="Must be a non-empty path",
                    value=value
                ))

        if "extension" in params:
            value = params["extension"]
            if not isinstance(value, str) or not value.startswith(".") or len(value) < 2:
                errors.append(ValidationError(
                    field="storage.extension",
                    message="Must start with '.' and name an extension",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        if "color" in params and not isinstance(params["color"], bool):
            errors.append(ValidationError(
                field="display.color",
                message="Must be a boolean",
                value=params["color"]
            ))

        for key in ("view_count", "label_width"):
            if key in params:
                value = params[key]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=f"display.{key}",
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(sorted(LOG_LEVELS))}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="logging.format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(field=section, message="Unknown section", value=value))
                continue
            if not isinstance(value, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=value))
                continue
            for key in value:
                if key not in KNOWN_SECTIONS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown setting",
                        value=value[key]
                    ))

        if errors:
            return errors

        errors.extend(ConfigValidator.validate_storage_params(config.get("storage", {})))
        errors.extend(ConfigValidator.validate_display_params(config.get("display", {})))
        errors.extend(ConfigValidator.validate_logging_params(config.get("logging", {})))

        return errors
