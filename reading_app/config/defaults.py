"""Default configuration parameters."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PLANS_DIR = Path.home() / ".reading"


@dataclass(frozen=True)
class StorageParams:
    """Where and how plans are stored."""
    plans_dir: str = str(DEFAULT_PLANS_DIR)
    extension: str = ".plan.json"


@dataclass(frozen=True)
class DisplayParams:
    """Terminal output parameters."""
    color: bool = True
    view_count: int = 1                # Entries shown by `view` without --count
    label_width: int = 20              # Width of the "Current entry:" column


@dataclass(frozen=True)
class LoggingParams:
    """Log output parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class ReadingConfig:
    """Complete configuration."""
    storage: StorageParams
    display: DisplayParams
    logging: LoggingParams

    @classmethod
    def from_dict(cls, data: dict) -> "ReadingConfig":
        """Build from a merged configuration dict."""
        return cls(
            storage=StorageParams(**data.get("storage", {})),
            display=DisplayParams(**data.get("display", {})),
            logging=LoggingParams(**data.get("logging", {})),
        )

    @property
    def plans_dir(self) -> Path:
        return Path(self.storage.plans_dir).expanduser()


def get_default_config() -> ReadingConfig:
    """Get the default configuration instance."""
    return ReadingConfig(
        storage=StorageParams(),
        display=DisplayParams(),
        logging=LoggingParams(),
    )
