"""
Runtime Configuration

Central configuration for tree construction, digest display and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.crypto.hashing import HASH_ALGORITHM
from core.schemas.errors import ConfigException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MERKLE_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG_PATHS = (
    Path("merkle.yaml"),
    Path(".merkle.yaml"),
    Path.home() / ".config" / "merkle" / "config.yaml",
)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ConfigException(
                f"Unknown log level: {self.level}",
                field_path="logging.level",
                details={"allowed": list(LOG_LEVELS)},
            )


@dataclass
class DisplayConfig:
    """Configuration for rendering digests."""
    hex_prefix: bool = False


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (a .env file is read on import)
    - YAML file
    - Programmatic construction

    The hash algorithm is fixed per build; any value other than the
    built-in one is rejected.
    """
    hash_algorithm: str = HASH_ALGORITHM
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        self.hash_algorithm = str(self.hash_algorithm).lower()
        if self.hash_algorithm != HASH_ALGORITHM:
            raise ConfigException(
                f"Unsupported hash algorithm: {self.hash_algorithm} "
                f"(only {HASH_ALGORITHM} is available)",
                field_path="hash_algorithm",
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLE_HASH_ALGORITHM: Hash algorithm name
        - MERKLE_HEX_PREFIX: Render digests with 0x (true/false)
        - MERKLE_LOG_LEVEL: Log level
        - MERKLE_LOG_FILE: Log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides["hash_algorithm"] = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM")

        if os.getenv(f"{ENV_PREFIX}HEX_PREFIX"):
            overrides.setdefault("display", {})["hex_prefix"] = _parse_bool(
                os.getenv(f"{ENV_PREFIX}HEX_PREFIX", "false")
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigException(
                    f"Invalid YAML in config file {path}: {e}",
                    details={"path": str(path)},
                ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException(
                f"Config file must contain a mapping: {path}",
                details={"path": str(path)},
            )

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        logging_data = data.get("logging", {}) or {}
        display_data = data.get("display", {}) or {}

        try:
            log_config = LoggingConfig(**logging_data)
            display = DisplayConfig(**display_data)
        except TypeError as e:
            raise ConfigException(f"Invalid configuration section: {e}") from e

        return cls(
            hash_algorithm=data.get("hash_algorithm", HASH_ALGORITHM),
            logging=log_config,
            display=display,
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "hash_algorithm" in overrides:
            new_config = RuntimeConfig(
                hash_algorithm=overrides["hash_algorithm"],
                logging=new_config.logging,
                display=new_config.display,
            )

        if "logging" in overrides:
            logging_data = {
                "level": new_config.logging.level,
                "file": new_config.logging.file,
                **overrides["logging"],
            }
            new_config.logging = LoggingConfig(**logging_data)

        if "display" in overrides:
            for key, value in overrides["display"].items():
                setattr(new_config.display, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hash_algorithm": self.hash_algorithm,
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "display": {
                "hex_prefix": self.display.hex_prefix,
            },
        }


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    An explicit config_path must exist. Without one, the first existing
    default location is used. Environment variables override file settings.
    """
    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        config = RuntimeConfig()
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                config = RuntimeConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """# Merkle root builder configuration
hash_algorithm: sha256

display:
  hex_prefix: false

logging:
  level: INFO
  file: null
"""
