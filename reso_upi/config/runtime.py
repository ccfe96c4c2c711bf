"""
Runtime Configuration

Central configuration for codec defaults: format version, digest algorithm,
strict mode and library log level.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from reso_upi.schemas.versioning import DEFAULT_HASH_VERSION, DEFAULT_UPI_VERSION

load_dotenv()

# Environment variable prefix
ENV_PREFIX = "RESO_UPI_"

# Logger at the top of the package hierarchy
LIBRARY_LOGGER_NAME = "reso_upi"


def _as_bool(value: Any) -> bool:
    """Parse a flag that may arrive as a string, e.g. a quoted YAML scalar."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass
class UpiConfig:
    """
    Runtime configuration for the UPI codec.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    default_version: str = DEFAULT_UPI_VERSION
    hash_algorithm: str = DEFAULT_HASH_VERSION
    strict_mode: bool = False
    log_level: str = "WARNING"
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - RESO_UPI_DEFAULT_VERSION: format version used when none is passed
        - RESO_UPI_HASH_ALGORITHM: hashlib algorithm name (e.g. sha3-256)
        - RESO_UPI_STRICT_MODE: enable strict encode/decode (true/false)
        - RESO_UPI_LOG_LEVEL: level for the reso_upi logger
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}DEFAULT_VERSION"):
            overrides["default_version"] = os.getenv(f"{ENV_PREFIX}DEFAULT_VERSION")
        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides["hash_algorithm"] = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}STRICT_MODE"):
            overrides["strict_mode"] = (
                os.getenv(f"{ENV_PREFIX}STRICT_MODE", "false").lower() == "true"
            )
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper()

        return overrides

    @classmethod
    def from_env(cls) -> "UpiConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "UpiConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpiConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(
            default_version=str(data.get("default_version", DEFAULT_UPI_VERSION)),
            hash_algorithm=data.get("hash_algorithm", DEFAULT_HASH_VERSION),
            strict_mode=_as_bool(data.get("strict_mode", False)),
            log_level=str(data.get("log_level", "WARNING")).upper(),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "UpiConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "default_version": self.default_version,
            "hash_algorithm": self.hash_algorithm,
            "strict_mode": self.strict_mode,
            "log_level": self.log_level,
            "extra": self.extra,
        }

    def apply_logging(self) -> logging.Logger:
        """Set the reso_upi logger level. Handlers are left to the application."""
        logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        logger.setLevel(getattr(logging, self.log_level.upper(), logging.WARNING))
        return logger


# Global default configuration
_default_config: Optional[UpiConfig] = None


def get_default_config() -> UpiConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = UpiConfig.from_env()
    return _default_config


def set_default_config(config: Optional[UpiConfig]) -> None:
    """Set the default runtime configuration. Pass None to reload from env."""
    global _default_config
    _default_config = config
