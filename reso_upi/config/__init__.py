"""
Runtime Configuration Module

Provides configuration loading and management for the UPI codec.
"""

from .runtime import (
    ENV_PREFIX,
    LIBRARY_LOGGER_NAME,
    UpiConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "ENV_PREFIX",
    "LIBRARY_LOGGER_NAME",
    "UpiConfig",
    "get_default_config",
    "set_default_config",
]
