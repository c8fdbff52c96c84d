"""
Configuration loading for cocheck.
"""

from __future__ import annotations

from .load import CONFIG_FILE, apply_overrides, config_from_mapping, load_config
from .model import DEFAULT_MESSAGE, PROPERTY_ALIASES, CheckConfig
from .typed import ConfigCoerceError, build_typed

__all__ = [
    "CONFIG_FILE",
    "CheckConfig",
    "DEFAULT_MESSAGE",
    "PROPERTY_ALIASES",
    "ConfigCoerceError",
    "apply_overrides",
    "build_typed",
    "config_from_mapping",
    "load_config",
]
