from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import PROPERTY_ALIASES, CheckConfig
from .typed import build_typed
from ..errors import ConfigLoadError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")
CONFIG_FILE = "cocheck.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigLoadError(f"Failed to read config {path}: {e}") from e
    except YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{path}: config must be a mapping of property names to values")
    return raw


def config_from_mapping(raw: Dict[str, Any]) -> CheckConfig:
    """
    Build a validated config from a mapping keyed by property names.

    Args:
        raw: Mapping such as ``{"classificationThreshold": 0.9}``

    Returns:
        Validated CheckConfig

    Raises:
        ConfigLoadError: On unknown properties, wrong types or out-of-range values
    """
    data: Dict[str, Any] = {}
    for key, value in raw.items():
        name = PROPERTY_ALIASES.get(str(key))
        if name is None:
            known = ", ".join(sorted(PROPERTY_ALIASES))
            raise ConfigLoadError(f"Unknown property '{key}' (expected one of: {known})")
        data[name] = value
    return build_typed(CheckConfig, data).validate()


def load_config(root: Path, path: Optional[Path] = None) -> CheckConfig:
    """
    Load configuration for a run.

    An explicit ``path`` must exist. Otherwise ``cocheck.yaml`` under ``root``
    is used when present, and defaults when it is not.
    """
    if path is not None:
        cfg_path = path if path.is_absolute() else (root / path)
        if not cfg_path.is_file():
            raise ConfigLoadError(f"Config file not found: {cfg_path}")
    else:
        cfg_path = root / CONFIG_FILE
        if not cfg_path.is_file():
            logger.debug("No %s in %s, using defaults", CONFIG_FILE, root)
            return CheckConfig()

    logger.info("Loading config from %s", cfg_path)
    return config_from_mapping(_read_yaml(cfg_path))


def apply_overrides(cfg: CheckConfig, **overrides: Any) -> CheckConfig:
    """
    Return a copy of ``cfg`` with non-None overrides applied and validated.

    Keyword names are CheckConfig field names.
    """
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return cfg
    merged = {f.name: getattr(cfg, f.name) for f in dataclasses.fields(cfg)}
    merged.update(changes)
    return build_typed(CheckConfig, merged).validate()


__all__ = ["CONFIG_FILE", "load_config", "config_from_mapping", "apply_overrides"]
