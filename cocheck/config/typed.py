from __future__ import annotations

import dataclasses
import typing as t
from dataclasses import fields

from ..errors import ConfigLoadError


class ConfigCoerceError(ConfigLoadError, TypeError):
    """Configuration value of the wrong type, with the field path."""
    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


_T = t.TypeVar("_T")


def build_typed(cls: type[_T], data: t.Any) -> _T:
    """
    Build a dataclass instance from plain YAML data,
    recursively coercing nested values according to type hints.
    """
    try:
        return t.cast(_T, _build_dataclass(cls, data, path=()))
    except ConfigCoerceError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigCoerceError(f"failed to build {getattr(cls, '__name__', str(cls))}: {e}") from e


def _build_dataclass(cls: type, data: t.Any, path: tuple[str, ...]):
    if not isinstance(data, dict):
        raise ConfigCoerceError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)
    # strict check for unknown keys
    allowed = {f.name for f in fields(cls)}
    extras = set(data.keys()) - allowed
    if extras:
        raise ConfigCoerceError(f"unexpected keys: {sorted(extras)!r}", path)

    hints = t.get_type_hints(cls)
    kwargs = {}
    for f in fields(cls):
        f_path = (*path, f.name)
        if f.name in data:
            kwargs[f.name] = coerce(data[f.name], hints.get(f.name, t.Any), f_path)
        elif f.default is not dataclasses.MISSING:
            kwargs[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            kwargs[f.name] = f.default_factory()
        else:
            raise ConfigCoerceError("required field missing", f_path)
    return cls(**kwargs)


def coerce(value: t.Any, hint: t.Any, path: tuple[str, ...]) -> t.Any:
    """Recursive normalization according to a type hint."""
    origin = t.get_origin(hint)
    args = t.get_args(hint)

    if hint is t.Any:
        return value

    # bool is checked strictly: YAML already yields real booleans
    if hint is bool:
        if isinstance(value, bool):
            return value
        raise ConfigCoerceError(f"expected bool, got {type(value).__name__}", path)

    if hint in (str, int, float):
        if isinstance(value, bool):
            raise ConfigCoerceError(f"expected {hint.__name__}, got bool", path)
        if isinstance(value, hint):
            return value
        if hint is float and isinstance(value, int):
            return float(value)
        try:
            return hint(value)
        except (TypeError, ValueError):
            raise ConfigCoerceError(f"expected {hint.__name__}, got {type(value).__name__}", path)

    if origin is list:
        (elem_t,) = args or (t.Any,)
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ConfigCoerceError(f"expected list, got {type(value).__name__}", path)
        return [coerce(v, elem_t, (*path, str(i))) for i, v in enumerate(value)]

    return value


__all__ = ["ConfigCoerceError", "build_typed", "coerce"]
