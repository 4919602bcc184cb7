"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import InvalidConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def env_str(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_flag(name: str, *, default: bool) -> bool:
    value = env_str(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f"Invalid boolean for {name}: {value!r}")


def env_list(name: str) -> tuple[str, ...]:
    """Split a comma or whitespace separated variable into its non-empty items."""

    value = env_str(name)
    if value is None:
        return ()
    return tuple(item for item in value.replace(",", " ").split() if item)


def env_float(name: str) -> float | None:
    value = env_str(name)
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError as exc:
        raise InvalidConfigurationError(f"Invalid number for {name}: {value!r}") from exc
    if parsed <= 0:
        raise InvalidConfigurationError(f"{name} must be positive, got {value!r}")
    return parsed
