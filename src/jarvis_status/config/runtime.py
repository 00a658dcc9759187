from __future__ import annotations

"""Environment lookups for the status settings.

Each ``JARVIS_STATUS_*`` variable is resolved from the process environment
first, then from ``$XDG_CONFIG_HOME/jarvis-status/env`` (``~/.config`` when
unset), then from ``config.json`` in the same directory. The two files are
read once per process and cached in ``_DEFAULT_VALUES``.
"""


import os
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_CONFIG_HOME = Path(os.getenv("XDG_CONFIG_HOME") or Path.home() / ".config") / "jarvis-status"
_DOTENV_CANDIDATES = (_CONFIG_HOME / "env",)
_JSON_ENV_CANDIDATES = (_CONFIG_HOME / "config.json",)

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from dotenv-style files or JSON defaults."""
    from .runtime_helpers import DotenvLoader, JsonConfigLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}

    def _maybe_set(key: str, value: str) -> None:
        if key not in defaults:
            defaults[key] = value

    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            _maybe_set(key, value)

    for path in _JSON_ENV_CANDIDATES:
        for key, value in JsonConfigLoader.load_from_file(path).items():
            _maybe_set(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def reset_default_values() -> None:
    """Forget cached file defaults so the next lookup re-reads them."""

    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _default_value(name: str) -> Optional[str]:
    defaults = _load_default_values()
    return defaults.get(name)


def _normalize(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip()


def _coerce(name: str, raw_value: str, *, cast: Callable[[str], T], expected: str) -> T:
    try:
        return cast(raw_value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be {expected} (got {raw_value!r})") from exc


def env_str(name: str, or_value: str | None = None) -> str | None:
    """Fetch a variable as a stripped string; blank values count as unset."""

    value = _normalize(os.getenv(name))
    if not value:
        value = _normalize(_default_value(name))
    if not value:
        return or_value
    return value


def env_float(name: str, or_value: float | None = None) -> float | None:
    """Fetch a variable and coerce it to ``float``."""

    raw = env_str(name)
    if raw is None:
        return or_value
    return _coerce(name, raw, cast=float, expected="a float")


def env_args(name: str, *, or_value: Sequence[str]) -> tuple[str, ...]:
    """Fetch a whitespace-separated argument list, e.g. ``list --all``."""

    raw = env_str(name)
    if raw is None:
        return tuple(or_value)
    return tuple(raw.split())
