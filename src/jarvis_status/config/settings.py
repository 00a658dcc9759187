from __future__ import annotations

"""Settings for one status invocation, resolved from the environment and config files."""


from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from . import ConfigurationError, env_args, env_float, env_str

DEFAULT_LISTING_COMMAND = "jarvisctl"
DEFAULT_LIST_ARGS: tuple[str, ...] = ("list",)

_LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StatusSettings:
    command: str = DEFAULT_LISTING_COMMAND
    list_args: tuple[str, ...] = DEFAULT_LIST_ARGS
    timeout_seconds: float | None = None
    namespace_icon: str = ""
    agent_icon: str = ""
    log_level: str | None = None
    log_file: Path | None = None

    @property
    def argv(self) -> list[str]:
        """Full argument vector for the listing call."""
        return [self.command, *self.list_args]


@lru_cache(maxsize=1)
def get_status_settings() -> StatusSettings:
    command = env_str("JARVIS_STATUS_COMMAND", or_value=DEFAULT_LISTING_COMMAND)
    list_args = env_args("JARVIS_STATUS_LIST_ARGS", or_value=DEFAULT_LIST_ARGS)
    timeout_seconds = env_float("JARVIS_STATUS_TIMEOUT_SECONDS")
    if timeout_seconds is not None and timeout_seconds <= 0:
        raise ConfigurationError.invalid_value("JARVIS_STATUS_TIMEOUT_SECONDS", timeout_seconds, "Timeout must be positive")

    namespace_icon = _utf8_text(env_str("JARVIS_STATUS_NAMESPACE_ICON", or_value=""))
    agent_icon = _utf8_text(env_str("JARVIS_STATUS_AGENT_ICON", or_value=""))

    return StatusSettings(
        command=str(Path(command).expanduser()) if command.startswith("~") else command,
        list_args=list_args,
        timeout_seconds=timeout_seconds,
        namespace_icon=namespace_icon,
        agent_icon=agent_icon,
        log_level=_resolve_log_level(env_str("JARVIS_STATUS_LOG_LEVEL")),
        log_file=_resolve_log_file(env_str("JARVIS_STATUS_LOG_FILE")),
    )


def _utf8_text(value: str) -> str:
    """Replace bytes that were not valid UTF-8 in the environment with U+FFFD."""
    try:
        raw = value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Surrogates from a JSON ``\ud800`` escape rather than from undecodable bytes.
        raw = value.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")


def _resolve_log_level(raw_level: Optional[str]) -> Optional[str]:
    if raw_level is None:
        return None
    level = raw_level.upper()
    if level not in _LOG_LEVEL_NAMES:
        raise ConfigurationError.invalid_value("JARVIS_STATUS_LOG_LEVEL", raw_level, f"Expected one of {', '.join(_LOG_LEVEL_NAMES)}")
    return level


def _resolve_log_file(raw_path: Optional[str]) -> Optional[Path]:
    if raw_path is None:
        return None
    return Path(raw_path).expanduser()


__all__ = ["DEFAULT_LIST_ARGS", "DEFAULT_LISTING_COMMAND", "StatusSettings", "get_status_settings"]
