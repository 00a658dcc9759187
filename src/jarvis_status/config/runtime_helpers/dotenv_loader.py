"""Dotenv file loading for the status settings.

Reads ``$XDG_CONFIG_HOME/jarvis-status/env`` (``~/.config/jarvis-status/env``
when ``XDG_CONFIG_HOME`` is unset): one ``KEY=value`` per line, optionally
prefixed with ``export``. Values from this file only apply to variables the
process environment leaves unset or blank.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "


class DotenvLoader:
    """Loads ``KEY=value`` pairs from a dotenv-style file."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a dotenv file.

        Args:
            path: Path to the dotenv file

        Returns:
            Mapping of variable names to values; empty when the file is absent

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not path.exists():
            return {}

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError.load_failed("dotenv configuration", str(path)) from exc

        values: Dict[str, str] = {}
        for line in text.splitlines():
            stripped = line.strip()
            if DotenvLoader._should_skip_line(stripped):
                continue

            key, value = DotenvLoader._parse_env_line(stripped)
            if key:
                values[key] = value

        return values

    @staticmethod
    def _should_skip_line(line: str) -> bool:
        return not line or line.startswith("#") or "=" not in line

    @staticmethod
    def _parse_env_line(line: str) -> tuple[str, str]:
        """Split one ``[export ]KEY=value`` line, dropping surrounding quotes from the value."""
        if line.startswith(_EXPORT_PREFIX):
            line = line[len(_EXPORT_PREFIX) :]
        key, raw_value = line.split("=", 1)
        value = raw_value.strip().strip("'").strip('"')
        return key.strip(), value
