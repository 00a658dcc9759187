"""Environment-backed configuration for the status summarizer."""

from .errors import ConfigurationError
from .runtime import (
    env_args,
    env_float,
    env_str,
    reset_default_values,
)

__all__ = [
    "ConfigurationError",
    "env_args",
    "env_float",
    "env_str",
    "reset_default_values",
]
