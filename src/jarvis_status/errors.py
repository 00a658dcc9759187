"""Error types raised or carried by the status pipeline."""

from __future__ import annotations

from typing import Optional, Sequence


class UpstreamUnavailableError(RuntimeError):
    """The listing command could not produce usable output."""

    def __init__(self, command: Sequence[str], reason: str, *, returncode: Optional[int] = None) -> None:
        self.command = tuple(command)
        self.reason = reason
        self.returncode = returncode
        super().__init__(f"{' '.join(self.command)}: {reason}")

    @classmethod
    def missing_binary(cls, command: Sequence[str]) -> "UpstreamUnavailableError":
        return cls(command, "listing command not found")

    @classmethod
    def non_zero_exit(cls, command: Sequence[str], returncode: int) -> "UpstreamUnavailableError":
        return cls(command, f"exited with status {returncode}", returncode=returncode)

    @classmethod
    def timed_out(cls, command: Sequence[str], timeout_seconds: float) -> "UpstreamUnavailableError":
        return cls(command, f"timed out after {timeout_seconds:g}s")

    @classmethod
    def launch_failed(cls, command: Sequence[str], exc: Exception) -> "UpstreamUnavailableError":
        return cls(command, f"failed to start: {exc}")


__all__ = ["UpstreamUnavailableError"]
