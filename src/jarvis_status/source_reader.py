"""
Reads the raw resource listing from the session-orchestration tool.

The listing command is run once per invocation and waited on synchronously.
A failed call never raises: it is returned as a ``ListingResult`` carrying an
``UpstreamUnavailableError``, and ``listing_text`` is the one place where that
error is turned into the empty listing.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from .config.settings import StatusSettings
from .errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

EMPTY_LISTING = ""


@dataclass(frozen=True)
class ListingResult:
    output: str = EMPTY_LISTING
    error: Optional[UpstreamUnavailableError] = None


def read_listing(settings: StatusSettings) -> ListingResult:
    """
    Run the listing command and capture its standard output.

    Args:
        settings: Resolved settings naming the command, its arguments and timeout

    Returns:
        The captured stdout, or an error result when the command is missing,
        fails to start, exits non-zero, or exceeds the timeout
    """
    argv = settings.argv
    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        return ListingResult(error=UpstreamUnavailableError.missing_binary(argv))
    except (OSError, ValueError) as exc:
        return ListingResult(error=UpstreamUnavailableError.launch_failed(argv, exc))

    try:
        stdout, _stderr = proc.communicate(timeout=settings.timeout_seconds)
    except subprocess.TimeoutExpired:
        _reap(proc)
        return ListingResult(error=UpstreamUnavailableError.timed_out(argv, settings.timeout_seconds))

    if proc.returncode != 0:
        return ListingResult(error=UpstreamUnavailableError.non_zero_exit(argv, proc.returncode))

    return ListingResult(output=stdout or EMPTY_LISTING)


def _reap(proc: subprocess.Popen) -> None:
    """Kill a timed-out child and collect it so no zombie outlives the run."""
    proc.kill()
    try:
        proc.communicate()
    except (subprocess.SubprocessError, OSError) as exc:
        logger.debug("Failed to collect timed-out listing command: %s", exc)


def listing_text(result: ListingResult) -> str:
    """Return the listing text, substituting the empty listing for an unavailable upstream."""
    if result.error is None:
        return result.output

    logger.info("Listing unavailable, reporting an empty environment: %s", result.error)
    return EMPTY_LISTING
