"""
Serializes the status record for the status-bar host.

The record is encoded in one pass by ``orjson``: quotes, backslashes,
newlines and every other control character in the tooltip are escaped by the
encoder itself, so an escape is never escaped twice and every ``str`` encodes.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

import orjson

from .summary_builder import StatusSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusRecord:
    text: str
    tooltip: str

    @classmethod
    def from_summary(cls, summary: StatusSummary) -> "StatusRecord":
        return cls(text=summary.text, tooltip=summary.tooltip)


def encode_record(record: StatusRecord) -> bytes:
    """Encode the record as a compact JSON object with ``text`` then ``tooltip``."""
    return orjson.dumps({"text": _encodable(record.text), "tooltip": _encodable(record.tooltip)})


def _encodable(value: str) -> str:
    # orjson rejects lone surrogates; they become U+FFFD.
    return value.encode("utf-8", "surrogatepass").decode("utf-8", "replace")


class OutputWriter:
    """Writes encoded records to the output stream."""

    def __init__(self, output_stream: TextIO | None = None):
        """
        Initialize the output writer.

        Args:
            output_stream: Where to write records (default: stdout)
        """
        self.output_stream = output_stream or sys.stdout

    def write(self, payload: bytes) -> None:
        """Write one encoded record followed by a newline."""
        try:
            binary_stream = getattr(self.output_stream, "buffer", None)
            if binary_stream is not None:
                # Bypass the locale encoding: the host always reads UTF-8 JSON.
                self.output_stream.flush()
                binary_stream.write(payload + b"\n")
                binary_stream.flush()
            else:
                self.output_stream.write(payload.decode("utf-8") + "\n")
                self.output_stream.flush()
        except (BrokenPipeError, OSError) as exc:
            # The host stopped reading; there is nobody left to report to.
            logger.debug("Status output stream closed: %s", exc)


def emit_record(record: StatusRecord, output_stream: TextIO | None = None) -> None:
    OutputWriter(output_stream).write(encode_record(record))
