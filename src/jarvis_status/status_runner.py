from __future__ import annotations

"""Runs one status invocation: listing, sections, summary, JSON record."""

import logging
from typing import Optional, TextIO

from .config import ConfigurationError
from .config.settings import StatusSettings, get_status_settings
from .json_emitter import StatusRecord, emit_record
from .logging_config import setup_logging
from .section_extractor import extract_sections
from .source_reader import listing_text, read_listing
from .summary_builder import RenderStyle, build_summary

logger = logging.getLogger(__name__)


def build_record(raw_listing: str, settings: StatusSettings) -> StatusRecord:
    """Turn raw listing text into the record the status-bar host renders."""
    sections = extract_sections(raw_listing)
    style = RenderStyle(namespace_icon=settings.namespace_icon, agent_icon=settings.agent_icon)
    summary = build_summary(sections, style=style)
    logger.debug("Counted %d namespaces and %d agents", summary.namespace_count, summary.agent_count)
    return StatusRecord.from_summary(summary)


def run_status(settings: StatusSettings, output_stream: Optional[TextIO] = None) -> StatusRecord:
    record = build_record(listing_text(read_listing(settings)), settings)
    emit_record(record, output_stream)
    return record


def _resolve_settings() -> tuple[StatusSettings, Optional[ConfigurationError]]:
    try:
        return get_status_settings(), None
    except ConfigurationError as exc:
        return StatusSettings(), exc


def main(output_stream: Optional[TextIO] = None) -> int:
    """Console entry point; always exits 0 so the host never sees a failed poll."""
    settings, config_error = _resolve_settings()
    setup_logging(settings.log_level, settings.log_file)
    if config_error is not None:
        logger.warning("Invalid configuration, using defaults: %s", config_error)

    run_status(settings, output_stream)
    return 0
