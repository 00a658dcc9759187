"""Status-bar summary of jarvisctl namespaces and agents."""

from .json_emitter import StatusRecord, encode_record
from .section_extractor import ExtractedSections, extract_sections
from .status_runner import build_record, main, run_status
from .summary_builder import RenderStyle, StatusSummary, build_summary

__all__ = [
    "ExtractedSections",
    "RenderStyle",
    "StatusRecord",
    "StatusSummary",
    "build_record",
    "build_summary",
    "encode_record",
    "extract_sections",
    "main",
    "run_status",
]
