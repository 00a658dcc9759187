"""Builder for the compact summary line and the detailed tooltip."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .section_extractor import PLACEHOLDER, ExtractedSections

NAMESPACES_TITLE = "NAMESPACES:"
AGENTS_TITLE = "AGENTS:"


@dataclass(frozen=True)
class RenderStyle:
    """Icon glyphs for the slots the status-bar host reserves in front of each label."""

    namespace_icon: str = ""
    agent_icon: str = ""


@dataclass(frozen=True)
class StatusSummary:
    namespace_count: int
    agent_count: int
    text: str
    tooltip: str


class SummaryBuilder:
    """Builds the summary line and tooltip from extracted sections."""

    @staticmethod
    def build(sections: ExtractedSections, style: RenderStyle = RenderStyle()) -> StatusSummary:
        """
        Build the summary for one listing.

        Args:
            sections: Entries per section, already free of blanks and placeholders
            style: Icon glyphs; the defaults render the plain format

        Returns:
            Counts together with the summary line and tooltip text
        """
        namespace_count = len(sections.namespaces)
        agent_count = len(sections.agents)

        return StatusSummary(
            namespace_count=namespace_count,
            agent_count=agent_count,
            text=SummaryBuilder.summary_line(namespace_count, agent_count, style),
            tooltip=SummaryBuilder.tooltip(sections, style),
        )

    @staticmethod
    def summary_line(namespace_count: int, agent_count: int, style: RenderStyle = RenderStyle()) -> str:
        return f"{style.namespace_icon}  {namespace_count:d}{style.agent_icon}  {agent_count:d}"

    @staticmethod
    def tooltip(sections: ExtractedSections, style: RenderStyle = RenderStyle()) -> str:
        """Render both sections, separated by one blank line, ending in a newline."""
        lines: List[str] = []
        lines.extend(SummaryBuilder._section_lines(style.namespace_icon, NAMESPACES_TITLE, sections.namespaces))
        lines.append("")
        lines.extend(SummaryBuilder._section_lines(style.agent_icon, AGENTS_TITLE, sections.agents))
        return "\n".join(lines) + "\n"

    @staticmethod
    def _section_lines(icon: str, title: str, entries: Tuple[str, ...]) -> List[str]:
        header = f"{icon} {title}"
        if not entries:
            return [header, PLACEHOLDER]
        return [header, *entries]


def build_summary(sections: ExtractedSections, *, style: RenderStyle = RenderStyle()) -> StatusSummary:
    return SummaryBuilder.build(sections, style)
