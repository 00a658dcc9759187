"""
Splits a raw listing into its namespace and agent sections.

The scan is a small state machine. ``transition`` is pure: it takes the
current state and one line and returns the next state plus the entry the line
contributes, if any. ``extract_sections`` folds it over the listing, so no
section flag lives outside a single call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

NAMESPACES_HEADER = "NAMESPACES:"
AGENTS_HEADER = "AGENTS:"
PLACEHOLDER = "(none)"


class SectionKind(Enum):
    NAMESPACES = "namespaces"
    AGENTS = "agents"


class SectionState(Enum):
    NONE = "none"
    IN_NAMESPACES = "in_namespaces"
    IN_AGENTS = "in_agents"

    @property
    def section(self) -> Optional[SectionKind]:
        return _STATE_SECTIONS[self]


_STATE_SECTIONS: Dict[SectionState, Optional[SectionKind]] = {
    SectionState.NONE: None,
    SectionState.IN_NAMESPACES: SectionKind.NAMESPACES,
    SectionState.IN_AGENTS: SectionKind.AGENTS,
}

_HEADER_STATES: Dict[str, SectionState] = {
    NAMESPACES_HEADER: SectionState.IN_NAMESPACES,
    AGENTS_HEADER: SectionState.IN_AGENTS,
}


@dataclass(frozen=True)
class ExtractedSections:
    namespaces: Tuple[str, ...] = ()
    agents: Tuple[str, ...] = ()


def transition(state: SectionState, line: str) -> Tuple[SectionState, Optional[str]]:
    """
    Advance the section state machine by one line.

    Header lines switch section and contribute nothing. Blank lines and the
    placeholder never become entries. Any other line is an entry of the active
    section, or is dropped when no section has started.

    Args:
        state: State before the line
        line: One listing line without its line terminator

    Returns:
        Tuple of (next state, entry or None)
    """
    header_state = _HEADER_STATES.get(line)
    if header_state is not None:
        return header_state, None

    if state is SectionState.NONE or not line.strip() or line == PLACEHOLDER:
        return state, None

    return state, line


def _listing_lines(text: str) -> Iterator[str]:
    """Yield lines split on LF only, each with one trailing CR removed."""
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def extract_sections(text: str) -> ExtractedSections:
    """Partition listing text into ordered namespace and agent entries."""
    collected: Dict[SectionKind, List[str]] = {kind: [] for kind in SectionKind}
    state = SectionState.NONE

    for line in _listing_lines(text):
        state, entry = transition(state, line)
        if entry is not None and state.section is not None:
            collected[state.section].append(entry)

    return ExtractedSections(
        namespaces=tuple(collected[SectionKind.NAMESPACES]),
        agents=tuple(collected[SectionKind.AGENTS]),
    )
