"""legend.py -- Status legend (emoji + description) with document overrides."""

from __future__ import annotations

from roadmap.model import LegendEntry, Roadmap, Status


def default_legend() -> dict[str, LegendEntry]:
    """Return a fresh copy of the built-in legend covering all four statuses."""
    return {
        Status.COMPLETED.value: LegendEntry(emoji="✅", description="Completed"),
        Status.IN_PROGRESS.value: LegendEntry(emoji="🚧", description="In Progress"),
        Status.PLANNED.value: LegendEntry(emoji="📋", description="Planned"),
        Status.FUTURE.value: LegendEntry(emoji="💡", description="Under Consideration"),
    }


def get_legend(roadmap: Roadmap) -> dict[str, LegendEntry]:
    """Default legend with the document's own entries laid over it key by key."""
    legend = default_legend()
    for status, entry in roadmap.legend.items():
        legend[status] = LegendEntry(emoji=entry.emoji, description=entry.description)
    return legend


def get_status_emoji(roadmap: Roadmap, status: str | Status) -> str:
    """Emoji for *status*, or ``""`` if neither the document nor the default has one."""
    key = status.value if isinstance(status, Status) else status
    entry = get_legend(roadmap).get(key)
    return entry.emoji if entry else ""
