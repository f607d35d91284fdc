"""views.py -- Groupings, statistics and ordering over a roadmap's items.

All functions are read-only: they never modify the roadmap and always
return freshly built containers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from roadmap.model import Item, Roadmap, Status, priority_order

# Bucket keys for items with no value in the grouped field. These share a
# namespace with user ids, so an Area literally named "_unspecified" merges
# with the unassigned bucket.
UNSPECIFIED = "_unspecified"
UNPHASED = "_unphased"
UNSCHEDULED = "_unscheduled"


def _group(items: list[Item], key: Callable[[Item], str], sentinel: str | None) -> dict[str, list[Item]]:
    """Stable partition of *items* by *key*; empty keys go to *sentinel*."""
    result: dict[str, list[Item]] = {}
    for item in items:
        k = key(item)
        if not k and sentinel is not None:
            k = sentinel
        result.setdefault(k, []).append(item)
    return result


def items_by_area(roadmap: Roadmap) -> dict[str, list[Item]]:
    return _group(roadmap.items, lambda i: i.area, UNSPECIFIED)


def items_by_type(roadmap: Roadmap) -> dict[str, list[Item]]:
    return _group(roadmap.items, lambda i: i.type, UNSPECIFIED)


def items_by_phase(roadmap: Roadmap) -> dict[str, list[Item]]:
    return _group(roadmap.items, lambda i: i.phase, UNPHASED)


def items_by_status(roadmap: Roadmap) -> dict[str, list[Item]]:
    """Group by status. Status is required, so there is no sentinel bucket."""
    return _group(roadmap.items, lambda i: i.status, None)


def items_by_quarter(roadmap: Roadmap) -> dict[str, list[Item]]:
    return _group(roadmap.items, lambda i: i.target_quarter, UNSCHEDULED)


def items_by_priority(roadmap: Roadmap) -> dict[str, list[Item]]:
    return _group(roadmap.items, lambda i: i.priority, UNSPECIFIED)


def sort_items_by_priority(items: list[Item]) -> list[Item]:
    """Return *items* ordered by priority rank, then ``order``; ties keep input order."""
    return sorted(items, key=lambda i: (priority_order(i.priority), i.order))


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


@dataclass
class Stats:
    """Item counts. Area/type/priority maps only count items that set the field."""

    total: int = 0
    by_status: dict[str, int] = field(default_factory=dict)
    by_area: dict[str, int] = field(default_factory=dict)
    by_type: dict[str, int] = field(default_factory=dict)
    by_priority: dict[str, int] = field(default_factory=dict)

    def completed_count(self) -> int:
        return self.by_status.get(Status.COMPLETED.value, 0)

    def completed_percent(self) -> float:
        """Share of completed items in percent; 0.0 when there are no items."""
        if self.total == 0:
            return 0.0
        return self.completed_count() / self.total * 100


def _bump(counts: dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def stats(roadmap: Roadmap) -> Stats:
    s = Stats(total=len(roadmap.items))
    for item in roadmap.items:
        _bump(s.by_status, item.status)
        if item.area:
            _bump(s.by_area, item.area)
        if item.type:
            _bump(s.by_type, item.type)
        if item.priority:
            _bump(s.by_priority, item.priority)
    return s
