"""model.py -- In-memory model of a ROADMAP.json document (the roadmap IR)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
# Model fields hold plain strings so any input decodes; the validator decides
# whether a value is a member.


class Status(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    PLANNED = "planned"
    FUTURE = "future"


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ContentType(str, Enum):
    TEXT = "text"
    CODE = "code"
    DIAGRAM = "diagram"
    TABLE = "table"
    LIST = "list"
    BLOCKQUOTE = "blockquote"


_STATUS_VALUES = frozenset(s.value for s in Status)
_PRIORITY_VALUES = frozenset(p.value for p in Priority)

_PRIORITY_RANK: dict[str, int] = {
    Priority.CRITICAL.value: 1,
    Priority.HIGH.value: 2,
    Priority.MEDIUM.value: 3,
    Priority.LOW.value: 4,
}

_PRIORITY_LABEL: dict[str, str] = {
    Priority.CRITICAL.value: "Critical",
    Priority.HIGH.value: "High",
    Priority.MEDIUM.value: "Medium",
    Priority.LOW.value: "Low",
}

_PRIORITY_LABEL_FULL: dict[str, str] = {
    Priority.CRITICAL.value: "Critical",
    Priority.HIGH.value: "High Priority",
    Priority.MEDIUM.value: "Medium Priority",
    Priority.LOW.value: "Low Priority",
}


def _value(v: str | Enum) -> str:
    return v.value if isinstance(v, Enum) else v


def is_valid_status(status: str | Status) -> bool:
    """Return True if *status* is one of the four roadmap statuses."""
    return _value(status) in _STATUS_VALUES


def is_valid_priority(priority: str | Priority) -> bool:
    """Return True if *priority* is one of the four priority levels."""
    return _value(priority) in _PRIORITY_VALUES


def priority_order(priority: str | Priority) -> int:
    """Sort rank for *priority*: critical=1 ... low=4, anything else 5."""
    return _PRIORITY_RANK.get(_value(priority), 5)


def priority_label(priority: str | Priority) -> str:
    """Concise label for table cells where the column header gives context."""
    return _PRIORITY_LABEL.get(_value(priority), "-")


def priority_label_full(priority: str | Priority) -> str:
    """Full label for section headers and standalone use."""
    return _PRIORITY_LABEL_FULL.get(_value(priority), "Unspecified")


def status_order() -> list[Status]:
    """Canonical display order of statuses."""
    return [Status.COMPLETED, Status.IN_PROGRESS, Status.PLANNED, Status.FUTURE]


def priority_order_list() -> list[Priority]:
    """Canonical display order of priorities."""
    return [Priority.CRITICAL, Priority.HIGH, Priority.MEDIUM, Priority.LOW]


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class LegendEntry:
    emoji: str = ""
    description: str = ""


@dataclass
class Area:
    id: str = ""
    name: str = ""
    priority: int = 0  # secondary sort weight, unrelated to Item.priority


@dataclass
class Phase:
    id: str = ""
    name: str = ""
    status: str = ""
    order: int = 0
    description: str = ""


@dataclass
class Task:
    description: str = ""
    completed: bool = False
    id: str = ""
    file_path: str = ""


@dataclass
class ContentBlock:
    """One rich content block; which payload fields matter depends on ``type``."""

    type: str = ""
    value: str = ""
    language: str = ""
    format: str = ""
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    items: list[str] = field(default_factory=list)


@dataclass
class Item:
    id: str = ""
    title: str = ""
    status: str = ""
    description: str = ""
    version: str = ""
    completed_date: str = ""
    target_quarter: str = ""  # "Q2 2026"
    target_version: str = ""
    area: str = ""  # Area.id
    type: str = ""  # change type, e.g. "Added"
    phase: str = ""  # Phase.id
    priority: str = ""
    order: int = 0
    depends_on: list[str] = field(default_factory=list)  # Item.id values
    tasks: list[Task] = field(default_factory=list)
    content: list[ContentBlock] = field(default_factory=list)


@dataclass
class Section:
    id: str = ""
    title: str = ""
    order: int = 0
    content: list[ContentBlock] = field(default_factory=list)


@dataclass
class VersionEntry:
    version: str = ""
    date: str = ""
    status: str = ""
    summary: str = ""


@dataclass
class ExternalDependency:
    name: str = ""
    status: str = ""
    note: str = ""


@dataclass
class InternalDependency:
    package: str = ""
    depends_on: list[str] = field(default_factory=list)


@dataclass
class Dependencies:
    external: list[ExternalDependency] = field(default_factory=list)
    internal: list[InternalDependency] = field(default_factory=list)


@dataclass
class Roadmap:
    """Top-level roadmap document.

    Owns every nested collection. ``depends_on``, ``area`` and ``phase`` on
    items are id references within this document, not object links.
    """

    ir_version: str = ""
    project: str = ""
    repository: str = ""
    generated_at: datetime | None = None
    legend: dict[str, LegendEntry] = field(default_factory=dict)
    areas: list[Area] = field(default_factory=list)
    phases: list[Phase] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    version_history: list[VersionEntry] = field(default_factory=list)
    dependencies: Dependencies | None = None
