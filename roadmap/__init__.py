"""roadmap — Structured roadmap IR: model, codec, validation, derived views.

Flow: ROADMAP.json bytes → decode → Roadmap → validate → groupings / stats / legend.
"""

from roadmap.changetypes import DEFAULT_REGISTRY, ChangeTypeRegistry
from roadmap.codec import decode, decode_file, encode, encode_to_file
from roadmap.errors import (
    FieldError,
    FieldErrorKind,
    ParseFailure,
    ReadFailure,
    RoadmapError,
    WriteFailure,
)
from roadmap.legend import default_legend, get_legend, get_status_emoji
from roadmap.model import (
    Area,
    ContentBlock,
    ContentType,
    Dependencies,
    ExternalDependency,
    InternalDependency,
    Item,
    LegendEntry,
    Phase,
    Priority,
    Roadmap,
    Section,
    Status,
    Task,
    VersionEntry,
    is_valid_priority,
    is_valid_status,
    priority_label,
    priority_label_full,
    priority_order,
    priority_order_list,
    status_order,
)
from roadmap.validate import ValidationResult, validate
from roadmap.views import (
    Stats,
    items_by_area,
    items_by_phase,
    items_by_priority,
    items_by_quarter,
    items_by_status,
    items_by_type,
    sort_items_by_priority,
    stats,
)

__all__ = [
    "Area",
    "ChangeTypeRegistry",
    "ContentBlock",
    "ContentType",
    "DEFAULT_REGISTRY",
    "Dependencies",
    "ExternalDependency",
    "FieldError",
    "FieldErrorKind",
    "InternalDependency",
    "Item",
    "LegendEntry",
    "ParseFailure",
    "Phase",
    "Priority",
    "ReadFailure",
    "Roadmap",
    "RoadmapError",
    "Section",
    "Stats",
    "Status",
    "Task",
    "ValidationResult",
    "VersionEntry",
    "WriteFailure",
    "decode",
    "decode_file",
    "default_legend",
    "encode",
    "encode_to_file",
    "get_legend",
    "get_status_emoji",
    "is_valid_priority",
    "is_valid_status",
    "items_by_area",
    "items_by_phase",
    "items_by_priority",
    "items_by_quarter",
    "items_by_status",
    "items_by_type",
    "priority_label",
    "priority_label_full",
    "priority_order",
    "priority_order_list",
    "sort_items_by_priority",
    "stats",
    "status_order",
    "validate",
]
