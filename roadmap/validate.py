"""validate.py -- Structural and cross-reference validation of a Roadmap.

Every check appends to one flat error list; nothing short-circuits, so a
document with five independent problems reports five errors in a single run.
The checks run in the order listed in ``CHECKS`` and that order is part of
the contract: consumers may rely on the position of an error in the list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from roadmap.changetypes import DEFAULT_REGISTRY, ChangeTypeChecker
from roadmap.config import IR_VERSION
from roadmap.errors import FieldError, FieldErrorKind
from roadmap.model import ContentBlock, ContentType, Roadmap, is_valid_status

MISSING = "required field is missing"

_QUARTER_RE = re.compile(r"Q[1-4] [0-9]{4}")

# Block types whose payload is ``value``.
_VALUE_TYPES = frozenset(
    {ContentType.TEXT.value, ContentType.CODE.value, ContentType.DIAGRAM.value, ContentType.BLOCKQUOTE.value}
)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class ValidationResult:
    valid: bool = True
    errors: list[FieldError] = field(default_factory=list)

    def add_error(self, field_path: str, message: str, kind: FieldErrorKind) -> None:
        self.errors.append(FieldError(field_path, message, kind))
        self.valid = False

    def extend(self, errors: Iterable[FieldError]) -> None:
        for err in errors:
            self.errors.append(err)
            self.valid = False

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def by_kind(self, kind: FieldErrorKind) -> list[FieldError]:
        return [e for e in self.errors if e.kind == kind]

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_valid_quarter(quarter: str) -> bool:
    """True for ``Q<1-4> <yyyy>``, e.g. ``"Q2 2026"``."""
    return _QUARTER_RE.fullmatch(quarter) is not None


def _check_id(ident: str, path: str, seen: set[str], errors: list[FieldError]) -> None:
    """Flag a missing or already-seen id; record new ids in *seen*."""
    if not ident:
        errors.append(FieldError(path, MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
    elif ident in seen:
        errors.append(FieldError(path, f"duplicate ID: {ident}", FieldErrorKind.DUPLICATE_ID))
    else:
        seen.add(ident)


def _known_ids(ids: Iterable[str]) -> set[str]:
    return {i for i in ids if i}


def check_content_block(block: ContentBlock, prefix: str) -> FieldError | None:
    """Return the single payload problem with *block*, or None.

    An empty ``type`` is a missing field, reported before the unknown-type
    branch so the two cases stay distinguishable.
    """
    t = block.type
    if t in _VALUE_TYPES:
        if not block.value:
            return FieldError(f"{prefix}.value", f"required for type {t}", FieldErrorKind.MISSING_REQUIRED_FIELD)
    elif t == ContentType.TABLE.value:
        if not block.headers:
            return FieldError(f"{prefix}.headers", "required for type table", FieldErrorKind.MISSING_REQUIRED_FIELD)
    elif t == ContentType.LIST.value:
        if not block.items:
            return FieldError(f"{prefix}.items", "required for type list", FieldErrorKind.MISSING_REQUIRED_FIELD)
    elif t == "":
        return FieldError(f"{prefix}.type", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD)
    else:
        return FieldError(f"{prefix}.type", f"unknown type: {t}", FieldErrorKind.UNKNOWN_CONTENT_TYPE)
    return None


def _check_blocks(blocks: list[ContentBlock], prefix: str, errors: list[FieldError]) -> None:
    for j, block in enumerate(blocks):
        err = check_content_block(block, f"{prefix}.content[{j}]")
        if err is not None:
            errors.append(err)


# ---------------------------------------------------------------------------
# Individual checks -- each returns a list[FieldError]
# ---------------------------------------------------------------------------


def check_root(roadmap: Roadmap, _registry: ChangeTypeChecker) -> list[FieldError]:
    errors: list[FieldError] = []
    if not roadmap.ir_version:
        errors.append(FieldError("ir_version", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
    elif roadmap.ir_version != IR_VERSION:
        errors.append(
            FieldError(
                "ir_version",
                f"unsupported version: {roadmap.ir_version}",
                FieldErrorKind.UNSUPPORTED_VERSION,
            )
        )
    if not roadmap.project:
        errors.append(FieldError("project", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
    return errors


def check_items(roadmap: Roadmap, registry: ChangeTypeChecker) -> list[FieldError]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for i, item in enumerate(roadmap.items):
        prefix = f"items[{i}]"

        _check_id(item.id, f"{prefix}.id", seen, errors)

        if not item.title:
            errors.append(FieldError(f"{prefix}.title", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))

        if not item.status:
            errors.append(FieldError(f"{prefix}.status", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
        elif not is_valid_status(item.status):
            errors.append(
                FieldError(f"{prefix}.status", f"invalid status: {item.status}", FieldErrorKind.INVALID_STATUS)
            )

        if item.target_quarter and not is_valid_quarter(item.target_quarter):
            errors.append(
                FieldError(
                    f"{prefix}.target_quarter",
                    f"invalid format: {item.target_quarter} (expected 'Q1 2026')",
                    FieldErrorKind.INVALID_FORMAT,
                )
            )

        if item.type and not registry.is_valid_name(item.type):
            errors.append(
                FieldError(
                    f"{prefix}.type",
                    f"invalid change type: {item.type} (see structured-changelog for valid types)",
                    FieldErrorKind.INVALID_CHANGE_TYPE,
                )
            )

        for j, task in enumerate(item.tasks):
            if not task.description:
                errors.append(
                    FieldError(
                        f"{prefix}.tasks[{j}].description", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD
                    )
                )

        _check_blocks(item.content, prefix, errors)
    return errors


def check_depends_on(roadmap: Roadmap, _registry: ChangeTypeChecker) -> list[FieldError]:
    """Every ``depends_on`` entry must name an item somewhere in the document.

    Forward references are fine; self-references and cycles are not checked.
    """
    errors: list[FieldError] = []
    item_ids = _known_ids(item.id for item in roadmap.items)
    for i, item in enumerate(roadmap.items):
        for dep in item.depends_on:
            if dep not in item_ids:
                errors.append(
                    FieldError(
                        f"items[{i}].depends_on",
                        f"references unknown item: {dep}",
                        FieldErrorKind.UNKNOWN_REFERENCE,
                    )
                )
    return errors


def check_areas(roadmap: Roadmap, _registry: ChangeTypeChecker) -> list[FieldError]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for i, area in enumerate(roadmap.areas):
        _check_id(area.id, f"areas[{i}].id", seen, errors)
        if not area.name:
            errors.append(FieldError(f"areas[{i}].name", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
    return errors


def check_phases(roadmap: Roadmap, _registry: ChangeTypeChecker) -> list[FieldError]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for i, phase in enumerate(roadmap.phases):
        _check_id(phase.id, f"phases[{i}].id", seen, errors)
        if not phase.name:
            errors.append(FieldError(f"phases[{i}].name", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
        if phase.status and not is_valid_status(phase.status):
            errors.append(
                FieldError(f"phases[{i}].status", f"invalid status: {phase.status}", FieldErrorKind.INVALID_STATUS)
            )
    return errors


def check_references(roadmap: Roadmap, _registry: ChangeTypeChecker) -> list[FieldError]:
    """Item ``area``/``phase`` must exist, but only once that collection is non-empty."""
    errors: list[FieldError] = []
    area_ids = _known_ids(a.id for a in roadmap.areas)
    phase_ids = _known_ids(p.id for p in roadmap.phases)
    for i, item in enumerate(roadmap.items):
        if item.area and roadmap.areas and item.area not in area_ids:
            errors.append(
                FieldError(
                    f"items[{i}].area", f"references unknown area: {item.area}", FieldErrorKind.UNKNOWN_REFERENCE
                )
            )
        if item.phase and roadmap.phases and item.phase not in phase_ids:
            errors.append(
                FieldError(
                    f"items[{i}].phase", f"references unknown phase: {item.phase}", FieldErrorKind.UNKNOWN_REFERENCE
                )
            )
    return errors


def check_sections(roadmap: Roadmap, _registry: ChangeTypeChecker) -> list[FieldError]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for i, section in enumerate(roadmap.sections):
        prefix = f"sections[{i}]"
        _check_id(section.id, f"{prefix}.id", seen, errors)
        if not section.title:
            errors.append(FieldError(f"{prefix}.title", MISSING, FieldErrorKind.MISSING_REQUIRED_FIELD))
        _check_blocks(section.content, prefix, errors)
    return errors


# ---------------------------------------------------------------------------
# Check registry (checks run in this order)
# ---------------------------------------------------------------------------

Check = Callable[[Roadmap, ChangeTypeChecker], list[FieldError]]

CHECKS: list[tuple[str, Check]] = [
    ("Required root fields", check_root),
    ("Items", check_items),
    ("depends_on refs", check_depends_on),
    ("Areas", check_areas),
    ("Phases", check_phases),
    ("Area/phase refs", check_references),
    ("Sections", check_sections),
]


def run_checks(
    roadmap: Roadmap, registry: ChangeTypeChecker = DEFAULT_REGISTRY
) -> list[tuple[str, list[FieldError]]]:
    """Run every check in order and return ``[(check_name, errors), ...]``."""
    return [(name, fn(roadmap, registry)) for name, fn in CHECKS]


def validate(roadmap: Roadmap, registry: ChangeTypeChecker = DEFAULT_REGISTRY) -> ValidationResult:
    """Validate *roadmap*; never raises.

    Args:
        roadmap:  Document to check.
        registry: Change-type names accepted for ``Item.type``.

    Returns:
        ``ValidationResult`` whose ``valid`` is True iff ``errors`` is empty.
    """
    result = ValidationResult()
    for _name, errors in run_checks(roadmap, registry):
        result.extend(errors)
    return result
