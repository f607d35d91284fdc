"""errors.py -- Codec failure kinds and validation field errors."""

from __future__ import annotations

from enum import Enum


class RoadmapError(Exception):
    """Base for failures at the codec boundary.

    ``op`` names the failed operation, ``err`` is the underlying cause.
    """

    def __init__(self, op: str, err: BaseException | str) -> None:
        self.op = op
        self.err = err
        super().__init__(f"{op}: {err}")


class ReadFailure(RoadmapError):
    """The roadmap path could not be opened or read."""


class ParseFailure(RoadmapError):
    """The input is not well-formed JSON or not shaped like a roadmap."""


class WriteFailure(RoadmapError):
    """The roadmap could not be encoded or persisted."""


class FieldErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    UNSUPPORTED_VERSION = "unsupported_version"
    DUPLICATE_ID = "duplicate_id"
    INVALID_STATUS = "invalid_status"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHANGE_TYPE = "invalid_change_type"
    UNKNOWN_REFERENCE = "unknown_reference"
    UNKNOWN_CONTENT_TYPE = "unknown_content_type"


class FieldError(Exception):
    """A single validation problem, addressed by field path (``items[2].status``).

    Returned inside ``ValidationResult.errors``; the validator never raises it.
    """

    def __init__(self, field: str, message: str, kind: FieldErrorKind) -> None:
        self.field = field
        self.message = message
        self.kind = kind
        super().__init__(f"{field}: {message}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.field, self.message, self.kind) == (other.field, other.message, other.kind)

    def __hash__(self) -> int:
        return hash((self.field, self.message, self.kind))

    def __repr__(self) -> str:
        return f"FieldError({self.field!r}, {self.message!r}, {self.kind.value})"
