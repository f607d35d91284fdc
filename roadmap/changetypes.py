"""changetypes.py -- Registry of change-type labels accepted for ``Item.type``.

The names mirror the structured-changelog taxonomy so that a roadmap item
can be carried over into a changelog entry unchanged.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Protocol

from roadmap.errors import ReadFailure, ParseFailure

# Keep-a-Changelog core categories first, then the extended ones.
DEFAULT_CHANGE_TYPES: tuple[str, ...] = (
    "Highlights",
    "Breaking",
    "Upgrade Guide",
    "Security",
    "Added",
    "Changed",
    "Deprecated",
    "Removed",
    "Fixed",
    "Performance",
    "Dependencies",
    "Documentation",
    "Build",
    "Tests",
    "Infrastructure",
    "Observability",
    "Compliance",
    "Internal",
    "Known Issues",
    "Contributors",
)


class ChangeTypeChecker(Protocol):
    """Anything that can answer whether a name is a recognised change type."""

    def is_valid_name(self, name: str) -> bool: ...


class ChangeTypeRegistry:
    """Exact-match (case-sensitive) set of change-type names."""

    def __init__(self, names: Iterable[str] = DEFAULT_CHANGE_TYPES) -> None:
        self._names: tuple[str, ...] = tuple(dict.fromkeys(names))

    def is_valid_name(self, name: str) -> bool:
        return name in self._names

    def names(self) -> list[str]:
        return list(self._names)

    def extended(self, names: Iterable[str]) -> ChangeTypeRegistry:
        """Return a new registry with *names* appended."""
        return ChangeTypeRegistry([*self._names, *names])

    @classmethod
    def from_file(cls, path: Path) -> ChangeTypeRegistry:
        """Default registry extended with the JSON list of names stored at *path*."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ReadFailure("read change types", exc) from exc
        try:
            names = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseFailure("parse change types", exc) from exc
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ParseFailure("parse change types", "expected a JSON array of strings")
        return cls().extended(names)


DEFAULT_REGISTRY = ChangeTypeRegistry()
