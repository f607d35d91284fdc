"""codec.py -- ROADMAP.json <-> Roadmap conversion and file I/O."""

from __future__ import annotations

import json
import os
import re
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, TypeVar

from roadmap.config import FILE_MODE, JSON_INDENT
from roadmap.errors import ParseFailure, ReadFailure, WriteFailure
from roadmap.model import (
    Area,
    ContentBlock,
    Dependencies,
    ExternalDependency,
    InternalDependency,
    Item,
    LegendEntry,
    Phase,
    Roadmap,
    Section,
    Task,
    VersionEntry,
)

T = TypeVar("T")


def _at(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


class _ShapeError(Exception):
    """A JSON value has the wrong type for the model field at ``path``."""

    def __init__(self, path: str, expected: str, got: Any) -> None:
        super().__init__(f"{path}: expected {expected}, got {type(got).__name__}")


# -- JSON -> model ------------------------------------------------------------
# Missing keys and JSON null decode to the field's zero value; unknown keys are
# ignored. A value of the wrong JSON type is a parse failure.


def _str(obj: dict, key: str, path: str) -> str:
    v = obj.get(key)
    if v is None:
        return ""
    if not isinstance(v, str):
        raise _ShapeError(_at(path, key), "string", v)
    return v


def _int(obj: dict, key: str, path: str) -> int:
    v = obj.get(key)
    if v is None:
        return 0
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, bool) or not isinstance(v, int):
        raise _ShapeError(_at(path, key), "integer", v)
    return v


def _bool(obj: dict, key: str, path: str) -> bool:
    v = obj.get(key)
    if v is None:
        return False
    if not isinstance(v, bool):
        raise _ShapeError(_at(path, key), "boolean", v)
    return v


def _object(v: Any, path: str) -> dict:
    if not isinstance(v, dict):
        raise _ShapeError(path, "object", v)
    return v


def _strings(v: Any, path: str) -> list[str]:
    if v is None:
        return []
    if not isinstance(v, list):
        raise _ShapeError(path, "array", v)
    for i, s in enumerate(v):
        if not isinstance(s, str):
            raise _ShapeError(f"{path}[{i}]", "string", s)
    return list(v)


def _objects(obj: dict, key: str, path: str, build: Callable[[dict, str], T]) -> list[T]:
    prefix = _at(path, key)
    v = obj.get(key)
    if v is None:
        return []
    if not isinstance(v, list):
        raise _ShapeError(prefix, "array", v)
    return [build(_object(e, f"{prefix}[{i}]"), f"{prefix}[{i}]") for i, e in enumerate(v)]


def _content_block(d: dict, path: str) -> ContentBlock:
    rows = d.get("rows")
    if rows is None:
        rows = []
    elif not isinstance(rows, list):
        raise _ShapeError(f"{path}.rows", "array", rows)
    return ContentBlock(
        type=_str(d, "type", path),
        value=_str(d, "value", path),
        language=_str(d, "language", path),
        format=_str(d, "format", path),
        headers=_strings(d.get("headers"), f"{path}.headers"),
        rows=[_strings(r, f"{path}.rows[{i}]") for i, r in enumerate(rows)],
        items=_strings(d.get("items"), f"{path}.items"),
    )


def _task(d: dict, path: str) -> Task:
    return Task(
        id=_str(d, "id", path),
        description=_str(d, "description", path),
        completed=_bool(d, "completed", path),
        file_path=_str(d, "file_path", path),
    )


def _item(d: dict, path: str) -> Item:
    return Item(
        id=_str(d, "id", path),
        title=_str(d, "title", path),
        description=_str(d, "description", path),
        status=_str(d, "status", path),
        version=_str(d, "version", path),
        completed_date=_str(d, "completed_date", path),
        target_quarter=_str(d, "target_quarter", path),
        target_version=_str(d, "target_version", path),
        area=_str(d, "area", path),
        type=_str(d, "type", path),
        phase=_str(d, "phase", path),
        priority=_str(d, "priority", path),
        order=_int(d, "order", path),
        depends_on=_strings(d.get("depends_on"), f"{path}.depends_on"),
        tasks=_objects(d, "tasks", path, _task),
        content=_objects(d, "content", path, _content_block),
    )


def _area(d: dict, path: str) -> Area:
    return Area(
        id=_str(d, "id", path),
        name=_str(d, "name", path),
        priority=_int(d, "priority", path),
    )


def _phase(d: dict, path: str) -> Phase:
    return Phase(
        id=_str(d, "id", path),
        name=_str(d, "name", path),
        status=_str(d, "status", path),
        order=_int(d, "order", path),
        description=_str(d, "description", path),
    )


def _section(d: dict, path: str) -> Section:
    return Section(
        id=_str(d, "id", path),
        title=_str(d, "title", path),
        order=_int(d, "order", path),
        content=_objects(d, "content", path, _content_block),
    )


def _version_entry(d: dict, path: str) -> VersionEntry:
    return VersionEntry(
        version=_str(d, "version", path),
        date=_str(d, "date", path),
        status=_str(d, "status", path),
        summary=_str(d, "summary", path),
    )


def _dependencies(d: dict, path: str) -> Dependencies:
    return Dependencies(
        external=_objects(
            d,
            "external",
            path,
            lambda e, p: ExternalDependency(
                name=_str(e, "name", p), status=_str(e, "status", p), note=_str(e, "note", p)
            ),
        ),
        internal=_objects(
            d,
            "internal",
            path,
            lambda e, p: InternalDependency(
                package=_str(e, "package", p),
                depends_on=_strings(e.get("depends_on"), f"{p}.depends_on"),
            ),
        ),
    )


_FRACTION_RE = re.compile(r"(T[0-9]{2}:[0-9]{2}:[0-9]{2}\.)([0-9]+)", re.IGNORECASE)


def _timestamp(v: Any) -> datetime | None:
    if v is None:
        return None
    if not isinstance(v, str):
        raise _ShapeError("generated_at", "RFC 3339 timestamp", v)
    text = v[:-1] + "+00:00" if v.endswith(("Z", "z")) else v
    # datetime only takes 3 or 6 fractional digits; nanosecond precision is cut.
    text = _FRACTION_RE.sub(lambda m: m.group(1) + (m.group(2) + "000000")[:6], text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"generated_at: invalid timestamp {v!r}") from exc


def _legend(v: Any) -> dict[str, LegendEntry]:
    if v is None:
        return {}
    entries: dict[str, LegendEntry] = {}
    for status, entry in _object(v, "legend").items():
        path = f"legend.{status}"
        entry = _object(entry, path)
        entries[status] = LegendEntry(
            emoji=_str(entry, "emoji", path),
            description=_str(entry, "description", path),
        )
    return entries


def _roadmap(data: Any) -> Roadmap:
    d = _object(data, "document")
    deps = d.get("dependencies")
    return Roadmap(
        ir_version=_str(d, "ir_version", ""),
        project=_str(d, "project", ""),
        repository=_str(d, "repository", ""),
        generated_at=_timestamp(d.get("generated_at")),
        legend=_legend(d.get("legend")),
        areas=_objects(d, "areas", "", _area),
        phases=_objects(d, "phases", "", _phase),
        items=_objects(d, "items", "", _item),
        sections=_objects(d, "sections", "", _section),
        version_history=_objects(d, "version_history", "", _version_entry),
        dependencies=None if deps is None else _dependencies(_object(deps, "dependencies"), "dependencies"),
    )


def decode(data: bytes | str) -> Roadmap:
    """Parse ROADMAP.json text into a :class:`Roadmap`.

    Raises:
        ParseFailure: The text is not valid JSON or does not fit the model.
    """
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise ParseFailure("parse", exc) from exc
    try:
        return _roadmap(raw)
    except (_ShapeError, ValueError, RecursionError) as exc:
        raise ParseFailure("parse", exc) from exc


def decode_file(path: str | Path) -> Roadmap:
    """Read and parse the ROADMAP.json at *path*.

    Raises:
        ReadFailure:  The file could not be read.
        ParseFailure: The contents are not a valid roadmap document.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ReadFailure("read", exc) from exc
    return decode(data)


# -- model -> JSON ------------------------------------------------------------
# Sparse output: zero values are dropped except for the keys listed in
# ``keep``, which are always written.


def _sparse(pairs: list[tuple[str, Any]], keep: tuple[str, ...] = ()) -> dict:
    out: dict[str, Any] = {}
    for key, value in pairs:
        if key in keep or value not in ("", 0, None, [], {}):
            out[key] = value
    return out


def _dump_block(b: ContentBlock) -> dict:
    return _sparse(
        [
            ("type", b.type),
            ("value", b.value),
            ("language", b.language),
            ("format", b.format),
            ("headers", list(b.headers)),
            ("rows", [list(r) for r in b.rows]),
            ("items", list(b.items)),
        ],
        keep=("type",),
    )


def _dump_task(t: Task) -> dict:
    return _sparse(
        [
            ("id", t.id),
            ("description", t.description),
            ("completed", t.completed),
            ("file_path", t.file_path),
        ],
        keep=("description", "completed"),
    )


def _dump_item(i: Item) -> dict:
    return _sparse(
        [
            ("id", i.id),
            ("title", i.title),
            ("description", i.description),
            ("status", i.status),
            ("version", i.version),
            ("completed_date", i.completed_date),
            ("target_quarter", i.target_quarter),
            ("target_version", i.target_version),
            ("area", i.area),
            ("type", i.type),
            ("phase", i.phase),
            ("priority", i.priority),
            ("order", i.order),
            ("depends_on", list(i.depends_on)),
            ("tasks", [_dump_task(t) for t in i.tasks]),
            ("content", [_dump_block(b) for b in i.content]),
        ],
        keep=("id", "title", "status"),
    )


def _dump_dependencies(d: Dependencies) -> dict:
    return _sparse(
        [
            (
                "external",
                [
                    _sparse([("name", e.name), ("status", e.status), ("note", e.note)], keep=("name",))
                    for e in d.external
                ],
            ),
            (
                "internal",
                [
                    _sparse([("package", p.package), ("depends_on", list(p.depends_on))], keep=("package",))
                    for p in d.internal
                ],
            ),
        ]
    )


def _dump_timestamp(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    text = dt.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def to_dict(roadmap: Roadmap) -> dict:
    """Return the sparse JSON-ready dict for *roadmap* in canonical key order."""
    out = _sparse(
        [
            ("ir_version", roadmap.ir_version),
            ("project", roadmap.project),
            ("repository", roadmap.repository),
            ("generated_at", _dump_timestamp(roadmap.generated_at)),
            (
                "legend",
                {
                    status: {"emoji": entry.emoji, "description": entry.description}
                    for status, entry in sorted(roadmap.legend.items())
                },
            ),
            (
                "areas",
                [_sparse([("id", a.id), ("name", a.name), ("priority", a.priority)], keep=("id", "name")) for a in roadmap.areas],
            ),
            (
                "phases",
                [
                    _sparse(
                        [
                            ("id", p.id),
                            ("name", p.name),
                            ("status", p.status),
                            ("order", p.order),
                            ("description", p.description),
                        ],
                        keep=("id", "name"),
                    )
                    for p in roadmap.phases
                ],
            ),
            ("items", [_dump_item(i) for i in roadmap.items]),
            (
                "sections",
                [
                    _sparse(
                        [
                            ("id", s.id),
                            ("title", s.title),
                            ("order", s.order),
                            ("content", [_dump_block(b) for b in s.content]),
                        ],
                        keep=("id", "title"),
                    )
                    for s in roadmap.sections
                ],
            ),
            (
                "version_history",
                [
                    _sparse(
                        [("version", v.version), ("date", v.date), ("status", v.status), ("summary", v.summary)],
                        keep=("version",),
                    )
                    for v in roadmap.version_history
                ],
            ),
        ],
        keep=("ir_version", "project"),
    )
    if roadmap.dependencies is not None:
        out["dependencies"] = _dump_dependencies(roadmap.dependencies)
    return out


def encode(roadmap: Roadmap) -> bytes:
    """Serialize *roadmap* to indented UTF-8 JSON.

    Raises:
        WriteFailure: A field holds a value JSON cannot represent.
    """
    try:
        text = json.dumps(to_dict(roadmap), indent=JSON_INDENT, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise WriteFailure("encode", exc) from exc
    return text.encode("utf-8")


def encode_to_file(path: str | Path, roadmap: Roadmap) -> None:
    """Write *roadmap* to *path*, replacing any existing file in one step.

    The data goes to a temporary sibling first and is renamed over *path*,
    so a failed write never leaves a truncated document behind.

    Raises:
        WriteFailure: Encoding or any filesystem operation failed.
    """
    target = Path(path)
    data = encode(roadmap) + b"\n"
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as exc:
        raise WriteFailure("write", exc) from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
