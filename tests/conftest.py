"""Shared fixtures for roadmap unit tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture()
def full_roadmap_dict() -> dict:
    """A valid ROADMAP.json document exercising every modelled field."""
    return {
        "ir_version": "1.0",
        "project": "structured-roadmap",
        "repository": "github.com/example/structured-roadmap",
        "generated_at": "2026-01-15T10:30:00Z",
        "legend": {
            "completed": {"emoji": "🎉", "description": "Shipped"},
        },
        "areas": [
            {"id": "core", "name": "Core", "priority": 1},
            {"id": "cli", "name": "CLI", "priority": 2},
        ],
        "phases": [
            {"id": "p1", "name": "Foundation", "status": "completed", "order": 1},
            {"id": "p2", "name": "Polish", "status": "planned", "order": 2, "description": "Nice to have"},
        ],
        "items": [
            {
                "id": "item-1",
                "title": "IR model",
                "description": "Define the data model.",
                "status": "completed",
                "version": "0.1.0",
                "completed_date": "2026-01-10",
                "area": "core",
                "type": "Added",
                "phase": "p1",
                "priority": "critical",
                "order": 1,
                "tasks": [
                    {"id": "t1", "description": "Write dataclasses", "completed": True, "file_path": "roadmap/model.py"},
                    {"description": "Write docs", "completed": False},
                ],
                "content": [
                    {"type": "text", "value": "Plain paragraph."},
                    {"type": "code", "value": "print('hi')", "language": "python"},
                    {"type": "diagram", "value": "A --> B", "format": "mermaid"},
                    {"type": "table", "headers": ["A", "B"], "rows": [["1", "2"], ["3"]]},
                    {"type": "list", "items": ["one", "two"]},
                    {"type": "blockquote", "value": "A quote"},
                ],
            },
            {
                "id": "item-2",
                "title": "Validator",
                "status": "in_progress",
                "target_quarter": "Q2 2026",
                "target_version": "0.2.0",
                "area": "core",
                "type": "Changed",
                "phase": "p2",
                "priority": "high",
                "depends_on": ["item-1", "item-3"],
            },
            {
                "id": "item-3",
                "title": "Stats table",
                "status": "planned",
                "area": "cli",
                "priority": "low",
            },
            {
                "id": "item-4",
                "title": "Markdown export",
                "status": "future",
            },
        ],
        "sections": [
            {
                "id": "overview",
                "title": "Overview",
                "order": 1,
                "content": [{"type": "text", "value": "What this is."}],
            }
        ],
        "version_history": [
            {"version": "0.1.0", "date": "2026-01-10", "status": "completed", "summary": "First cut"},
        ],
        "dependencies": {
            "external": [{"name": "rich", "status": "stable", "note": "console output"}],
            "internal": [{"package": "roadmap.validate", "depends_on": ["roadmap.model"]}],
        },
    }


@pytest.fixture()
def roadmap_file(tmp_path: Path, full_roadmap_dict: dict) -> Path:
    """Write the full document to ``<tmp>/demo/ROADMAP.json`` and return its path."""
    project = tmp_path / "demo"
    project.mkdir()
    path = project / "ROADMAP.json"
    path.write_text(json.dumps(full_roadmap_dict, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
