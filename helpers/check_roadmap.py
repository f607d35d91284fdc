"""Validate a ROADMAP.json against the roadmap IR rules and report statistics.

Exit codes: 0 = valid, 1 = validation/parse errors, 2 = file not found.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import questionary
from rich.markup import escape
from rich.table import Table

from roadmap.changetypes import DEFAULT_REGISTRY, ChangeTypeChecker, ChangeTypeRegistry
from roadmap.codec import decode_file, encode_to_file
from roadmap.config import (
    CHANGE_TYPES_FILE,
    PROJECTS_ROOT,
    ROADMAP_FILENAME,
    _console,
    is_verbose,
    rbox,
    set_verbose,
)
from roadmap.errors import FieldError, RoadmapError
from roadmap.legend import get_legend
from roadmap.model import Roadmap, priority_label, priority_order, status_order
from roadmap.validate import run_checks
from roadmap.views import items_by_area, stats

# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


def _format_error(err: FieldError) -> str:
    line = f"        [red]ERROR[/]  {escape(err.field)}: {escape(err.message)}"
    if is_verbose():
        line += f"  [dim]({err.kind.value})[/]"
    return line


def print_validation_report(path: Path, roadmap: Roadmap, registry: ChangeTypeChecker) -> int:
    """Print one PASS/FAIL line per check with its errors; return the error count."""
    _console.print(f"Checking : {escape(str(path))}")
    _console.print(f"Project  : {escape(roadmap.project or '(missing)')}  [dim](ir_version {escape(roadmap.ir_version or '?')})[/]")
    _console.print(
        f"Items    : {len(roadmap.items)}  "
        f"Areas: {len(roadmap.areas)}  Phases: {len(roadmap.phases)}  Sections: {len(roadmap.sections)}"
    )
    _console.print()

    total = 0
    for name, errors in run_checks(roadmap, registry):
        if errors:
            _console.print(f"  [red]\\[FAIL][/] {name:<24}  ({len(errors)} error(s))")
        else:
            _console.print(f"  [green]\\[ok  ][/] {name:<24}  (PASS)")
        for err in errors:
            _console.print(_format_error(err))
        total += len(errors)

    _console.print()
    _console.rule(style="bright_black")
    if total == 0:
        _console.print("[green]\\[ok  ][/] All checks passed.")
    else:
        _console.print(f"[red]\\[FAIL][/] FAILED -- {total} error(s).")
    _console.rule(style="bright_black")
    return total


def _count_table(title: str, counts: list[tuple[str, int]]) -> Table:
    t = Table(box=rbox.ROUNDED, border_style="bright_black", title=f"[bold]{title}[/]", title_style="")
    t.add_column(title.split()[-1], no_wrap=True)
    t.add_column("Items", justify="right")
    for label, count in counts:
        t.add_row(escape(label), str(count))
    return t


def print_stats(roadmap: Roadmap) -> dict:
    """Print roadmap statistics tables and return them as a plain dict."""
    s = stats(roadmap)
    legend = get_legend(roadmap)

    by_status: list[tuple[str, int]] = []
    known = [st.value for st in status_order()]
    for st in known + sorted(k for k in s.by_status if k not in known):
        if st in s.by_status:
            entry = legend.get(st)
            label = f"{entry.emoji} {entry.description}" if entry else st
            by_status.append((label, s.by_status[st]))

    by_priority = [
        (priority_label(p), n) for p, n in sorted(s.by_priority.items(), key=lambda kv: priority_order(kv[0]))
    ]

    _console.print()
    _console.rule(f"[bold]Roadmap Stats -- {escape(roadmap.project)}[/]", style="blue")
    _console.print(_count_table("By Status", by_status))
    if s.by_area:
        _console.print(_count_table("By Area", sorted(s.by_area.items())))
    if s.by_type:
        _console.print(_count_table("By Type", sorted(s.by_type.items())))
    if by_priority:
        _console.print(_count_table("By Priority", by_priority))

    if is_verbose():
        for area, items in items_by_area(roadmap).items():
            ids = ", ".join(i.id for i in items)
            _console.print(f"  [dim]{escape(area)}:[/] {escape(ids)}")

    _console.print()
    _console.print(f"  Total items:  [bold]{s.total}[/]")
    _console.print(f"  Completed:    [green]{s.completed_count()}[/] ({s.completed_percent():.1f}%)")
    _console.print()

    return {
        "total": s.total,
        "completed": s.completed_count(),
        "completed_percent": s.completed_percent(),
        "by_status": dict(s.by_status),
        "by_area": dict(s.by_area),
        "by_type": dict(s.by_type),
        "by_priority": dict(s.by_priority),
    }


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def check_file(
    path: Path,
    registry: ChangeTypeChecker = DEFAULT_REGISTRY,
    *,
    show_stats: bool = False,
    rewrite: bool = False,
) -> int:
    """Validate *path* and print a report; return 0 (valid) or 1 (errors found)."""
    try:
        roadmap = decode_file(path)
    except RoadmapError as exc:
        _console.print(f"[red]ERROR:[/] Cannot load {escape(str(path))}: {escape(str(exc))}")
        return 1

    errors = print_validation_report(path, roadmap, registry)

    if show_stats:
        print_stats(roadmap)

    if rewrite:
        if errors:
            _console.print("[yellow]Not rewriting: fix the errors above first.[/]")
        else:
            try:
                encode_to_file(path, roadmap)
            except RoadmapError as exc:
                _console.print(f"[red]ERROR:[/] {escape(str(exc))}")
                return 1
            _console.print(f"[dim]Rewrote {escape(str(path))} in canonical form.[/]")

    return 1 if errors else 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def find_roadmaps(root: Path | None = None) -> list[Path]:
    """Return every ``<root>/*/ROADMAP.json``, sorted."""
    base = PROJECTS_ROOT if root is None else root
    if not base.is_dir():
        return []
    return sorted(base.glob(f"*/{ROADMAP_FILENAME}"))


def select_roadmap(candidates: list[Path]) -> Path | None:
    """Pick a roadmap: the only candidate, or ask with arrow-key navigation."""
    if not candidates:
        return None
    if len(candidates) == 1 or not sys.stdin.isatty():
        return candidates[0]
    choices = [questionary.Choice(title=str(p.parent.name), value=p) for p in candidates]
    return questionary.select(
        "Select roadmap:",
        choices=choices,
        use_shortcuts=False,
    ).ask()


def _load_registry(path: Path | None) -> ChangeTypeChecker:
    if path is None:
        return DEFAULT_REGISTRY
    return ChangeTypeRegistry.from_file(path)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Validate a ROADMAP.json against the roadmap IR rules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Exit 0 = valid, 1 = errors found, 2 = file not found.",
    )
    parser.add_argument(
        "roadmap",
        nargs="?",
        help=f"Path to {ROADMAP_FILENAME} (default: pick from {PROJECTS_ROOT}/*/{ROADMAP_FILENAME})",
    )
    parser.add_argument("--stats", action="store_true", help="Also print item statistics.")
    parser.add_argument("--fmt", action="store_true", help="Rewrite a valid file in canonical form.")
    parser.add_argument(
        "--change-types",
        metavar="FILE",
        help="JSON list of extra change-type names (default: $ROADMAP_CHANGE_TYPES).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show error kinds and bucket contents.")
    args = parser.parse_args(argv)

    set_verbose(args.verbose)

    if args.roadmap:
        path = Path(args.roadmap)
    else:
        candidates = find_roadmaps()
        if not candidates:
            print(f"No {ROADMAP_FILENAME} found. Pass a path explicitly.", file=sys.stderr)
            sys.exit(2)
        path = select_roadmap(candidates)
        if path is None:
            print("Selection cancelled.", file=sys.stderr)
            sys.exit(0)

    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(2)

    try:
        registry = _load_registry(Path(args.change_types) if args.change_types else CHANGE_TYPES_FILE)
    except RoadmapError as exc:
        print(f"Cannot load change types: {exc}", file=sys.stderr)
        sys.exit(2)

    sys.exit(check_file(path, registry, show_stats=args.stats, rewrite=args.fmt))


if __name__ == "__main__":
    main()
