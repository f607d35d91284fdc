"""config.py — Global constants, Rich console, and verbosity toggle."""

import os
import sys
from pathlib import Path

from rich import (
    box as rbox,  # noqa: F401  re-exported; imported via `from roadmap.config import rbox`
)
from rich.console import Console

# ── Windows UTF-8 console ──────────────────────────────────────────────────────
# Legend emoji must survive printing on the legacy Windows console.
if sys.platform == "win32":
    if not os.environ.get("PYTHONIOENCODING"):
        os.environ["PYTHONIOENCODING"] = "utf-8"
    if hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8", errors="replace")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8", errors="replace")  # type: ignore[union-attr]
        except (OSError, ValueError):
            pass

# legacy_windows=False keeps Rich off the cp1252 Win32 console API.
# soft_wrap=True keeps long field paths on one line when output is piped.
_console = Console(legacy_windows=False, soft_wrap=True)

# ── IR constants ───────────────────────────────────────────────────────────────

# The only ir_version the validator accepts.
IR_VERSION: str = "1.0"

# The filename used for project roadmaps.
ROADMAP_FILENAME = "ROADMAP.json"

# Encoded documents: 2-space indent, owner read/write only.
JSON_INDENT: int = 2
FILE_MODE: int = 0o600

# ── Paths ──────────────────────────────────────────────────────────────────────

# Searched for */ROADMAP.json when the checker is run without a path.
# Override with ROADMAP_PROJECTS_ROOT.
PROJECTS_ROOT = Path(os.environ.get("ROADMAP_PROJECTS_ROOT", "projects"))

# Optional JSON list of extra change-type names accepted for Item.type.
_change_types_env = os.environ.get("ROADMAP_CHANGE_TYPES", "")
CHANGE_TYPES_FILE: Path | None = Path(_change_types_env) if _change_types_env else None

# ── Verbosity mode ─────────────────────────────────────────────────────────────

# Default is compact: only field paths and messages are printed.
# Set to True to also print error kinds and per-bucket item ids.
_verbose: bool = False


def set_verbose(v: bool) -> None:
    """Switch the global report verbosity.  True = detailed; False = compact (default)."""
    global _verbose
    _verbose = v


def is_verbose() -> bool:
    """Return True when verbose (detailed) mode is active."""
    return _verbose
