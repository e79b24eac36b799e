"""App-data paths for runtime state such as log files.

Nothing is written unless the user opts in through the environment; the
installed package directory is never used as a fallback.
"""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path | None:
    """Resolve the configured app-data root, relative paths against the cwd."""
    configured = os.getenv("FUNNY_RECTANGLES_APP_DATA_DIR", "").strip()
    if not configured:
        return None
    return _anchor(Path(configured), Path.cwd())


def resolve_logs_dir() -> Path | None:
    """Resolve the run-log directory, or None when file logging is not configured."""
    root = resolve_app_data_root()
    configured = os.getenv("FUNNY_RECTANGLES_LOG_DIR", "").strip()
    if configured:
        return _anchor(Path(configured), root if root is not None else Path.cwd())
    if root is None:
        return None
    return root / "logs"


def _anchor(candidate: Path, base: Path) -> Path:
    return candidate if candidate.is_absolute() else base / candidate
