"""Helpers for resolving project and configuration paths."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

PROJECT_SENTINELS: Iterable[str] = ("package.json", ".git")


def detect_project_root(start: Optional[Path] = None) -> Optional[Path]:
    """Walk upward from ``start`` (default: cwd) to find the project root."""
    current = (start or Path.cwd()).resolve()
    for candidate in [current, *current.parents]:
        if any((candidate / marker).exists() for marker in PROJECT_SENTINELS):
            return candidate
    return None
