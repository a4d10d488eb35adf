"""Shared service-layer helper functions."""

from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path


def now_iso() -> str:
    """Current UTC instant with millisecond precision, e.g. ``2024-05-01T09:30:00.123Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_path(path: str | Path) -> str:
    """Absolute, normalized form of *path* used for storage and comparison.

    ``~`` is expanded and ``..`` segments collapsed. Symlinks are not followed.
    """
    return os.path.abspath(os.path.expanduser(os.fspath(path)))
