"""ID generation for standups and repositories.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import uuid


def generate_id() -> str:
    """Random UUID4 string, e.g. ``3f2b9c1e-...``."""
    return str(uuid.uuid4())
