from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque unique identifier for classes, students and records."""
    return uuid.uuid4().hex
