from __future__ import annotations

import uuid


def new_record_id(prefix: str) -> str:
    """Build an internal record id such as ``student-1f3a...``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
