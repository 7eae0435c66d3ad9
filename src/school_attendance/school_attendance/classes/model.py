from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class (e.g. ``Grade 10-A``) and its ordered subjects."""

    id: str
    name: str
    subjects: Tuple[str, ...]
    teacher_id: Optional[str] = None
