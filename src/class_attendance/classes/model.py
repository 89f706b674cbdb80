from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a cohort of students sharing grade and academic year."""

    class_id: int
    name: str
    grade: str
    academic_year: str
    created_at: datetime
