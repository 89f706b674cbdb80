from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher account. Gates access to reports and management."""

    teacher_id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime
