from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import Teacher


class TeacherRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[Teacher]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, password_hash: str, created_at: datetime) -> int:
        raise NotImplementedError
