from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import SchoolClass


class ClassRepository(Protocol):
    """Repository interface for classes.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        raise NotImplementedError

    def list_all(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def create(self, *, name: str, grade: str, academic_year: str, created_at: datetime) -> int:
        raise NotImplementedError

    def update(self, class_id: int, changes: dict) -> bool:
        """Apply only the given column changes. Returns False if the class is missing."""

        raise NotImplementedError

    def delete_by_id(self, class_id: int) -> bool:
        raise NotImplementedError
