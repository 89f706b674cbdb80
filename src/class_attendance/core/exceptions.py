from __future__ import annotations

from .enums import EntityKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_kind: EntityKind, entity_id: object = None):
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity_kind.value} not found"
        else:
            message = f"{entity_kind.value} {entity_id} not found"
        super().__init__(message)


class MismatchedClassError(ValidationError):
    """Raised when a student does not belong to the class attendance is recorded for."""

    def __init__(self, student_id: int, class_id: int):
        self.student_id = student_id
        self.class_id = class_id
        super().__init__(f"Student {student_id} is not in class {class_id}")


class InvalidRangeError(ValidationError):
    """Raised when a reporting window cannot be built (bad month/year)."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class UnauthorizedRecorderError(AuthorizationError):
    """Raised when the recording student is not flagged as an attendance recorder."""

    def __init__(self, recorder_id: int):
        self.recorder_id = recorder_id
        super().__init__(f"Student {recorder_id} is not authorized to record attendance")


class StoreError(DomainError):
    """Raised when the underlying store fails (constraint violation, connectivity)."""
