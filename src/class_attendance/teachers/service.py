from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_local
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from .model import Teacher
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate a teacher (login)."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def authenticate(self, email: str, password: str) -> Teacher:
        teacher = self._teachers.get_by_email((email or "").strip())
        if not teacher:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(teacher.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("Failed login for teacher %s", teacher.teacher_id)
            raise AuthenticationError("Invalid email or password")
        return teacher


class TeacherService:
    """Use case: register teacher accounts."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def create_account(self, *, name: str, email: str, password: str, now: Optional[datetime] = None) -> Teacher:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._teachers.get_by_email(email):
            raise ValidationError("Email is already registered")

        password_hash = generate_password_hash(password)
        created_at = now or now_local()
        teacher_id = self._teachers.create(name=name, email=email, password_hash=password_hash, created_at=created_at)
        logger.info("Created teacher account %s", teacher_id)
        return Teacher(
            teacher_id=teacher_id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
        )
