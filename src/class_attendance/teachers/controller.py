from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.http import json_body, json_error, json_ok
from ..common.serialization import to_dict
from ..common.validators import optional_text
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teachers", methods=["POST"], endpoint="teachers_create")
    def teachers_create():
        try:
            body = json_body()
            teacher = container.teacher_service.create_account(
                name=optional_text(body.get("name"), "name") or "",
                email=optional_text(body.get("email"), "email") or "",
                password=optional_text(body.get("password"), "password") or "",
            )
            return json_ok(to_dict(teacher), 201)
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Teacher creation failed")
            return jsonify({"success": False, "message": "Unexpected error while creating account"}), 500

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        try:
            body = json_body()
            teacher = container.auth_service.authenticate(
                optional_text(body.get("email"), "email") or "",
                optional_text(body.get("password"), "password") or "",
            )
        except DomainError as e:
            return json_error(e)

        session.clear()
        session["teacher_id"] = teacher.teacher_id
        session["name"] = teacher.name
        return json_ok(to_dict(teacher))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return json_ok()
