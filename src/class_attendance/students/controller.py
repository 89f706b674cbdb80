from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, json_error, json_ok, teacher_required
from ..common.serialization import to_dict, to_dict_list
from ..common.validators import optional_text, require_bool, require_int
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    # Student lists stay public: the recording screen needs them before any login.
    @app.route("/api/classes/<int:class_id>/students", methods=["GET"], endpoint="students_by_class")
    def students_by_class(class_id: int):
        try:
            return json_ok(to_dict_list(container.student_service.list_by_class(class_id)))
        except DomainError as e:
            return json_error(e)

    @app.route("/api/classes/<int:class_id>/recorders", methods=["GET"], endpoint="students_recorders")
    def students_recorders(class_id: int):
        try:
            return json_ok(to_dict_list(container.student_service.list_recorders(class_id)))
        except DomainError as e:
            return json_error(e)

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    @teacher_required
    def students_create():
        try:
            body = json_body()
            recorder = body.get("is_attendance_recorder", False)
            created = container.student_service.create(
                name=optional_text(body.get("name"), "name") or "",
                student_code=optional_text(body.get("student_code"), "student_code") or "",
                class_id=require_int(body.get("class_id"), "class_id"),
                is_attendance_recorder=require_bool(recorder, "is_attendance_recorder"),
            )
            return json_ok(to_dict(created), 201)
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Student creation failed")
            return jsonify({"success": False, "message": "Unexpected error while creating student"}), 500

    @app.route("/api/students/<int:student_id>", methods=["PATCH"], endpoint="students_update")
    @teacher_required
    def students_update(student_id: int):
        try:
            body = json_body()
            class_id = body.get("class_id")
            recorder = body.get("is_attendance_recorder")
            updated = container.student_service.update(
                student_id,
                name=optional_text(body.get("name"), "name"),
                student_code=optional_text(body.get("student_code"), "student_code"),
                class_id=require_int(class_id, "class_id") if class_id is not None else None,
                is_attendance_recorder=require_bool(recorder, "is_attendance_recorder") if recorder is not None else None,
            )
            return json_ok(to_dict(updated))
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Student update failed for %s", student_id)
            return jsonify({"success": False, "message": "Unexpected error while updating student"}), 500

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_delete")
    @teacher_required
    def students_delete(student_id: int):
        try:
            container.student_service.delete(student_id)
            return json_ok({"deleted": student_id})
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Student deletion failed for %s", student_id)
            return jsonify({"success": False, "message": "Unexpected error while deleting student"}), 500
