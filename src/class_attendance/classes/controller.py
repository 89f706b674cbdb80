from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, json_error, json_ok, teacher_required
from ..common.serialization import to_dict, to_dict_list
from ..common.validators import optional_text
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    @teacher_required
    def classes_list():
        try:
            return json_ok(to_dict_list(container.class_service.list_all()))
        except DomainError as e:
            return json_error(e)

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    @teacher_required
    def classes_create():
        try:
            body = json_body()
            created = container.class_service.create(
                name=optional_text(body.get("name"), "name") or "",
                grade=optional_text(body.get("grade"), "grade") or "",
                academic_year=optional_text(body.get("academic_year"), "academic_year") or "",
            )
            return json_ok(to_dict(created), 201)
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Class creation failed")
            return jsonify({"success": False, "message": "Unexpected error while creating class"}), 500

    @app.route("/api/classes/<int:class_id>", methods=["PATCH"], endpoint="classes_update")
    @teacher_required
    def classes_update(class_id: int):
        try:
            body = json_body()
            updated = container.class_service.update(
                class_id,
                name=optional_text(body.get("name"), "name"),
                grade=optional_text(body.get("grade"), "grade"),
                academic_year=optional_text(body.get("academic_year"), "academic_year"),
            )
            return json_ok(to_dict(updated))
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Class update failed for %s", class_id)
            return jsonify({"success": False, "message": "Unexpected error while updating class"}), 500

    @app.route("/api/classes/<int:class_id>", methods=["DELETE"], endpoint="classes_delete")
    @teacher_required
    def classes_delete(class_id: int):
        try:
            container.class_service.delete(class_id)
            return json_ok({"deleted": class_id})
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Class deletion failed for %s", class_id)
            return jsonify({"success": False, "message": "Unexpected error while deleting class"}), 500
