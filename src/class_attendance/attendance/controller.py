from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, json_error, json_ok, query_date, query_int, teacher_required
from ..common.serialization import to_dict, to_dict_list
from ..common.validators import optional_text, require_int, require_non_empty, require_status
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    # Recording is done by recorder students and needs no teacher login.
    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_record")
    def attendance_record():
        try:
            body = json_body()
            record = container.attendance_service.record(
                student_id=require_int(body.get("student_id"), "student_id"),
                class_id=require_int(body.get("class_id"), "class_id"),
                status=require_status(body.get("status")),
                attendance_date=parse_iso_date(require_non_empty(body.get("date"), "date")),
                recorded_by=require_int(body.get("recorded_by"), "recorded_by"),
                notes=optional_text(body.get("notes"), "notes"),
            )
            return json_ok(to_dict(record), 201)
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Attendance recording failed")
            return jsonify({"success": False, "message": "Unexpected error while recording attendance"}), 500

    @app.route("/api/classes/<int:class_id>/attendance/daily", endpoint="attendance_daily")
    @teacher_required
    def attendance_daily(class_id: int):
        try:
            records = container.report_service.daily(class_id, query_date("date"))
            return json_ok(to_dict_list(records))
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Daily report failed for class %s", class_id)
            return jsonify({"success": False, "message": "Unexpected error while building the daily report"}), 500

    @app.route("/api/classes/<int:class_id>/attendance/weekly", endpoint="attendance_weekly")
    @teacher_required
    def attendance_weekly(class_id: int):
        try:
            records = container.report_service.weekly(class_id, query_date("week_start"))
            return json_ok(to_dict_list(records))
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Weekly report failed for class %s", class_id)
            return jsonify({"success": False, "message": "Unexpected error while building the weekly report"}), 500

    @app.route("/api/classes/<int:class_id>/attendance/monthly", endpoint="attendance_monthly")
    @teacher_required
    def attendance_monthly(class_id: int):
        try:
            summary = container.report_service.monthly(class_id, query_int("month"), query_int("year"))
            return json_ok(to_dict_list(summary))
        except DomainError as e:
            return json_error(e)
        except Exception:
            logger.exception("Monthly report failed for class %s", class_id)
            return jsonify({"success": False, "message": "Unexpected error while building the monthly report"}), 500
