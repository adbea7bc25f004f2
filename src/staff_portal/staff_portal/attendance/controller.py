from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.http import int_arg, json_payload, login_required
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required(container)
    def attendance_today():
        record = container.attendance_service.get_today_record(g.portal)
        return jsonify({"success": True, "record": record.to_dict() if record else None}), 200

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required(container)
    def attendance_history():
        rows = container.attendance_service.get_history(g.portal, limit=int_arg("limit"))
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]}), 200

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @login_required(container)
    def mark_attendance():
        payload = json_payload()
        raw_date = payload.get("date") or today_local().isoformat()
        try:
            selected = parse_iso_date(raw_date)
        except (TypeError, ValueError):
            raise ValidationError("date must be YYYY-MM-DD")

        record = container.attendance_service.mark_attendance(
            g.portal,
            selected_date=selected,
            status=payload.get("status", "present"),
        )
        return jsonify({
            "success": True,
            "message": "Attendance marked successfully!",
            "record": record.to_dict(),
        }), 200

    @app.route("/api/attendance/calendar", methods=["GET"], endpoint="attendance_calendar")
    @login_required(container)
    def attendance_calendar():
        grid = container.attendance_service.get_month_calendar(
            g.portal, year=int_arg("year"), month=int_arg("month")
        )
        return jsonify({"success": True, "calendar": grid.to_dict()}), 200
