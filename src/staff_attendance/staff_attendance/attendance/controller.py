from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import normalize_keys
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _args() -> dict:
        return normalize_keys(request.args.to_dict())

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = normalize_keys(request.get_json(silent=True))
        record = container.attendance_service.mark(data)
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        """?date=YYYY-MM-DD for one day, ?month=M&year=YYYY for a month."""
        args = _args()
        if args.get("date"):
            rows = container.attendance_service.get_for_date(args["date"])
        else:
            rows = container.attendance_service.get_for_month(month=args.get("month"), year=args.get("year"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance/date/<work_date>", methods=["GET"], endpoint="attendance_roster")
    def attendance_roster(work_date: str):
        return jsonify(list(container.attendance_service.get_roster(work_date)))

    @app.route("/api/attendance/employee/<employee_id>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: str):
        args = _args()
        rows = container.attendance_service.get_history(
            employee_id,
            start=args.get("start_date"),
            end=args.get("end_date"),
        )
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        args = _args()
        rows = container.attendance_service.get_summary(start=args.get("start_date"), end=args.get("end_date"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance/export", methods=["GET"], endpoint="export_attendance")
    def export_attendance():
        args = _args()
        export = container.export_service.export_range(start=args.get("start_date"), end=args.get("end_date"))
        return app.response_class(
            export.content,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )
