from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import normalize_keys
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salaries", methods=["GET"], endpoint="monthly_salaries")
    def monthly_salaries():
        args = normalize_keys(request.args.to_dict())
        include_inactive = str(args.get("include_inactive", "")).lower() in {"1", "true", "yes"}
        rows = container.salary_service.compute_month(
            month=args.get("month"),
            year=args.get("year"),
            include_inactive=include_inactive,
        )
        return jsonify([r.to_dict() for r in rows])
