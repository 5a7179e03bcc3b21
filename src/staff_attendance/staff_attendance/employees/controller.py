from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import normalize_keys
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _body() -> dict:
        return normalize_keys(request.get_json(silent=True))

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_all(status=request.args.get("status"))
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        employee = container.employee_service.create(_body())
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(container.employee_service.get(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        employee = container.employee_service.update(employee_id, _body())
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>/status", methods=["PATCH"], endpoint="set_employee_status")
    def set_employee_status(employee_id: str):
        employee = container.employee_service.set_status(employee_id, _body().get("status"))
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        container.employee_service.delete(employee_id)
        return "", 204
