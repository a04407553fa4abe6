from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import int_field, json_body, json_endpoint, json_error, optional_bool
from ..container import Container

_REQUIRED = ("businessId", "name", "startTime", "endTime")


def register(app: Flask, container: Container) -> None:
    service = container.shift_service

    @app.route("/work-shifts", methods=["POST"], endpoint="create_work_shift")
    @json_endpoint("Failed to create work shift")
    def create_work_shift():
        body = json_body()
        if any(not body.get(k) for k in _REQUIRED):
            return json_error(f"Missing required fields: {', '.join(_REQUIRED)}", 400)

        shift = service.create(
            business_id=int_field(body["businessId"], "businessId"),
            name=body["name"],
            start_time=body["startTime"],
            end_time=body["endTime"],
            color=body.get("color"),
            description=body.get("description"),
        )
        return jsonify(shift.to_public()), 201

    @app.route("/work-shifts/business/<int:business_id>", methods=["GET"], endpoint="list_work_shifts")
    @json_endpoint("Failed to get work shifts")
    def list_work_shifts(business_id: int):
        include_inactive = request.args.get("includeInactive") == "true"
        shifts = service.list_for_business(business_id, include_inactive=include_inactive)
        return jsonify([s.to_public() for s in shifts])

    @app.route("/work-shifts/<int:shift_id>", methods=["GET"], endpoint="get_work_shift")
    @json_endpoint("Failed to get work shift")
    def get_work_shift(shift_id: int):
        return jsonify(service.get(shift_id).to_public())

    @app.route("/work-shifts/<int:shift_id>", methods=["PUT"], endpoint="update_work_shift")
    @json_endpoint("Failed to update work shift")
    def update_work_shift(shift_id: int):
        body = json_body()
        shift = service.update(
            shift_id,
            name=body.get("name"),
            start_time=body.get("startTime"),
            end_time=body.get("endTime"),
            color=body.get("color"),
            description=body.get("description"),
            is_active=optional_bool(body.get("isActive"), "isActive"),
        )
        return jsonify(shift.to_public())

    @app.route("/work-shifts/<int:shift_id>", methods=["DELETE"], endpoint="delete_work_shift")
    @json_endpoint("Failed to delete work shift")
    def delete_work_shift(shift_id: int):
        service.delete(shift_id)
        return jsonify({"message": "Work shift deleted successfully"})

    @app.route("/work-shifts/<int:shift_id>/toggle", methods=["PATCH"], endpoint="toggle_work_shift")
    @json_endpoint("Failed to toggle work shift status")
    def toggle_work_shift(shift_id: int):
        return jsonify(service.toggle_active(shift_id).to_public())
