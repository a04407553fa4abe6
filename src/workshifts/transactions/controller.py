from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import int_field, json_body, json_endpoint, json_error
from ..container import Container
from ..core.enums import TransactionType
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.transaction_service

    @app.route("/transactions", methods=["POST"], endpoint="create_transaction")
    @json_endpoint("Failed to create transaction")
    def create_transaction():
        body = json_body()
        if not body.get("userId") or not body.get("businessId") or not body.get("type"):
            return json_error("Missing required fields: userId, businessId, type", 400)

        try:
            tx_type = TransactionType(str(body["type"]).upper())
        except ValueError:
            raise ValidationError("Invalid transaction type")

        purchase_amount = body.get("purchaseAmount")
        if purchase_amount is not None:
            try:
                purchase_amount = float(purchase_amount)
            except (TypeError, ValueError):
                raise ValidationError("purchaseAmount must be a number")

        tx = service.create_transaction(
            user_id=int_field(body["userId"], "userId"),
            business_id=int_field(body["businessId"], "businessId"),
            type=tx_type,
            total_points_change=int_field(body.get("totalPointsChange", 0), "totalPointsChange"),
            total_stamps_change=int_field(body.get("totalStampsChange", 0), "totalStampsChange"),
            purchase_amount=purchase_amount,
            notes=body.get("notes"),
        )
        return jsonify(tx.to_public()), 201

    @app.route("/transactions/<int:transaction_id>", methods=["GET"], endpoint="get_transaction")
    @json_endpoint("Failed to get transaction")
    def get_transaction(transaction_id: int):
        return jsonify(service.get(transaction_id).to_public())
