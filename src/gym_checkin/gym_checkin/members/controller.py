from __future__ import annotations

import io
import logging

import qrcode
from flask import Flask, jsonify, request, send_file

from ..core.constants import QR_URI_SCHEME
from ..core.exceptions import StoreError, ValidationError
from ..common.responses import error_json
from ..container import Container

logger = logging.getLogger(__name__)


def make_qr_png(data: str) -> io.BytesIO:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["POST"], endpoint="api_register_member")
    def api_register_member():
        data = request.get_json(silent=True) or {}
        try:
            member = container.member_service.register(
                wallet_address=str(data.get("wallet_address", "")),
                name=str(data.get("name", "")),
                phone=str(data.get("phone", "")),
                membership_type=str(data.get("membership_type", "")),
                option=data.get("option"),
            )
        except (ValidationError, StoreError) as e:
            return error_json(e)
        return jsonify({"success": True, "member": member.to_dict()}), 201

    @app.route("/api/members/<address>", endpoint="api_get_member")
    def api_get_member(address: str):
        try:
            member = container.member_service.get_by_wallet_address(address)
        except StoreError as e:
            return error_json(e)
        if not member:
            return jsonify({"success": False, "error": "NOT_FOUND", "message": "Member not found"}), 404
        return jsonify({"success": True, "member": member.to_dict()})

    @app.route("/api/members/<address>/qr", endpoint="api_member_qr")
    def api_member_qr(address: str):
        """PNG QR code for a member card; encodes ethereum:<address>."""
        try:
            member = container.member_service.get_by_wallet_address(address)
        except StoreError as e:
            return error_json(e)
        if not member:
            return jsonify({"success": False, "error": "NOT_FOUND", "message": "Member not found"}), 404

        buf = make_qr_png(QR_URI_SCHEME + member.wallet_address)
        return send_file(buf, mimetype="image/png")
