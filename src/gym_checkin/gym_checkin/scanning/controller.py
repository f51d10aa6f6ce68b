from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from PIL import UnidentifiedImageError

from ..common.responses import error_json
from ..container import Container
from ..core.exceptions import CheckInError, StoreError
from .decoder import decode_image_file

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin/image", methods=["POST"], endpoint="api_checkin_image")
    def api_checkin_image():
        """Decode an uploaded photo of a member QR code and check in."""
        if "image" not in request.files:
            return jsonify({"success": False, "error": "MISSING_IMAGE", "message": "Image file is required"}), 400

        try:
            scanned = decode_image_file(request.files["image"].stream)
        except UnidentifiedImageError:
            return jsonify({"success": False, "error": "INVALID_IMAGE", "message": "File is not a readable image"}), 400

        if not scanned:
            return jsonify({"success": False, "error": "NO_QR_CODE", "message": "No QR code found in the image"}), 400

        try:
            result = container.checkin_service.check_in_scanned(scanned)
        except (CheckInError, StoreError) as e:
            return error_json(e)
        except Exception as e:
            logger.exception("Unexpected error during image check-in")
            return error_json(e)

        return jsonify({"success": True, **result.to_dict()}), 200
