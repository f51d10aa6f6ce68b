from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import error_json
from ..container import Container
from ..core.exceptions import CheckInError, StoreError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin/scan", methods=["POST"], endpoint="api_checkin_scan")
    def api_checkin_scan():
        """Check in from the text a kiosk camera decoded out of a member QR code."""
        data = request.get_json(silent=True) or {}
        scanned = str(data.get("code") or "").strip()

        try:
            result = container.checkin_service.check_in_scanned(scanned)
        except (CheckInError, StoreError) as e:
            return error_json(e)
        except Exception as e:
            logger.exception("Unexpected error during check-in")
            return error_json(e)

        return jsonify({"success": True, **result.to_dict()}), 200
