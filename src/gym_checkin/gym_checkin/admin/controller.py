from __future__ import annotations

import csv
import io
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local
from ..common.responses import error_json
from ..container import Container
from ..core.exceptions import AuthenticationError, StoreError

CSV_FIELDS = ["check_in_time", "name", "phone", "membership_type", "wallet_address"]


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not session.get("is_admin"):
                return jsonify({"success": False, "error": "UNAUTHORIZED", "message": "Admin login required"}), 401
            try:
                return view(*args, **kwargs)
            except StoreError as e:
                return error_json(e)

        return wrapper

    def _int_arg(name: str):
        value = request.args.get(name)
        if value is None or value == "":
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or {}
        try:
            container.admin_auth_service.authenticate(str(data.get("password") or ""))
        except AuthenticationError as e:
            return error_json(e)

        session["is_admin"] = True
        return jsonify({"success": True})

    @app.route("/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop("is_admin", None)
        return jsonify({"success": True})

    @app.route("/api/admin/stats", endpoint="admin_stats")
    @admin_required
    def admin_stats():
        stats = container.admin_service.member_stats()
        return jsonify({"success": True, "stats": stats.to_dict()})

    @app.route("/api/admin/attendance/today", endpoint="admin_today_attendance")
    @admin_required
    def admin_today_attendance():
        rows = container.admin_service.today_attendance()
        return jsonify({"success": True, "attendance": [r.to_dict() for r in rows]})

    @app.route("/api/admin/attendance/today.csv", endpoint="admin_today_attendance_csv")
    @admin_required
    def admin_today_attendance_csv():
        today = now_local().date()
        rows = container.admin_service.today_attendance_rows(today=today)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"attendance_{today.strftime('%Y%m%d')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/admin/members", endpoint="admin_members")
    @admin_required
    def admin_members():
        svc = container.admin_service
        return jsonify({"success": True, "members": svc.member_rows(svc.all_members())})

    @app.route("/api/admin/members/new", endpoint="admin_new_members")
    @admin_required
    def admin_new_members():
        svc = container.admin_service
        members = svc.new_members(days=_int_arg("days"))
        return jsonify({"success": True, "members": svc.member_rows(members)})

    @app.route("/api/admin/members/expiring", endpoint="admin_expiring_members")
    @admin_required
    def admin_expiring_members():
        svc = container.admin_service
        members = svc.expiring_members(days=_int_arg("days"))
        return jsonify({"success": True, "members": svc.member_rows(members)})

    @app.route("/api/admin/members/low-sessions", endpoint="admin_low_session_members")
    @admin_required
    def admin_low_session_members():
        svc = container.admin_service
        members = svc.low_session_members(limit=_int_arg("limit"))
        return jsonify({"success": True, "members": svc.member_rows(members)})
