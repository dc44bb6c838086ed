from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import json_errors, login_required
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container
from .badge import BadgeViewer


def _current_role() -> Role:
    try:
        return Role(session.get("role"))
    except ValueError as e:
        raise ValidationError("Unknown role in session") from e


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave/badge", methods=["GET"], endpoint="api_leave_badge")
    @login_required
    @json_errors
    def api_leave_badge():
        viewer = BadgeViewer(
            subject_id=str(session["user_id"]),
            org_unit_id=session.get("org_unit_id"),
            role=_current_role(),
        )
        force = request.args.get("refresh") == "1"
        return jsonify({"success": True, "count": container.leave_badge.count(viewer, force=force)})

    @app.route("/api/leave/<leave_id>/decision", methods=["POST"], endpoint="api_leave_decision")
    @login_required
    @json_errors
    def api_leave_decision(leave_id: str):
        data = request.get_json(silent=True) or {}
        decision = str(data.get("decision") or "").strip().upper()
        note = str(data.get("note") or "")

        kwargs = dict(
            current_role=_current_role(),
            current_org_unit_id=session.get("org_unit_id"),
            decided_by=str(session["user_id"]),
            leave_id=leave_id,
            decision_note=note,
        )
        if decision == "APPROVE":
            container.leave_service.approve(**kwargs)
            outcome = "approved"
        elif decision == "REJECT":
            container.leave_service.reject(**kwargs)
            outcome = "rejected"
        else:
            raise ValidationError("decision must be APPROVE or REJECT")

        return jsonify({"success": True, "message": f"Leave {leave_id} {outcome}"})
