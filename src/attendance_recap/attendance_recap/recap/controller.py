from __future__ import annotations

import csv
import io
from datetime import date
from typing import Optional, Tuple

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date
from ..common.web import json_errors, login_required
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..container import Container
from .model import RecapResult

_CSV_FIELDS = [
    "date",
    "kind",
    "in_code",
    "in_label",
    "in_detail",
    "out_code",
    "out_label",
    "out_detail",
    "late_minutes",
    "early_minutes",
    "duty_label",
    "is_manual",
    "manual_note",
]


def _truthy(v: Optional[str]) -> bool:
    return (v or "").strip().lower() in {"1", "true", "yes", "on"}


def _parse_range() -> Tuple[date, date]:
    try:
        start = parse_iso_date(request.args.get("start") or "")
        end = parse_iso_date(request.args.get("end") or "")
    except ValueError as e:
        raise ValidationError("start and end must be YYYY-MM-DD") from e
    return start, end


def _resolve_target(container: Container) -> Tuple[str, str]:
    """Subject and org unit the caller may look at.

    The org unit always comes from the subject itself, so a satker role can
    never reach users of another satker.
    """
    own_subject = str(session["user_id"])
    own_unit = str(session.get("org_unit_id") or "")
    subject_id = request.args.get("subject_id") or own_subject
    requested_unit = request.args.get("org_unit_id")

    role = session.get("role")
    if role not in {Role.SUPERADMIN.value, Role.SATKER_ADMIN.value, Role.SATKER_HEAD.value}:
        if subject_id != own_subject or (requested_unit and requested_unit != own_unit):
            raise AuthorizationError("Members may only view their own recap")
        return own_subject, own_unit

    subject_unit = container.users_repo.get_org_unit_id(subject_id)
    if subject_unit is None:
        raise NotFoundError("User not found")
    if role != Role.SUPERADMIN.value and (subject_unit != own_unit or (requested_unit and requested_unit != own_unit)):
        raise AuthorizationError("Recap of another satker is not allowed")
    if requested_unit and requested_unit != subject_unit:
        raise ValidationError("User does not belong to that satker")
    return subject_id, subject_unit


def _load(container: Container) -> RecapResult:
    start, end = _parse_range()
    subject_id, org_unit_id = _resolve_target(container)
    return container.recap_service.recap(
        subject_id=subject_id,
        org_unit_id=org_unit_id,
        start=start,
        end=end,
        show_today=_truthy(request.args.get("show_today")),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/recap", methods=["GET"], endpoint="api_recap")
    @login_required
    @json_errors
    def api_recap():
        result = _load(container)
        return jsonify({"success": True, "data": result.to_dict()})

    @app.route("/api/recap.csv", methods=["GET"], endpoint="api_recap_csv")
    @login_required
    @json_errors
    def api_recap_csv():
        result = _load(container)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS)
        writer.writeheader()
        for day in result.days:
            writer.writerow(
                {
                    "date": day.work_date.isoformat(),
                    "kind": day.kind.value,
                    "in_code": day.in_status.code.value if day.in_status else "",
                    "in_label": (day.in_status.label or "") if day.in_status else "",
                    "in_detail": (day.in_status.detail or "") if day.in_status else "",
                    "out_code": day.out_status.code.value if day.out_status else "",
                    "out_label": (day.out_status.label or "") if day.out_status else "",
                    "out_detail": (day.out_status.detail or "") if day.out_status else "",
                    "late_minutes": day.late_minutes if day.late_minutes is not None else "",
                    "early_minutes": day.early_minutes if day.early_minutes is not None else "",
                    "duty_label": day.duty_label or "",
                    "is_manual": "1" if day.is_manual else "0",
                    "manual_note": day.manual_note or "",
                }
            )

        filename = f"recap_{request.args.get('start')}_{request.args.get('end')}.csv"
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
