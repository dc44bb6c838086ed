from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, session

from ..common.web import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tukin/<month>", methods=["GET"], endpoint="api_tukin")
    @login_required
    @json_errors
    def api_tukin(month: str):
        subject_id = str(session["user_id"])
        calc = container.tukin_service.get_calculation(subject_id=subject_id, month=month)
        rows = container.tukin_service.rows_for(calc)
        return jsonify(
            {
                "success": True,
                "data": {
                    "month": calc.month,
                    "base_tukin": calc.base_tukin,
                    "expected_units": calc.expected_units,
                    "earned_credit": calc.earned_credit,
                    "attendance_ratio": calc.attendance_ratio,
                    "final_tukin": calc.final_tukin,
                    "days": [asdict(r) for r in rows],
                },
            }
        )
