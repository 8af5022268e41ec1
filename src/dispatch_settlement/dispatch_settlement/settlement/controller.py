from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date, parse_month
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .export import statements_to_csv, statements_to_excel

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    """Settlement endpoints.

    Login is handled outside this package; the session is expected to carry
    `role` and, for instructors, `instructor_id`.
    """

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "role" not in session:
                return _error("로그인이 필요합니다", 401)
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "role" not in session:
                return _error("로그인이 필요합니다", 401)
            if session.get("role") != Role.ADMIN.value:
                return _error("권한이 없습니다", 403)
            return view(*args, **kwargs)

        return wrapper

    def _instructor_id_param() -> str:
        instructor_id = (request.args.get("instructor_id") or "").strip()
        if session.get("role") != Role.ADMIN.value:
            own_id = str(session.get("instructor_id") or "")
            if instructor_id and instructor_id != own_id:
                raise AuthorizationError("다른 강사의 정산 내역은 조회할 수 없습니다")
            instructor_id = own_id
        return require_non_empty(instructor_id, "instructor_id")

    def _month_param() -> str:
        month = request.args.get("month") or ""
        parse_month(month)
        return month

    def _download(payload: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.errorhandler(AuthorizationError)
    def handle_forbidden(e: AuthorizationError):
        return _error(str(e), 403)

    @app.route("/api/settlements/daily", methods=["GET"], endpoint="api_settlement_daily")
    @login_required
    def api_settlement_daily():
        instructor_id = _instructor_id_param()
        day = parse_iso_date(request.args.get("date") or "")

        daily = container.settlement_service.daily_settlement(instructor_id=instructor_id, day=day)
        return jsonify({"success": True, "data": daily.to_dict()})

    @app.route("/api/settlements/monthly", methods=["GET"], endpoint="api_settlement_monthly")
    @login_required
    def api_settlement_monthly():
        instructor_id = _instructor_id_param()
        month = _month_param()

        monthly = container.settlement_service.monthly_settlement(instructor_id=instructor_id, month=month)
        if monthly is None:
            return jsonify({"success": True, "data": None, "message": "정산 데이터가 없습니다"})
        return jsonify({"success": True, "data": monthly.to_dict()})

    @app.route("/api/settlements/monthly/all", methods=["GET"], endpoint="api_settlement_monthly_all")
    @admin_required
    def api_settlement_monthly_all():
        month = _month_param()
        results = container.settlement_service.monthly_settlements(month=month)
        return jsonify(
            {
                "success": True,
                "month": month,
                "data": [m.to_dict(include_daily=False) for m in results],
            }
        )

    @app.route("/admin/settlements/statements.csv", methods=["GET"], endpoint="admin_statements_csv")
    @admin_required
    def admin_statements_csv():
        month = _month_param()
        rows = container.settlement_service.payment_statements(month=month)
        logger.info("Statement CSV export %s (%d rows)", month, len(rows))
        return _download(
            statements_to_csv(rows),
            mimetype="text/csv",
            filename=f"payment_statements_{month.replace('-', '')}.csv",
        )

    @app.route("/admin/settlements/statements.xlsx", methods=["GET"], endpoint="admin_statements_xlsx")
    @admin_required
    def admin_statements_xlsx():
        month = _month_param()
        rows = container.settlement_service.payment_statements(month=month)
        logger.info("Statement Excel export %s (%d rows)", month, len(rows))
        return _download(
            statements_to_excel(rows),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            filename=f"payment_statements_{month.replace('-', '')}.xlsx",
        )
