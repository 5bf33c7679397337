from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.web import admin_required, current_role, handle_domain_errors
from ..container import Container
from ..core.exceptions import InvalidInput
from ..ledger.model import LedgerFilter
from ..reports.overview import daily_overview, month_calendar


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    @handle_domain_errors
    def admin_login():
        data = request.get_json(silent=True) or {}
        role = container.admin_gate.login(data.get("pin", ""))
        session["role"] = role.value
        return jsonify({"success": True})

    @app.route("/api/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop("role", None)
        return jsonify({"success": True})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    @handle_domain_errors
    def add_employee():
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.add_employee(
            current_role=current_role(),
            name=data.get("name", ""),
            position=data.get("position", ""),
            gender=data.get("gender", "male"),
        )
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    @handle_domain_errors
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(current_role=current_role(), employee_id=employee_id)
        return jsonify({"success": True})

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @admin_required
    def list_leaves():
        return jsonify({"success": True, "leaves": [lv.to_dict() for lv in container.leave_service.list_leaves()]})

    @app.route("/api/leaves", methods=["POST"], endpoint="add_leave")
    @admin_required
    @handle_domain_errors
    def add_leave():
        data = request.get_json(silent=True) or {}
        leave = container.leave_service.add_leave(
            current_role=current_role(),
            employee_id=data.get("employee_id", ""),
            leave_date=data.get("date"),
            reason=data.get("reason", ""),
        )
        return jsonify({"success": True, "leave": leave.to_dict()}), 201

    @app.route("/api/leaves/<leave_id>", methods=["DELETE"], endpoint="delete_leave")
    @admin_required
    @handle_domain_errors
    def delete_leave(leave_id: str):
        container.leave_service.delete_leave(current_role=current_role(), leave_id=leave_id)
        return jsonify({"success": True})

    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    @admin_required
    def get_settings():
        return jsonify({"success": True, "settings": container.policy_service.get_policy().to_dict()})

    @app.route("/api/settings", methods=["PUT"], endpoint="update_settings")
    @admin_required
    @handle_domain_errors
    def update_settings():
        data = request.get_json(silent=True) or {}
        office = data.get("office_location") or {}
        policy = container.policy_service.update_policy(
            current_role=current_role(),
            work_start_time=data.get("work_start_time"),
            work_end_time=data.get("work_end_time"),
            office_lat=office.get("lat"),
            office_lng=office.get("lng"),
            geofence_radius_m=data.get("geofence_radius_m"),
        )
        return jsonify({"success": True, "settings": policy.to_dict()})

    @app.route("/api/ledger", methods=["GET"], endpoint="ledger")
    @admin_required
    @handle_domain_errors
    def ledger():
        rows = container.ledger_service.build_report(
            current_role=current_role(), ledger_filter=LedgerFilter.from_query(request.args)
        )
        return jsonify({"success": True, "rows": [r.to_dict() for r in rows]})

    @app.route("/api/ledger/export", methods=["GET"], endpoint="ledger_export")
    @admin_required
    @handle_domain_errors
    def ledger_export():
        rows = container.ledger_service.build_report(
            current_role=current_role(), ledger_filter=LedgerFilter.from_query(request.args)
        )
        export = container.ledger_service.export_ledger(rows, request.args.get("format", "csv"))
        return app.response_class(
            export.content,
            mimetype=export.mimetype,
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/overview", methods=["GET"], endpoint="overview")
    @admin_required
    def overview():
        day = parse_optional_date(request.args.get("date")) or now_local().date()
        return jsonify({"success": True, "overview": daily_overview(container.store.get_events(), day).to_dict()})

    @app.route("/api/calendar", methods=["GET"], endpoint="calendar")
    @handle_domain_errors
    def calendar_view():
        today = now_local().date()
        year = request.args.get("year", today.year, type=int)
        month = request.args.get("month", today.month, type=int)
        if not 1 <= month <= 12 or not 1 <= year <= 9999:
            raise InvalidInput("Invalid year or month")
        days = month_calendar(
            container.store.get_events(), container.store.get_leaves(), year, month, container.holidays
        )
        return jsonify({"success": True, "days": [d.to_dict() for d in days]})
