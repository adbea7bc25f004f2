from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import int_arg, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salary", methods=["GET"], endpoint="salary")
    @login_required(container)
    def salary():
        report = container.salary_service.build_monthly_report(
            g.portal, year=int_arg("year"), month=int_arg("month")
        )
        return jsonify({
            "success": True,
            "currency": app.config.get("CURRENCY_SYMBOL", ""),
            **report.to_dict(),
        }), 200
