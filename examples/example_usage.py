"""Example: call the service layer directly (no Flask).

Prints the current month's salary breakdown for the staff member linked to
the given login.
"""

import importlib
import sys

from config import get_settings_module

from src.staff_portal.staff_portal.container import build_container


def main(email: str, password: str) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    user = container.auth_service.authenticate(email, password)
    portal = container.auth_service.resolve_session(user.user_id)
    report = container.salary_service.build_monthly_report(portal)
    print(report.to_dict())


if __name__ == "__main__":
    main(*sys.argv[1:3])
