"""Staff Portal package.

Organized by feature modules (users, attendance, advances, payroll) with a
thin Flask controller layer over service/repository layers.
"""
