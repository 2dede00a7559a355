"""HR payroll package.

Organized by feature modules (employees, attendance, auth, payroll) with a thin
Flask controller layer over service/repository layers.
"""
