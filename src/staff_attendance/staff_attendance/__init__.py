"""Staff attendance & payroll package.

Organized by feature modules (employees, attendance, payroll, client) with a
thin Flask controller layer over service/repository layers.
"""
