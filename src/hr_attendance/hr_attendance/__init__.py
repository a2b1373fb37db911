"""HR attendance backend package.

Organized by feature modules (attendance, employees, notifications) with a thin
Flask controller layer over service/repository layers.
"""
