"""Workforce Metrics package.

Attendance classification, productivity metrics and project health for a
multi-tenant workforce application. Organized by feature modules
(attendance, tasks, performance, ...) with a thin Flask controller layer over
service/repository layers.
"""
