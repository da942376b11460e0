"""Timecard System package.

Feature modules (attendance, payroll, punches, justifications, ...) with a
thin Flask controller layer over service and repository layers. The daily
reconciler and the monthly aggregator are pure functions of their inputs.
"""
