"""
Contract Validation Module

Валидация JSON отчёта farey_approx по схеме.
"""

from .validators import REPORT_SCHEMA_PATH, validate_approximation_report

__all__ = [
    "REPORT_SCHEMA_PATH",
    "validate_approximation_report",
]
