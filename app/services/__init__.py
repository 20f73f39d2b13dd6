"""Services package for CHMS.

Only the dependency-free rule modules are re-exported here;
`vaccination_report` and `health_monitoring` are imported from their own modules.
"""

from .growth import assess_growth_status, build_growth_alert, calculate_bmi, classify_bmi
from .immunization_schedule import days_overdue, days_until_due, due_state

__all__ = [
    "assess_growth_status",
    "build_growth_alert",
    "calculate_bmi",
    "classify_bmi",
    "days_overdue",
    "days_until_due",
    "due_state",
]
