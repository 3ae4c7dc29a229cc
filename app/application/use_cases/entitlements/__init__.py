"""Date-driven allowance, promotion and retirement entitlements.

The pass that turns due dates into notifications lives in
:mod:`app.application.use_cases.entitlements.check_due`.
"""

from .calculator import (
    DueWindow,
    DueWindows,
    add_months,
    build_due_windows,
    is_date_within_range,
    next_allowance_date,
    next_promotion_date,
    next_retirement_date,
    parse_calendar_date,
)
from .errors import (
    DateComputationError,
    EntitlementError,
    NotificationCreationError,
    PassError,
)

__all__ = [
    "DueWindow",
    "DueWindows",
    "add_months",
    "build_due_windows",
    "is_date_within_range",
    "next_allowance_date",
    "next_promotion_date",
    "next_retirement_date",
    "parse_calendar_date",
    "DateComputationError",
    "EntitlementError",
    "NotificationCreationError",
    "PassError",
]
