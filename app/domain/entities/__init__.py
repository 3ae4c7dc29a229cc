"""Domain entities exposed by the application."""

from .allowance_promotion import (
    ORDER_STATUS_COMPLETED,
    ORDER_STATUS_PENDING,
    ORDER_STATUS_REJECTED,
    ORDER_STATUSES,
    AllowancePromotion,
)
from .appreciation import (
    APPRECIATION_TYPE_APPRECIATION,
    APPRECIATION_TYPE_DISCIPLINARY,
    APPRECIATION_TYPES,
    SERVICE_MONTHS_BY_LETTER,
    Appreciation,
)
from .catalog import EducationalQualification, JobTitle, Workplace
from .employee import EMPLOYEE_STATUS_ACTIVE, Employee, build_full_name
from .entitlement import EntitlementEvent, EntitlementKind
from .notification import (
    NOTIFICATION_TYPE_ALLOWANCE,
    NOTIFICATION_TYPE_PROMOTION,
    NOTIFICATION_TYPE_RETIREMENT,
    NOTIFICATION_TYPE_TEST,
    NOTIFICATION_TYPE_WARNING,
    RELATED_TYPE_EMPLOYEE,
    Notification,
)
from .role import ROLE_ADMIN, ROLE_MANAGER, ROLE_USER, Role
from .user import ADMINISTRATIVE_ROLE_ALIASES, User

__all__ = [
    "AllowancePromotion",
    "ORDER_STATUS_PENDING",
    "ORDER_STATUS_COMPLETED",
    "ORDER_STATUS_REJECTED",
    "ORDER_STATUSES",
    "Appreciation",
    "APPRECIATION_TYPE_APPRECIATION",
    "APPRECIATION_TYPE_DISCIPLINARY",
    "APPRECIATION_TYPES",
    "SERVICE_MONTHS_BY_LETTER",
    "EducationalQualification",
    "JobTitle",
    "Workplace",
    "Employee",
    "EMPLOYEE_STATUS_ACTIVE",
    "build_full_name",
    "EntitlementEvent",
    "EntitlementKind",
    "Notification",
    "NOTIFICATION_TYPE_ALLOWANCE",
    "NOTIFICATION_TYPE_PROMOTION",
    "NOTIFICATION_TYPE_RETIREMENT",
    "NOTIFICATION_TYPE_TEST",
    "NOTIFICATION_TYPE_WARNING",
    "RELATED_TYPE_EMPLOYEE",
    "Role",
    "ROLE_ADMIN",
    "ROLE_MANAGER",
    "ROLE_USER",
    "User",
    "ADMINISTRATIVE_ROLE_ALIASES",
]
