"""Use case that scans every employee and notifies administrators about
allowances, promotions and retirements that fall due soon."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import date

from sqlalchemy.orm import Session

from app.application.use_cases.notifications.events import notify_admins
from app.config import Settings, get_settings
from app.domain.entities import (
    RELATED_TYPE_EMPLOYEE,
    Employee,
    EntitlementEvent,
    EntitlementKind,
)
from app.infrastructure.repositories import EmployeeRepository, NotificationRepository
from app.utils import today_in_app_timezone

from .calculator import (
    DueWindow,
    DueWindows,
    build_due_windows,
    next_allowance_date,
    next_promotion_date,
    next_retirement_date,
)
from .errors import DateComputationError, PassError

logger = logging.getLogger(__name__)


@dataclass
class EntitlementCheckSummary:
    """Counters describing one pass over the employee roster."""

    checked_on: date
    employees_scanned: int = 0
    events_due: int = 0
    already_notified: int = 0
    notifications_created: int = 0
    failed_deliveries: int = 0
    skipped_computations: int = 0
    failed_employees: int = 0

    def as_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["checked_on"] = self.checked_on.isoformat()
        return data


@dataclass(frozen=True)
class _EntitlementRule:
    kind: EntitlementKind
    title: str
    message: str
    compute: Callable[[Employee, date, Settings], date | None]
    window: Callable[[DueWindows], DueWindow]


_RULES: tuple[_EntitlementRule, ...] = (
    _EntitlementRule(
        kind=EntitlementKind.ALLOWANCE,
        title="Incremento salarial próximo",
        message="El empleado {name} tiene un incremento salarial pendiente para el {due_date}",
        compute=lambda employee, today, _: next_allowance_date(employee.hiring_date, today),
        window=lambda windows: windows.allowance,
    ),
    _EntitlementRule(
        kind=EntitlementKind.PROMOTION,
        title="Ascenso próximo",
        message="El empleado {name} tiene un ascenso pendiente para el {due_date}",
        compute=lambda employee, today, settings: next_promotion_date(
            employee.hiring_date, today, cycle_years=settings.promotion_cycle_years
        ),
        window=lambda windows: windows.promotion,
    ),
    _EntitlementRule(
        kind=EntitlementKind.RETIREMENT,
        title="Jubilación próxima",
        message="El empleado {name} se jubila el {due_date}",
        compute=lambda employee, _today, _settings: next_retirement_date(
            employee.retirement_date
        ),
        window=lambda windows: windows.retirement,
    ),
)


def employee_entitlement_dates(
    employee: Employee,
    *,
    today: date | None = None,
    settings: Settings | None = None,
) -> dict[str, date | None]:
    """Return the next due date of every entitlement kind for ``employee``.

    Kinds whose date cannot be computed are reported as ``None``.
    """

    settings = settings or get_settings()
    today = today or today_in_app_timezone()
    dates: dict[str, date | None] = {}
    for rule in _RULES:
        try:
            dates[rule.kind.value] = rule.compute(employee, today, settings)
        except DateComputationError:
            dates[rule.kind.value] = None
    return dates


def check_due_entitlements(
    session: Session,
    *,
    today: date | None = None,
    settings: Settings | None = None,
) -> EntitlementCheckSummary:
    """Run one full pass and return what it did.

    Errors tied to one employee are logged and the pass moves on. Anything
    that prevents the pass from running at all is raised as
    :class:`PassError`.
    """

    settings = settings or get_settings()
    today = today or today_in_app_timezone()
    windows = build_due_windows(
        today,
        allowance_months=settings.allowance_window_months,
        promotion_months=settings.promotion_window_months,
        retirement_months=settings.retirement_window_months,
    )
    summary = EntitlementCheckSummary(checked_on=today)

    logger.info(
        "Checking due entitlements on %s (allowances until %s, promotions until %s, "
        "retirements until %s)",
        today.isoformat(),
        windows.allowance.end.isoformat(),
        windows.promotion.end.isoformat(),
        windows.retirement.end.isoformat(),
    )

    try:
        employees = EmployeeRepository(session).list_for_entitlement_check()
    except Exception as exc:
        logger.exception("Could not load employees for the entitlement check")
        raise PassError("No se pudieron cargar los empleados") from exc

    for employee in employees:
        summary.employees_scanned += 1
        try:
            _check_employee(session, employee, windows, settings, summary)
        except Exception:
            session.rollback()
            summary.failed_employees += 1
            logger.exception(
                "Unexpected error while checking entitlements for employee %s",
                employee.id,
            )

    logger.info(
        "Entitlement check finished: %s employees, %s events due, %s already notified, "
        "%s notifications created, %s failed deliveries, %s skipped computations, "
        "%s failed employees",
        summary.employees_scanned,
        summary.events_due,
        summary.already_notified,
        summary.notifications_created,
        summary.failed_deliveries,
        summary.skipped_computations,
        summary.failed_employees,
    )
    return summary


def run_entitlement_check(session_factory: Callable[[], Session]) -> EntitlementCheckSummary:
    """Run a pass inside a session of its own."""

    session = session_factory()
    try:
        return check_due_entitlements(session)
    finally:
        session.close()


def _check_employee(
    session: Session,
    employee: Employee,
    windows: DueWindows,
    settings: Settings,
    summary: EntitlementCheckSummary,
) -> None:
    for rule in _RULES:
        try:
            due_date = rule.compute(employee, windows.today, settings)
        except DateComputationError as exc:
            summary.skipped_computations += 1
            logger.warning(
                "Skipping %s for employee %s: %s", rule.kind.value, employee.id, exc
            )
            continue

        if due_date is None or not rule.window(windows).contains(due_date):
            continue

        event = EntitlementEvent(employee_id=employee.id, kind=rule.kind, due_date=due_date)
        summary.events_due += 1
        if _already_notified(session, event):
            summary.already_notified += 1
            continue

        result = notify_admins(
            session,
            employee_id=event.employee_id,
            title=rule.title,
            message=rule.message.format(
                name=employee.full_name, due_date=event.due_date.isoformat()
            ),
            kind=event.kind.value,
            due_date=event.due_date,
        )
        summary.notifications_created += len(result.delivered)
        summary.failed_deliveries += len(result.failed_recipient_ids)
        logger.info(
            "Created %s %s notifications for employee %s due on %s",
            len(result.delivered),
            event.kind.value,
            event.employee_id,
            event.due_date.isoformat(),
        )


def _already_notified(session: Session, event: EntitlementEvent) -> bool:
    existing = NotificationRepository(session).find_for_entitlement(
        related_id=event.employee_id,
        notification_type=event.kind.value,
        related_type=RELATED_TYPE_EMPLOYEE,
        due_date=event.due_date,
    )
    return bool(existing)


__all__ = [
    "EntitlementCheckSummary",
    "check_due_entitlements",
    "employee_entitlement_dates",
    "run_entitlement_check",
]
