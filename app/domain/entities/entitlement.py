"""Transient values produced by the entitlement scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class EntitlementKind(str, Enum):
    """Kinds of time-based entitlements tracked for employees."""

    ALLOWANCE = "allowance"
    PROMOTION = "promotion"
    RETIREMENT = "retirement"


@dataclass(frozen=True)
class EntitlementEvent:
    """The fact that ``kind`` falls due for an employee on ``due_date``.

    Events are recomputed on every pass and never stored; the notifications
    they produce are their only persisted trace.
    """

    employee_id: int
    kind: EntitlementKind
    due_date: date


__all__ = ["EntitlementEvent", "EntitlementKind"]
