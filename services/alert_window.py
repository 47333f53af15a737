"""
Alert activity window.

An alert is active while ``start_date <= now <= end_date``; a missing
``start_date`` means the alert has always been started. ``is_active`` applies
the rule to a loaded record and ``active_clause`` expresses the same rule as a
SQL filter so the database can do the comparison.
"""

from datetime import datetime, timezone
from typing import Protocol

from sqlalchemy import ColumnElement, and_, or_

from database.models import GlobalAlert


class AlertWindow(Protocol):
    start_date: datetime | None
    end_date: datetime


def as_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC. Naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_active(alert: AlertWindow, now: datetime) -> bool:
    """Check whether ``alert`` should be shown at ``now``."""
    now = as_utc(now)
    if alert.start_date is not None and now < as_utc(alert.start_date):
        return False
    return now <= as_utc(alert.end_date)


def active_clause(now: datetime) -> ColumnElement[bool]:
    """SQL filter selecting alerts that are active at ``now``."""
    now = as_utc(now)
    return and_(
        or_(GlobalAlert.start_date.is_(None), GlobalAlert.start_date <= now),
        GlobalAlert.end_date >= now,
    )
