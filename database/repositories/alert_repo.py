"""
Global alert repository.
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import GlobalAlert
from services.alert_window import active_clause, as_utc


class AlertRepository:
    """Repository for GlobalAlert model operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[GlobalAlert]:
        """List every alert, soonest-expiring first."""
        result = await self.session.execute(
            select(GlobalAlert).order_by(asc(GlobalAlert.end_date))
        )
        return list(result.scalars().all())

    async def list_active(self, now: datetime | None = None) -> list[GlobalAlert]:
        """List alerts whose window contains ``now`` (defaults to the current time)."""
        now = now or datetime.now(timezone.utc)
        result = await self.session.execute(
            select(GlobalAlert)
            .where(active_clause(now))
            .order_by(asc(GlobalAlert.end_date))
        )
        return list(result.scalars().all())

    async def create(
        self,
        end_date: datetime,
        alert: str,
        start_date: datetime | None = None,
    ) -> GlobalAlert:
        """Create a new alert. Dates are stored in UTC."""
        record = GlobalAlert(
            start_date=as_utc(start_date) if start_date else None,
            end_date=as_utc(end_date),
            alert=alert,
        )
        self.session.add(record)
        await self.session.flush()
        return record

    async def delete_matching(self, end_date: datetime, alert: str) -> int:
        """
        Delete every alert with this exact end date and text.

        Duplicates are all removed. Returns the number of rows deleted.
        """
        result = await self.session.execute(
            delete(GlobalAlert).where(
                GlobalAlert.end_date == as_utc(end_date),
                GlobalAlert.alert == alert,
            )
        )
        await self.session.flush()
        return result.rowcount

    async def delete_by_id(self, alert_id: UUID) -> bool:
        """Delete a single alert by its ID."""
        record = await self.session.get(GlobalAlert, alert_id)
        if not record:
            return False
        await self.session.delete(record)
        await self.session.flush()
        return True
