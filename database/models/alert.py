"""
Global alert model for service-wide announcements.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class GlobalAlert(Base):
    """
    A service-wide alert shown between ``start_date`` and ``end_date``.

    A null ``start_date`` means the alert is live as soon as it is created.
    """

    __tablename__ = "global_alerts"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    start_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    alert: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<GlobalAlert(end_date={self.end_date}, alert={self.alert!r})>"


# Indexes
Index("idx_global_alerts_end_date", GlobalAlert.end_date)
