"""
User model.

Users are provisioned by other services; this one only reads them.
"""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .bag import Bag
    from .preferences import UserPreference, UserSavedSearches, UserSession


class User(Base):
    """A user known to the platform, keyed by fully qualified username."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(512),
        unique=True,
        nullable=False,
    )

    # Relationships
    preferences: Mapped["UserPreference | None"] = relationship(
        "UserPreference",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    session: Mapped["UserSession | None"] = relationship(
        "UserSession",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    saved_searches: Mapped["UserSavedSearches | None"] = relationship(
        "UserSavedSearches",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    bags: Mapped[list["Bag"]] = relationship(
        "Bag",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
