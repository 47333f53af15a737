"""
Per-user singleton documents: preferences, session state and saved searches.

Each table holds at most one row per user. The payload is stored as the raw
JSON text the client sent; interpretation happens on the way out.
"""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .user import User


class UserPreference(Base):
    """User preferences document."""

    __tablename__ = "user_preferences"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    payload: Mapped[str] = mapped_column(
        "preferences",
        Text,
        nullable=False,
        default="",
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="preferences",
    )

    def __repr__(self) -> str:
        return f"<UserPreference(user_id={self.user_id})>"


class UserSession(Base):
    """Saved UI session state."""

    __tablename__ = "user_sessions"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    payload: Mapped[str] = mapped_column(
        "session",
        Text,
        nullable=False,
        default="",
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="session",
    )

    def __repr__(self) -> str:
        return f"<UserSession(user_id={self.user_id})>"


class UserSavedSearches(Base):
    """Saved search definitions, stored verbatim."""

    __tablename__ = "user_saved_searches"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    payload: Mapped[str] = mapped_column(
        "saved_searches",
        Text,
        nullable=False,
        default="",
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="saved_searches",
    )

    def __repr__(self) -> str:
        return f"<UserSavedSearches(user_id={self.user_id})>"
