"""
Bag models: free-form JSON documents owned by a user, plus the
one-per-user default bag designation.
"""

from typing import TYPE_CHECKING, Any
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, JSONType

if TYPE_CHECKING:
    from .user import User


class Bag(Base):
    """A user-owned JSON document. A user may have any number of bags."""

    __tablename__ = "bags"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    contents: Mapped[dict[str, Any]] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="bags",
    )

    def __repr__(self) -> str:
        return f"<Bag(id={self.id}, user_id={self.user_id})>"


class DefaultBag(Base):
    """Maps a user to the bag currently designated as their default."""

    __tablename__ = "default_bags"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    bag_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("bags.id", ondelete="CASCADE"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<DefaultBag(user_id={self.user_id}, bag_id={self.bag_id})>"


# Indexes
Index("idx_bags_user_id", Bag.user_id)
