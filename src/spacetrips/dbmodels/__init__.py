"""
Database models for Space Trips (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), onupdate=func.now()
    )

    trips: Mapped[list["Trips"]] = relationship("Trips", uselist=True, back_populates="user")

    def __repr__(self) -> str:
        return f"Users(id={self.id!r}, email={self.email!r})"


class Trips(Base):
    __tablename__ = "trips"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="trips_user_id_fkey"),
        PrimaryKeyConstraint("id", name="trips_pkey"),
        UniqueConstraint("user_id", "launch_id", name="trips_user_id_launch_id_key"),
        Index("idx_trips_user", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    launch_id: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.now(), onupdate=func.now()
    )

    user: Mapped["Users"] = relationship("Users", back_populates="trips")

    def __repr__(self) -> str:
        return f"Trips(id={self.id!r}, user_id={self.user_id!r}, launch_id={self.launch_id!r})"


target_metadata = Base.metadata

__all__ = ["Base", "Users", "Trips", "target_metadata"]
