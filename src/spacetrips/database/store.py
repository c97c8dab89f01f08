"""
Relational store used by the trip ledger.

Each table exposes the three operations the business layer needs:
``find_or_create``, ``find_all`` and ``destroy``, all keyed by a ``where``
mapping of column attribute names to values.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from ..dbmodels import Base, Trips, Users
from ..logging import get_logger
from .connection import get_async_session

logger = get_logger(__name__)

RowT = TypeVar("RowT")
ModelT = TypeVar("ModelT", bound=Base)


@dataclass(frozen=True)
class FindOrCreateResult(Generic[RowT]):
    """Row returned by a find-or-create and whether it was inserted by this call."""

    row: RowT
    was_created: bool


class Table(Protocol[RowT]):
    """Store operations for a single table."""

    async def find_or_create(self, where: Mapping[str, Any]) -> FindOrCreateResult[RowT] | None:
        ...

    async def find_all(self, where: Mapping[str, Any]) -> Sequence[RowT]:
        ...

    async def destroy(self, where: Mapping[str, Any]) -> int:
        ...


class SqlTable(Generic[ModelT]):
    """SQLAlchemy-backed table; every call runs in its own session."""

    def __init__(self, model: type[ModelT]):
        self.model = model

    async def find_or_create(self, where: Mapping[str, Any]) -> FindOrCreateResult[ModelT]:
        """Return the row matching ``where``, inserting it first if absent.

        A concurrent insert of the same key loses on the unique constraint;
        the winner's row is then selected and returned with ``was_created=False``.
        """
        async with get_async_session() as session:
            existing = await self._select_one(session, where)
            if existing is not None:
                return FindOrCreateResult(row=existing, was_created=False)

            row = self.model(**where)
            session.add(row)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                existing = await self._select_one(session, where)
                if existing is None:
                    raise
                logger.debug(
                    "Concurrent insert detected, returning existing row",
                    table=self.model.__tablename__,
                )
                return FindOrCreateResult(row=existing, was_created=False)

            await session.refresh(row)
            logger.debug(
                "Created row",
                table=self.model.__tablename__,
                row_id=getattr(row, "id", None),
            )
            return FindOrCreateResult(row=row, was_created=True)

    async def find_all(self, where: Mapping[str, Any]) -> list[ModelT]:
        async with get_async_session() as session:
            stmt = select(self.model).filter_by(**where).order_by(self.model.id)
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def destroy(self, where: Mapping[str, Any]) -> int:
        """Delete rows matching ``where`` and return the affected row count."""
        async with get_async_session() as session:
            result = await session.execute(delete(self.model).filter_by(**where))
            return result.rowcount or 0

    async def _select_one(self, session, where: Mapping[str, Any]) -> ModelT | None:
        result = await session.execute(select(self.model).filter_by(**where).limit(1))
        return result.scalar_one_or_none()


@dataclass
class Store:
    """Handles to the ``users`` and ``trips`` tables."""

    users: Table[Any]
    trips: Table[Any]

    @classmethod
    def create(cls) -> Store:
        """Build the SQL-backed store on the shared connection pool."""
        return cls(users=SqlTable(Users), trips=SqlTable(Trips))
