"""
User and booking ledger backed by the relational store.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..auth.context import AuthUser
from ..auth.tokens import is_valid_email
from ..database.store import Store
from ..logging import get_logger

logger = get_logger(__name__)


class UserAPI:
    """
    Users and their trips, scoped to the user making the request.

    Every trip operation implicitly uses the current user's id; without a
    current user nothing is booked, cancelled or listed.
    """

    def __init__(self, store: Store, user: AuthUser | None = None):
        self.store = store
        self.user = user

    async def find_or_create_user(self, email: str | None = None) -> Any | None:
        """
        Find the user with this email, creating it if needed.

        Falls back to the current user's email when none is given. Returns
        None for a missing or malformed email and when the store returns
        nothing.
        """
        if email is None and self.user is not None:
            email = self.user.email
        if not is_valid_email(email):
            logger.info("Rejected malformed email")
            return None

        result = await self.store.users.find_or_create(where={"email": email})
        if not result:
            return None
        if result.was_created:
            logger.info("Created user", user_id=result.row.id)
        return result.row

    async def book_trip(self, launch_id: Any) -> Any | None:
        if self.user is None:
            return None
        result = await self.store.trips.find_or_create(
            where={"launch_id": launch_id, "user_id": self.user.id}
        )
        if not result:
            return None
        return result.row

    async def book_trips(self, launch_ids: Iterable[Any]) -> list[Any]:
        """Book each launch in order; launches that fail to book are skipped."""
        results = []
        for launch_id in launch_ids:
            trip = await self.book_trip(launch_id)
            if trip:
                results.append(trip)
            else:
                logger.info("Could not book trip", launch_id=launch_id)
        return results

    async def cancel_trip(self, launch_id: Any) -> bool:
        if self.user is None:
            return False
        deleted = await self.store.trips.destroy(
            where={"launch_id": launch_id, "user_id": self.user.id}
        )
        return bool(deleted)

    async def get_launch_ids_by_user(self) -> list[Any]:
        if self.user is None:
            return []
        trips = await self.store.trips.find_all(where={"user_id": self.user.id})
        return [trip.launch_id for trip in trips or []]

    async def is_booked_on_launch(self, launch_id: Any) -> bool:
        if self.user is None:
            return False
        found = await self.store.trips.find_all(
            where={"user_id": self.user.id, "launch_id": launch_id}
        )
        return bool(found)
