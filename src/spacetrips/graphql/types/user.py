"""
User GraphQL type definitions
"""

from typing import Any

import strawberry

from .launch import Launch


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    email: str

    @strawberry.field
    async def trips(self, info: strawberry.Info) -> list[Launch]:
        """Launches the current user has booked."""
        from ..resolvers.user import resolve_user_trips

        return await resolve_user_trips(self, info)

    @classmethod
    def from_row(cls, row: Any) -> "User":
        return cls(id=strawberry.ID(str(row.id)), email=row.email)
