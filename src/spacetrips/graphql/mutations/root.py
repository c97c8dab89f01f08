"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.launch import TripUpdateResponse


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="bookTrips")
    async def book_trips(
        self, info: strawberry.Info, launch_ids: list[strawberry.ID | None]
    ) -> TripUpdateResponse:
        """Book the current user onto one or more launches."""
        from ..resolvers.trip import book_trips

        return await book_trips(info, launch_ids)

    @strawberry.mutation(name="cancelTrip")
    async def cancel_trip(self, info: strawberry.Info, launch_id: strawberry.ID) -> TripUpdateResponse:
        """Cancel the current user's trip on a launch."""
        from ..resolvers.trip import cancel_trip

        return await cancel_trip(info, launch_id)

    @strawberry.mutation
    async def login(self, info: strawberry.Info, email: str | None = None) -> str | None:
        """Log in with an email and receive a login token."""
        from ..resolvers.auth import login

        if email is None:
            return None
        return await login(info, email)
