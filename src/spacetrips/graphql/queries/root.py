"""
Root GraphQL query definitions
"""

import strawberry

from ..types.launch import Launch, LaunchConnection
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def launches(
        self,
        info: strawberry.Info,
        page_size: int | None = None,
        after: str | None = None,
    ) -> LaunchConnection:
        """Get a page of launches, newest first.

        ``after`` is the cursor returned with the previous page.
        """
        from ..resolvers.launch import resolve_launches

        return await resolve_launches(info, after=after, page_size=page_size)

    @strawberry.field
    async def launch(self, info: strawberry.Info, id: strawberry.ID) -> Launch | None:
        """Get a launch by ID."""
        from ..resolvers.launch import resolve_launch

        return await resolve_launch(info, id)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the current authenticated user."""
        from ..resolvers.auth import resolve_current_user

        return await resolve_current_user(info)
