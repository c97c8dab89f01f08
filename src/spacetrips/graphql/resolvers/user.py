from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ..context import RequestContext
    from ..types.launch import Launch
    from ..types.user import User


async def resolve_user_trips(user: User, info: strawberry.Info) -> list[Launch]:
    """Resolve the launches booked by the requesting user."""
    from ..types.launch import Launch as LaunchType

    context: RequestContext = info.context
    launch_ids = await context.user_api.get_launch_ids_by_user()
    if not launch_ids:
        return []

    launches = await context.launch_api.get_launches_by_ids(launch_ids)
    return [LaunchType.from_model(launch) for launch in launches]
