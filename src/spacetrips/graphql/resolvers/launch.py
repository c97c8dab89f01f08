from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...pagination import DEFAULT_PAGE_SIZE

if TYPE_CHECKING:
    from ..context import RequestContext
    from ..types.launch import Launch, LaunchConnection

logger = get_logger(__name__)


async def resolve_launches(
    info: strawberry.Info, after: str | None = None, page_size: int | None = DEFAULT_PAGE_SIZE
) -> LaunchConnection:
    """Resolve a page of launches, newest first."""
    from ..types.launch import Launch as LaunchType
    from ..types.launch import LaunchConnection as LaunchConnectionType

    context: RequestContext = info.context
    page = await context.launch_api.get_paginated_launches(after=after, page_size=page_size)

    return LaunchConnectionType(
        cursor=page.cursor,
        has_more=page.has_more,
        launches=[LaunchType.from_model(launch) for launch in page.launches],
    )


async def resolve_launch(info: strawberry.Info, id: strawberry.ID) -> Launch | None:
    from ..types.launch import Launch as LaunchType

    context: RequestContext = info.context
    launch = await context.launch_api.get_launch_by_id(id)
    if launch is None:
        logger.info("Launch not found", launch_id=id)
        return None
    return LaunchType.from_model(launch)


async def resolve_launch_is_booked(launch: Launch, info: strawberry.Info) -> bool:
    context: RequestContext = info.context
    if context.user is None:
        return False
    return await context.user_api.is_booked_on_launch(int(launch.id))
