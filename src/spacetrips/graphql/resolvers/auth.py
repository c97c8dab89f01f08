from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...auth.tokens import encode_token
from ...logging import get_logger

if TYPE_CHECKING:
    from ..context import RequestContext
    from ..types.user import User

logger = get_logger(__name__)


async def resolve_current_user(info: strawberry.Info) -> User | None:
    """Resolve the authenticated user, or None for anonymous requests."""
    from ..types.user import User as UserType

    context: RequestContext = info.context
    if context.user is None or not context.user.email:
        return None

    row = await context.user_api.find_or_create_user()
    if not row:
        return None
    return UserType.from_row(row)


async def login(info: strawberry.Info, email: str) -> str | None:
    """
    Log in (registering on first use) and return the login token.

    Returns None when the email is rejected or the user cannot be stored.
    """
    context: RequestContext = info.context
    user = await context.user_api.find_or_create_user(email)
    if not user:
        logger.info("Login failed")
        return None

    logger.info("User logged in", user_id=getattr(user, "id", None))
    return encode_token(email)
