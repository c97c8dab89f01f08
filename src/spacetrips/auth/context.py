"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..logging import get_logger
from .tokens import decode_token, is_valid_email

if TYPE_CHECKING:
    from ..database.store import Store

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthUser:
    """The user a request is made on behalf of."""

    id: int
    email: str


def extract_token(authorization: str | None) -> str | None:
    """Return the token from an Authorization header, with or without a Bearer prefix."""
    if not authorization:
        return None
    if authorization.startswith("Bearer "):
        return authorization[7:].strip() or None
    return authorization.strip() or None


async def resolve_auth_user(authorization: str | None, store: Store) -> AuthUser | None:
    """
    Resolve the Authorization header to a user.

    The token is decoded into an email; a valid email is found or created in
    the store. Anything else yields an unauthenticated request.
    """
    email = decode_token(extract_token(authorization))
    if not is_valid_email(email):
        if authorization:
            logger.debug("Ignoring unusable authorization header")
        return None

    try:
        result = await store.users.find_or_create(where={"email": email})
    except Exception as e:
        logger.error("User lookup failed, treating request as anonymous", error=str(e))
        return None

    if result is None:
        return None

    return AuthUser(id=result.row.id, email=result.row.email)
