"""Authentication for Space Trips."""

from .context import AuthUser, resolve_auth_user
from .tokens import decode_token, encode_token, is_valid_email

__all__ = ["AuthUser", "resolve_auth_user", "decode_token", "encode_token", "is_valid_email"]
