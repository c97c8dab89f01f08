"""Login tokens and email validation.

Tokens are the base64 encoding of the user's email. This is a reversible
encoding, not a signature: anyone can mint a token for any address. It is
only suitable for the demo.
"""

from __future__ import annotations

import base64
import binascii
import re

# local@domain.tld with non-empty dot-separated domain labels
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")


def is_valid_email(email: str | None) -> bool:
    """Basic format check: a local part, ``@`` and a dot-delimited domain."""
    if not email:
        return False
    return _EMAIL_RE.match(email) is not None


def encode_token(email: str) -> str:
    """Encode an email into a login token."""
    return base64.b64encode(email.encode("utf-8")).decode("ascii")


def decode_token(token: str | None) -> str | None:
    """Decode a login token back into an email, or None if it is not valid base64."""
    if not token:
        return None
    try:
        return base64.b64decode(token.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
