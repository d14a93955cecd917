"""
Core authentication logic.

This module decides whether a single request's Authorization header matches
the configured username/password. `check_basic_auth` is a pure function of
(settings, header) so it can be tested without a running server.
"""

import logging
from typing import Optional

from secret_gate.config import Settings
from .config import AUTH_REQUIRED, INVALID_CREDENTIALS
from .schemas import AuthResult
from .utils import decode_basic_credentials

log = logging.getLogger("secret_gate.auth")


class AuthenticationError(Exception):
    """Raised by the route dependency when the gate rejects a request."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def check_basic_auth(settings: Settings, header: Optional[str]) -> AuthResult:
    """
    Evaluate an Authorization header against the configured credentials.

    Args:
        settings (Settings): Expected username and password.
        header (Optional[str]): Raw `Authorization` header value, None if absent.

    Returns:
        AuthResult: allowed=True to forward, otherwise allowed=False with the
        client-facing reason ("Authentication required." for a missing or
        malformed header, "Invalid credentials." for a mismatch).

    Notes:
        - Plain string equality, case-sensitive, no trimming.
        - Comparison is not constant-time.
    """
    credentials = decode_basic_credentials(header)
    if credentials is None:
        log.debug("Basic auth rejected: missing or malformed header")
        return AuthResult(allowed=False, reason=AUTH_REQUIRED)

    if credentials.username == settings.username and credentials.password == settings.password:
        return AuthResult(allowed=True)

    log.info("Basic auth rejected for user %r", credentials.username)
    return AuthResult(allowed=False, reason=INVALID_CREDENTIALS)
