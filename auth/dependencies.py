"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() to protect endpoints.
"""

from typing import Callable, Optional

from fastapi import Header

from secret_gate.config import Settings
from .service import AuthenticationError, check_basic_auth


def require_basic_auth(settings: Settings) -> Callable[..., None]:
    """
    Build a dependency that guards a route with the Basic-Auth gate.

    Args:
        settings (Settings): Configuration the gate checks against.

    Returns:
        Callable: Dependency that returns None when the request may proceed
        and raises AuthenticationError otherwise.

    LLM Prompt Example:
        "Show how to bind injected configuration into a FastAPI dependency
        instead of reading module-level globals."
    """

    def dependency(authorization: Optional[str] = Header(None)) -> None:
        result = check_basic_auth(settings, authorization)
        if not result.allowed:
            raise AuthenticationError(result.reason)

    return dependency
