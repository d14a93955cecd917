"""
Pydantic schemas for values passed around inside the auth module.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    """Username/password pair decoded from a single request."""
    model_config = ConfigDict(frozen=True)

    username: str
    password: str = ""


class AuthResult(BaseModel):
    """Outcome of the gate: forward when allowed, otherwise reject with reason."""
    model_config = ConfigDict(frozen=True)

    allowed: bool
    reason: Optional[str] = None
