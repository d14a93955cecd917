"""
Runtime configuration for Secret Gate
=====================================

Simple settings module that reads from environment variables (only here),
and exposes a frozen `Settings` value for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.

Server
------
- PORT           : TCP port the server listens on (default 3000)

Basic auth
----------
- USERNAME       : expected Basic-Auth username (default "admin")
- PASSWORD       : expected Basic-Auth password (default "password")
- SECRET_MESSAGE : body returned by /secret on success

A `.env` file in the working directory is loaded first; variables already
present in the environment win over the file.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3000
DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "password"
DEFAULT_SECRET_MESSAGE = "This is the default secret."


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration. Read-only once built."""
    port: int = DEFAULT_PORT
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD
    secret_message: str = DEFAULT_SECRET_MESSAGE


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build a Settings value from the current environment.

    Args:
        dotenv (bool): Load `.env` before reading variables (never overrides
            variables that are already set).

    Returns:
        Settings: Frozen configuration snapshot.

    Notes:
        - Reads env **at call time** so tests can monkeypatch variables and
          build a fresh app without reloading modules.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    return Settings(
        port=_get_int("PORT", DEFAULT_PORT),
        username=os.getenv("USERNAME", DEFAULT_USERNAME),
        password=os.getenv("PASSWORD", DEFAULT_PASSWORD),
        secret_message=os.getenv("SECRET_MESSAGE", DEFAULT_SECRET_MESSAGE),
    )


settings = load_settings()
