"""
Main API module for Secret Gate.

Responsibilities:
    - Expose a public greeting at GET /
    - Expose GET /secret behind HTTP Basic Auth, returning the configured secret
    - Translate gate rejections into 401 plain-text responses with a challenge

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - Settings are an immutable value passed into the factory and the gate;
      nothing reads the environment after startup.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from auth.config import CHALLENGE_HEADERS
from auth.dependencies import require_basic_auth
from auth.service import AuthenticationError
from secret_gate.config import Settings, settings as default_settings

GREETING = "Hello, world!"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        settings (Optional[Settings]): Configuration to serve with. Defaults to
            the settings loaded from the environment at startup.

    Returns:
        FastAPI: A fully configured application instance.

    Why an app factory?
        - Enables per-test isolation in pytest with injected credentials.
        - Avoids hidden global state across workers/processes.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Secret Gate",
        description="Greeting endpoint plus a secret guarded by HTTP Basic Auth",
        docs_url="/docs",
    )
    log = logging.getLogger("secret_gate")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    log.info("Secret Gate configured for port %s", settings.port)

    @app.exception_handler(AuthenticationError)
    async def auth_error_handler(request: Request, exc: AuthenticationError) -> PlainTextResponse:
        return PlainTextResponse(exc.reason, status_code=401, headers=CHALLENGE_HEADERS)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/", response_class=PlainTextResponse)
    def hello() -> str:
        """Public greeting; ignores any request headers."""
        return GREETING

    @app.get(
        "/secret",
        response_class=PlainTextResponse,
        dependencies=[Depends(require_basic_auth(settings))],
    )
    def secret() -> str:
        """
        Return the configured secret message.

        Only reached when the Basic-Auth dependency lets the request through;
        rejections short-circuit to the AuthenticationError handler (401).
        """
        return settings.secret_message

    return app


# `uvicorn main:app` and `from main import app` continue to work.
app = create_app()


def run() -> None:
    """
    Serve the app on the configured port and emit the startup notice.

    The notice is logged before the socket is bound; uvicorn reports the bind
    itself ("Uvicorn running on ...") or exits if the port is taken.
    """
    logging.basicConfig(level=logging.INFO)
    logging.getLogger("secret_gate").info("Starting server on port %s", default_settings.port)
    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)


if __name__ == "__main__":
    run()
