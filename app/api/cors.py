"""
Cross-origin request gate.

Starlette's CORSMiddleware only decides which headers to add; it still runs
the handler for a simple request from any origin. OriginGateMiddleware sits
in front of it and refuses requests whose Origin is not on the allow-list,
so the handler never runs for them.
"""

import logging
from typing import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PATCH", "DELETE"]


class OriginGateMiddleware:
    """Reject requests whose Origin header is present but not allowed."""

    def __init__(self, app: ASGIApp, allowed_origins: Sequence[str]) -> None:
        self.app = app
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: str | None) -> bool:
        # No Origin means a same-origin or non-browser client.
        return not origin or origin in self.allowed_origins

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        if self.is_allowed(origin):
            await self.app(scope, receive, send)
            return

        logger.warning("Rejected %s %s from origin %s", scope["method"], scope["path"], origin)
        response = PlainTextResponse("Not Allowed By CORS", status_code=403)
        await response(scope, receive, send)


def install_cors(app: FastAPI, allowed_origins: Sequence[str]) -> None:
    """Add CORS headers for allowed origins and the gate in front of them."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )
    # Added last so it runs first.
    app.add_middleware(OriginGateMiddleware, allowed_origins=list(allowed_origins))
