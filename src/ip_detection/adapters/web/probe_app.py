"""Starlette application exposing the identity probe endpoint."""

from __future__ import annotations

import logging

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ip_detection.adapters.config import AppConfig
from ip_detection.adapters.web.request_snapshot import snapshot_from_request
from ip_detection.application.services import IdentityProbeHandler

logger = logging.getLogger(__name__)

VERIFY_PATH = "/api/test/verify"


def create_app(config: AppConfig, handler: IdentityProbeHandler) -> Starlette:
    """Create the Starlette app with the verify route and CORS policy.

    Args:
        config: Application configuration.
        handler: Handler answering identity probe requests.
    """
    if not isinstance(config, AppConfig):
        raise TypeError("config must be an AppConfig instance")
    if not callable(getattr(handler, "handle", None)):
        raise TypeError("handler must provide a handle(snapshot) method")

    # Sync on purpose: Starlette runs it in the threadpool, off the event loop
    def verify(request: Request) -> JSONResponse:
        """Echo the client identity as perceived by this server."""
        snapshot = snapshot_from_request(request)
        result = handler.handle(snapshot)
        return JSONResponse(result.model_dump(by_alias=True, mode="json"))

    # CORS must wrap the HTTPS redirect
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=config.cors_allowed_origins,
            allow_credentials=config.cors_allow_credentials,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    ]
    if config.https_redirect:
        middleware.append(Middleware(HTTPSRedirectMiddleware))

    logger.info(
        f"Registering route at path '{VERIFY_PATH}' "
        f"(CORS origins={config.cors_allowed_origins}, https_redirect={config.https_redirect})"
    )
    return Starlette(
        routes=[Route(VERIFY_PATH, verify, methods=["GET"])],
        middleware=middleware,
    )
