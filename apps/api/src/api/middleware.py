"""Middleware setup for the Users API."""

import logging

from api.config import Settings
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

DEV_ENVIRONMENTS = {"development", "dev", "local"}
DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_allowed_origins(settings: Settings) -> list[str]:
    """Get list of allowed CORS origins for the given settings.

    The configured UI URL is allowed over both http and https. Development
    environments additionally allow the usual local dev-server origins.

    Args:
        settings: Application settings

    Returns:
        List of allowed origin URLs, without duplicates
    """
    origins: list[str] = []

    if settings.ui_url:
        ui_url = settings.ui_url.rstrip("/")
        origins.append(ui_url)
        for scheme, other in (("http://", "https://"), ("https://", "http://")):
            if ui_url.startswith(scheme):
                origins.append(ui_url.replace(scheme, other, 1))

    if settings.environment.lower() in DEV_ENVIRONMENTS:
        origins.extend(DEV_ORIGINS)

    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, settings: Settings) -> dict[str, str]:
    """Get CORS headers for responses built outside the middleware.

    Args:
        origin: The origin from the request header
        settings: Application settings

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin or origin not in get_allowed_origins(settings):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "*",
        "Access-Control-Allow-Headers": "*",
    }


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    allowed_origins = get_allowed_origins(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, settings.environment)
