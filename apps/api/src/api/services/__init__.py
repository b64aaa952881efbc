"""Service initialization and dependency injection."""

import logging

from common.services.user_service import InMemoryUserService, UserService
from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def init_user_service(app: FastAPI) -> UserService:
    """Create the user store for this application instance.

    Args:
        app: FastAPI application instance

    Returns:
        The new, empty user service
    """
    app.state.user_service = InMemoryUserService()
    logger.info("Initialized InMemoryUserService")
    return app.state.user_service


def get_user_service(request: Request) -> UserService:
    """Get the user service owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserService instance
    """
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise RuntimeError("User service is not initialized; was the application lifespan started?")
    return service
