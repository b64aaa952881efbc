"""Common services package."""

from common.services.user_service import InMemoryUserService, UserService

__all__ = [
    "InMemoryUserService",
    "UserService",
]
