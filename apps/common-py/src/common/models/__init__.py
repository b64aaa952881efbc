"""Common models package."""

from common.models.user import User

__all__ = ["User"]
