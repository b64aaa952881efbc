"""Infrastructure layer for external communication."""

from common.infra.http.users_client import UsersClient

__all__ = ["UsersClient"]
