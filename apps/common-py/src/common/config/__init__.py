"""Configuration package."""

from common.config.client_config import UsersClientConfig, get_users_client_config

__all__ = ["UsersClientConfig", "get_users_client_config"]
