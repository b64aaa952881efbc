"""Configuration for the users API client."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Defaults to .env in the common-py project directory (apps/common-py/.env).

    Returns:
        Path to the .env file
    """
    # This file is in apps/common-py/src/common/config/client_config.py
    # So we go up 4 levels to get to apps/common-py/
    current_file = Path(__file__)
    common_py_dir = current_file.parent.parent.parent.parent
    default_env_file = common_py_dir / ".env"
    return str(default_env_file)


class UsersClientConfig(BaseSettings):
    """Users API client settings from environment variables."""

    users_api_base_url: str = "https://localhost:7025/"
    users_api_timeout: float = 30.0

    # Static bearer token; leave unset to send no Authorization header
    users_api_token: str | None = None

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
    )


def get_users_client_config() -> UsersClientConfig:
    """Get users client configuration.

    Returns:
        UsersClientConfig instance
    """
    return UsersClientConfig()
