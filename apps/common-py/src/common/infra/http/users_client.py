"""REST client for a users API."""

import logging
from collections.abc import Callable
from typing import Any, NamedTuple

import requests
from requests.models import Response

from common.config.client_config import UsersClientConfig
from common.exceptions import UserNotFoundError
from common.models.user import User

logger = logging.getLogger(__name__)


class Route(NamedTuple):
    """HTTP method and path template of one logical call."""

    method: str
    path: str


ROUTES: dict[str, Route] = {
    "get_all": Route("GET", "/users"),
    "get_user": Route("GET", "/users/{user_id}"),
    "create_user": Route("POST", "/users"),
    "update_user": Route("PUT", "/users/{user_id}"),
    "delete_user": Route("DELETE", "/users/{user_id}"),
}


class UsersClient:
    """Infrastructure layer: REST API client for the users endpoints."""

    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str] | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize users client.

        Args:
            base_url: Base address prepended to every route path
            token_provider: Called before every request; its value is sent as a
                bearer token. No Authorization header is sent when omitted.
            timeout: Per-request timeout in seconds
            session: Session to send requests with. A new one is created if None.
        """
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_config(
        cls,
        config: UsersClientConfig | None = None,
        token_provider: Callable[[], str] | None = None,
    ) -> "UsersClient":
        """Create a client from configuration.

        Args:
            config: Client configuration. If None, will load from environment.
            token_provider: Overrides the static token from configuration

        Returns:
            UsersClient instance
        """
        if config is None:
            from common.config.client_config import get_users_client_config

            config = get_users_client_config()

        if token_provider is None and config.users_api_token:
            token = config.users_api_token
            token_provider = lambda: token  # noqa: E731

        return cls(
            base_url=config.users_api_base_url,
            token_provider=token_provider,
            timeout=config.users_api_timeout,
        )

    def __enter__(self) -> "UsersClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def _get_headers(self) -> dict[str, str]:
        """Get headers for one HTTP request.

        The token provider is consulted on every call so expiring tokens are
        picked up without rebuilding the client.

        Returns:
            Dictionary containing headers
        """
        headers = {"Accept": "application/json"}
        if self._token_provider is not None:
            headers["Authorization"] = f"Bearer {self._token_provider()}"
        return headers

    def _send(self, call: str, user_id: int | None = None, body: User | None = None) -> Response:
        """Send the request for a logical call and check its status.

        Args:
            call: Key into ROUTES
            user_id: Fills the ``{user_id}`` placeholder, if the route has one
            body: User sent as the JSON body

        Returns:
            Successful response

        Raises:
            UserNotFoundError: If the server answers 404
            requests.HTTPError: For any other non-success status
        """
        route = ROUTES[call]
        url = self._base_url + route.path.format(user_id=user_id)
        headers = self._get_headers()
        json_body: dict[str, Any] | None = body.model_dump() if body is not None else None

        logger.debug("%s %s", route.method, url)
        response = self._session.request(
            route.method,
            url,
            headers=headers,
            json=json_body,
            timeout=self._timeout,
        )

        if response.status_code == 404 and user_id is not None:
            raise UserNotFoundError(user_id)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError:
            logger.error("API error response for %s %s: HTTP %s %s", route.method, url, response.status_code, response.text)
            raise
        return response

    def get_all(self) -> list[User]:
        """List all users."""
        response = self._send("get_all")
        return [User.model_validate(item) for item in response.json()]

    def get_user(self, user_id: int) -> User:
        """Get a user by ID."""
        response = self._send("get_user", user_id=user_id)
        return User.model_validate(response.json())

    def create_user(self, user: User) -> User:
        """Create a user.

        Returns:
            The created user with the ID assigned by the server
        """
        response = self._send("create_user", body=user)
        return User.model_validate(response.json())

    def update_user(self, user_id: int, user: User) -> User:
        """Update a user's name and email."""
        response = self._send("update_user", user_id=user_id, body=user)
        return User.model_validate(response.json())

    def delete_user(self, user_id: int) -> None:
        """Delete a user."""
        self._send("delete_user", user_id=user_id)
