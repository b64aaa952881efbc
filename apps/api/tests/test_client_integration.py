"""Integration tests: UsersClient against a live Users API.

Starts the application with uvicorn on a free local port.

Run with: pytest apps/api/tests/test_client_integration.py -v -m integration
"""

import socket
import threading
import time
from collections.abc import Iterator

import pytest
import uvicorn
from api.main import app
from common.exceptions import UserNotFoundError
from common.infra.http.users_client import UsersClient
from common.models.user import User

# Mark all tests in this file as integration tests
pytestmark = pytest.mark.integration


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def base_url() -> Iterator[str]:
    """Run the app in a background thread for the duration of one test."""
    port = _free_port()
    server = uvicorn.Server(uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            pytest.fail("uvicorn did not start")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}/"

    server.should_exit = True
    thread.join(timeout=10)


class TestUsersClientIntegration:
    """UsersClient round trips through the real HTTP stack."""

    def test_end_to_end_lifecycle(self, base_url):
        with UsersClient(base_url) as client:
            created = client.create_user(User(name="A", email="a@x.com"))
            assert created.id == 1

            client.update_user(1, User(name="B", email="b@x.com"))
            assert client.get_user(1) == User(id=1, name="B", email="b@x.com")
            assert client.get_all() == [User(id=1, name="B", email="b@x.com")]

            client.delete_user(1)
            with pytest.raises(UserNotFoundError):
                client.get_user(1)
            with pytest.raises(UserNotFoundError):
                client.delete_user(1)

    def test_bearer_token_is_accepted(self, base_url):
        calls = []

        def token_provider() -> str:
            calls.append(1)
            return f"token-{len(calls)}"

        with UsersClient(base_url, token_provider=token_provider) as client:
            client.get_all()
            client.create_user(User(name="A", email="a@x.com"))

        assert len(calls) == 2
