"""Exceptions shared by the users service and the users client."""


class UserNotFoundError(Exception):
    """Raised when an operation addresses a user id that does not exist."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
