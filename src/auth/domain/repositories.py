"""
Domain repositories for the auth module.
"""
from typing import Optional, Protocol
from .entities import LoginCredentials, User

TOKEN_KEY = "token"
USERNAME_KEY = "username"
IS_LOGGED_IN_KEY = "isLoggedIn"


class SessionStore(Protocol):
    """
    Key/value store holding the current session (token, username, isLoggedIn).
    """
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...


class UserRepository(Protocol):
    def login(self, credentials: LoginCredentials) -> User:
        ...

    def logout(self) -> None:
        ...

    def get_current_user(self) -> Optional[User]:
        ...

    def is_authenticated(self) -> bool:
        ...
