"""
Domain entities for the auth module.
"""
from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class LoginCredentials:
    username: str
    password: str


@dataclass(frozen=True)
class User:
    """
    The logged-in dashboard user.
    The lalin API does not return a user id, so it is always 1.
    """
    id: int
    username: str
    token: str
    is_logged_in: bool = True

    @classmethod
    def from_api_response(cls, username: str, token: str, is_logged_in: int, id: int = 1) -> "User":
        return cls(id=id, username=username, token=token, is_logged_in=is_logged_in == 1)

    def is_authenticated(self) -> bool:
        return self.is_logged_in and bool(self.token)

    def to_storage_data(self) -> Dict[str, Union[int, str, bool]]:
        return {
            "id": self.id,
            "username": self.username,
            "token": self.token,
            "isLoggedIn": self.is_logged_in,
        }
