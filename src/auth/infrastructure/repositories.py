from typing import Optional

from pydantic import ValidationError as SchemaError

from ..domain import (
    LoginCredentials, User, SessionStore, UserRepository,
    TOKEN_KEY, USERNAME_KEY, IS_LOGGED_IN_KEY,
)
from ...common.exceptions import ApiError, AuthError
from ...common.http import ApiClient
from ...common.logging import setup_logger
from ...common.schemas import LoginResponseSchema

logger = setup_logger(__name__)


class UserApiRepository(UserRepository):
    """
    Logs in against POST /auth/login and keeps the session in a SessionStore.
    """
    def __init__(self, api_client: ApiClient, session_store: SessionStore):
        self.api_client = api_client
        self.session_store = session_store

    def login(self, credentials: LoginCredentials) -> User:
        response = self.api_client.post('/auth/login', {
            'username': credentials.username,
            'password': credentials.password,
        })

        try:
            data = LoginResponseSchema.model_validate(response.data)
        except SchemaError as e:
            raise ApiError(f"Malformed login response: {e}", status=response.status) from e

        if not data.status or data.is_logged_in != 1:
            raise AuthError(data.message or 'Login failed')

        user = User.from_api_response(
            username=credentials.username,
            token=data.token,
            is_logged_in=data.is_logged_in,
        )
        self._store_user(user)
        logger.info(f"User {user.username} logged in")
        return user

    def logout(self) -> None:
        for key in (TOKEN_KEY, USERNAME_KEY, IS_LOGGED_IN_KEY):
            self.session_store.remove(key)

    def get_current_user(self) -> Optional[User]:
        token = self.session_store.get(TOKEN_KEY)
        username = self.session_store.get(USERNAME_KEY)
        is_logged_in = self.session_store.get(IS_LOGGED_IN_KEY)

        if not token or not username or is_logged_in != 'true':
            return None

        return User.from_api_response(username=username, token=token, is_logged_in=1)

    def is_authenticated(self) -> bool:
        user = self.get_current_user()
        return user.is_authenticated() if user else False

    def get_token(self) -> Optional[str]:
        return self.session_store.get(TOKEN_KEY)

    def _store_user(self, user: User) -> None:
        data = user.to_storage_data()
        self.session_store.set(TOKEN_KEY, data['token'])
        self.session_store.set(USERNAME_KEY, data['username'])
        self.session_store.set(IS_LOGGED_IN_KEY, str(data['isLoggedIn']).lower())
