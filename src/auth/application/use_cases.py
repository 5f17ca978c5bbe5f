from typing import List

from ..domain import LoginCredentials, User, UserRepository
from ..infrastructure import jwt_utils
from ...common.exceptions import AuthError, ErrorCode, USER_MESSAGES, classify_error, log_error
from ...common.logging import setup_logger
from ...common.results import UseCaseResult
from ...common.validation import sanitize_string

logger = setup_logger(__name__)

LOGIN_FAILED_MESSAGE = "Username atau password salah."


class AuthUseCase:
    """
    Login, logout and session lookup for the dashboard.
    """
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def login(self, username: str, password: str) -> UseCaseResult[User]:
        errors = self.validate_credentials(username, password)
        if errors:
            return UseCaseResult.fail(", ".join(errors), ErrorCode.VALIDATION_ERROR.value)

        # Passwords are sent untouched
        credentials = LoginCredentials(username=sanitize_string(username), password=password)

        try:
            user = self.user_repository.login(credentials)
        except AuthError as e:
            logger.warning(f"Login rejected for {credentials.username}: {e}")
            return UseCaseResult.fail(LOGIN_FAILED_MESSAGE, ErrorCode.AUTH_ERROR.value)
        except Exception as e:
            return UseCaseResult.from_exception(e)

        return UseCaseResult.ok(user)

    def logout(self) -> UseCaseResult[None]:
        try:
            self.user_repository.logout()
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok()

    def get_current_user(self) -> UseCaseResult[User]:
        try:
            user = self.user_repository.get_current_user()
            if user is None:
                return UseCaseResult.fail("User not found", ErrorCode.AUTH_ERROR.value)
            if self._expire_session(user):
                return UseCaseResult.fail(USER_MESSAGES[ErrorCode.AUTH_ERROR], ErrorCode.AUTH_ERROR.value)
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok(user)

    def is_authenticated(self) -> bool:
        try:
            user = self.user_repository.get_current_user()
            if user is None or not user.is_authenticated():
                return False
            return not self._expire_session(user)
        except Exception as e:
            log_error(classify_error(e))
            return False

    def _expire_session(self, user: User) -> bool:
        """
        Clears the stored session when its JWT has expired.
        Opaque (non-JWT) tokens never expire client-side.
        """
        if not (jwt_utils.decode_token(user.token) and jwt_utils.is_token_expired(user.token)):
            return False
        logger.info(f"Session of {user.username} expired, clearing stored token")
        self.user_repository.logout()
        return True

    @staticmethod
    def validate_credentials(username: str, password: str) -> List[str]:
        errors = []
        if not username or not username.strip():
            errors.append("Username tidak boleh kosong")
        if not password or not password.strip():
            errors.append("Password tidak boleh kosong")
        if password and len(password) < 6:
            errors.append("Password minimal 6 karakter")
        if username and len(username) < 3:
            errors.append("Username minimal 3 karakter")
        return errors
