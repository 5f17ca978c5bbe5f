import time

import pytest
from unittest.mock import MagicMock

from src.auth.application import AuthUseCase
from src.auth.application.use_cases import LOGIN_FAILED_MESSAGE
from src.auth.domain import User
from src.common.exceptions import AuthError, ErrorCode, NetworkError


@pytest.fixture
def repository():
    return MagicMock()


def test_login_success(repository):
    user = User(id=1, username="admin", token="tok")
    repository.login.return_value = user

    result = AuthUseCase(repository).login(" admin ", "secret123")

    assert result.success
    assert result.data == user
    credentials = repository.login.call_args.args[0]
    assert credentials.username == "admin"
    assert credentials.password == "secret123"


@pytest.mark.parametrize("username,password,message", [
    ("", "", "Username tidak boleh kosong, Password tidak boleh kosong"),
    ("admin", "123", "Password minimal 6 karakter"),
    ("ad", "secret123", "Username minimal 3 karakter"),
])
def test_login_validation(repository, username, password, message):
    result = AuthUseCase(repository).login(username, password)

    assert not result.success
    assert result.error == message
    assert result.error_code == ErrorCode.VALIDATION_ERROR.value
    repository.login.assert_not_called()


def test_login_rejected(repository):
    repository.login.side_effect = AuthError("Login failed")

    result = AuthUseCase(repository).login("admin", "wrongpass")

    assert result.error == LOGIN_FAILED_MESSAGE
    assert result.error_code == ErrorCode.AUTH_ERROR.value


def test_login_network_error(repository):
    repository.login.side_effect = NetworkError("Request timeout", timeout=True)

    result = AuthUseCase(repository).login("admin", "secret123")

    assert result.error_code == ErrorCode.NETWORK_ERROR.value


def test_logout(repository):
    assert AuthUseCase(repository).logout().success
    repository.logout.assert_called_once_with()


def test_get_current_user_missing(repository):
    repository.get_current_user.return_value = None

    result = AuthUseCase(repository).get_current_user()

    assert not result.success
    assert result.error_code == ErrorCode.AUTH_ERROR.value


def test_get_current_user_with_opaque_token(repository):
    repository.get_current_user.return_value = User(id=1, username="admin", token="opaque")

    assert AuthUseCase(repository).get_current_user().success


def test_get_current_user_expired_jwt(repository, make_token):
    token = make_token({"exp": time.time() - 60})
    repository.get_current_user.return_value = User(id=1, username="admin", token=token)

    result = AuthUseCase(repository).get_current_user()

    assert result.error == "Sesi Anda telah berakhir. Silakan login kembali."
    repository.logout.assert_called_once_with()


def test_get_current_user_valid_jwt(repository, make_token):
    token = make_token({"exp": time.time() + 3600})
    repository.get_current_user.return_value = User(id=1, username="admin", token=token)

    assert AuthUseCase(repository).get_current_user().data.username == "admin"


def test_is_authenticated_swallows_store_errors(repository):
    repository.get_current_user.side_effect = OSError("disk")

    assert AuthUseCase(repository).is_authenticated() is False


def test_is_authenticated_with_valid_jwt(repository, make_token):
    token = make_token({"exp": time.time() + 3600})
    repository.get_current_user.return_value = User(id=1, username="admin", token=token)

    assert AuthUseCase(repository).is_authenticated() is True
    repository.logout.assert_not_called()


def test_is_authenticated_clears_expired_session(repository, make_token):
    token = make_token({"exp": time.time() - 3600})
    repository.get_current_user.return_value = User(id=1, username="admin", token=token)

    assert AuthUseCase(repository).is_authenticated() is False
    repository.logout.assert_called_once_with()


def test_is_authenticated_without_session(repository):
    repository.get_current_user.return_value = None

    assert AuthUseCase(repository).is_authenticated() is False
    repository.logout.assert_not_called()
