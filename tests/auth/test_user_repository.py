import pytest

from src.auth.domain import LoginCredentials
from src.auth.infrastructure import InMemorySessionStore, UserApiRepository
from src.common.exceptions import ApiError, AuthError
from src.common.http import ApiResponse


@pytest.fixture
def store():
    return InMemorySessionStore()


def _login_response(**overrides):
    data = {"status": True, "message": "Login Berhasil", "code": 200, "is_logged_in": 1, "token": "tok-123"}
    data.update(overrides)
    return ApiResponse(data=data, status=200)


def test_login_stores_session(mock_api_client, store):
    mock_api_client.post.return_value = _login_response()

    user = UserApiRepository(mock_api_client, store).login(LoginCredentials("admin", "secret123"))

    mock_api_client.post.assert_called_once_with('/auth/login', {'username': 'admin', 'password': 'secret123'})
    assert user.token == "tok-123"
    assert user.is_authenticated()
    assert store.get("token") == "tok-123"
    assert store.get("username") == "admin"
    assert store.get("isLoggedIn") == "true"


@pytest.mark.parametrize("overrides", [
    {"status": False, "message": "Username atau password salah"},
    {"is_logged_in": 0},
])
def test_login_rejected(mock_api_client, store, overrides):
    mock_api_client.post.return_value = _login_response(**overrides)

    with pytest.raises(AuthError):
        UserApiRepository(mock_api_client, store).login(LoginCredentials("admin", "secret123"))
    assert store.get("token") is None


def test_login_malformed_response(mock_api_client, store):
    mock_api_client.post.return_value = ApiResponse(data={"status": "maybe"}, status=200)

    with pytest.raises(ApiError):
        UserApiRepository(mock_api_client, store).login(LoginCredentials("admin", "secret123"))


def test_current_user_round_trip(mock_api_client, store):
    mock_api_client.post.return_value = _login_response()
    repository = UserApiRepository(mock_api_client, store)
    repository.login(LoginCredentials("admin", "secret123"))

    user = repository.get_current_user()

    assert user.username == "admin"
    assert repository.is_authenticated()
    assert repository.get_token() == "tok-123"


def test_logout_clears_session(mock_api_client, store):
    store.set("token", "tok")
    store.set("username", "admin")
    store.set("isLoggedIn", "true")
    repository = UserApiRepository(mock_api_client, store)

    repository.logout()

    assert repository.get_current_user() is None
    assert not repository.is_authenticated()


def test_current_user_requires_logged_in_flag(mock_api_client):
    store = InMemorySessionStore({"token": "tok", "username": "admin", "isLoggedIn": "false"})

    assert UserApiRepository(mock_api_client, store).get_current_user() is None
