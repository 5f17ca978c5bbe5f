import pytest

from src.auth.infrastructure import jwt_utils

NOW = 1_700_000_000


@pytest.mark.parametrize("token", ["", "opaque", "a.b", "a.!!!.c"])
def test_decode_invalid(token):
    assert jwt_utils.decode_token(token) is None


def test_decode_payload(make_token):
    assert jwt_utils.decode_token(make_token({"sub": "admin", "exp": NOW}))["sub"] == "admin"


def test_expired(make_token):
    assert jwt_utils.is_token_expired(make_token({"exp": NOW - 1}), now=NOW)
    assert not jwt_utils.is_token_expired(make_token({"exp": NOW + 1}), now=NOW)
    assert jwt_utils.is_token_expired(make_token({"sub": "no exp"}), now=NOW)


def test_minutes_until_expiration(make_token):
    assert jwt_utils.minutes_until_expiration(make_token({"exp": NOW + 600}), now=NOW) == 10
    assert jwt_utils.minutes_until_expiration(make_token({"exp": NOW - 600}), now=NOW) == 0


def test_expiring_soon(make_token):
    assert jwt_utils.is_token_expiring_soon(make_token({"exp": NOW + 240}), now=NOW)
    assert not jwt_utils.is_token_expiring_soon(make_token({"exp": NOW + 600}), now=NOW)
    assert jwt_utils.is_token_expiring_soon("opaque", now=NOW)


@pytest.mark.parametrize("seconds,expected", [
    (-10, "Expired"),
    (45 * 60, "45 menit"),
    (2 * 3600, "2 jam"),
    (2 * 3600 + 15 * 60, "2 jam 15 menit"),
])
def test_format_time_until_expiration(make_token, seconds, expected):
    token = make_token({"exp": NOW + seconds})
    assert jwt_utils.format_time_until_expiration(token, now=NOW) == expected
