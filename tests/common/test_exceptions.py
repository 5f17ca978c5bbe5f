import pytest

from src.common.exceptions import (
    ApiError, AuthError, ErrorCode, NetworkError, NOT_FOUND_MESSAGE, USER_MESSAGES,
    ValidationError, classify_error, user_friendly_message,
)


@pytest.mark.parametrize("status,code", [
    (401, ErrorCode.AUTH_ERROR),
    (403, ErrorCode.AUTH_ERROR),
    (404, ErrorCode.API_ERROR),
    (500, ErrorCode.API_ERROR),
    (502, ErrorCode.API_ERROR),
])
def test_classify_http_status(status, code):
    error = classify_error(ApiError("failed", status=status, payload={"message": "failed"}))
    assert error.code == code
    assert error.details["status"] == status


def test_classify_timeout():
    error = classify_error(NetworkError("Request timeout", timeout=True))
    assert error.code == ErrorCode.NETWORK_ERROR
    assert error.details["timeout"] is True


def test_classify_validation():
    error = classify_error(ValidationError(["a", "b"]))
    assert error.code == ErrorCode.VALIDATION_ERROR
    assert user_friendly_message(error) == "a, b"


def test_classify_auth_and_unknown():
    assert classify_error(AuthError("nope")).code == ErrorCode.AUTH_ERROR
    unknown = classify_error(KeyError("x"))
    assert unknown.code == ErrorCode.UNKNOWN_ERROR
    assert "KeyError" in unknown.details["original_error"]


def test_user_friendly_messages():
    assert user_friendly_message(classify_error(ApiError("x", status=404))) == NOT_FOUND_MESSAGE
    assert user_friendly_message(classify_error(ApiError("x", status=500))) == USER_MESSAGES[ErrorCode.API_ERROR]
    assert user_friendly_message(classify_error(ApiError("x", status=401))) == (
        "Sesi Anda telah berakhir. Silakan login kembali."
    )
    assert user_friendly_message(classify_error(NetworkError("down"))) == (
        "Koneksi internet bermasalah. Periksa koneksi Anda."
    )
