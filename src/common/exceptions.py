"""
Exception hierarchy and error classification shared by every module.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .logging import setup_logger

logger = setup_logger(__name__)


class LalinError(Exception):
    """Base exception for all dashboard errors."""
    pass


class ApiError(LalinError):
    """Raised when the lalin API answers with an error status or envelope."""

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload


class NetworkError(LalinError):
    """Raised when the lalin API cannot be reached or does not answer in time."""

    def __init__(self, message: str, timeout: bool = False):
        super().__init__(message)
        self.message = message
        self.timeout = timeout


class ValidationError(LalinError):
    """Raised when user input is invalid."""

    def __init__(self, errors: List[str]):
        super().__init__(", ".join(errors))
        self.errors = list(errors)


class AuthError(LalinError):
    """Raised when login fails or the session is missing."""
    pass


class ConfigurationError(LalinError):
    """Raised when configuration is invalid."""
    pass


class ErrorCode(str, Enum):
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass
class AppError:
    """
    Classified error ready to be shown to the user.
    """
    code: ErrorCode
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


USER_MESSAGES = {
    ErrorCode.API_ERROR: "Terjadi kesalahan pada server. Silakan coba lagi.",
    ErrorCode.NETWORK_ERROR: "Koneksi internet bermasalah. Periksa koneksi Anda.",
    ErrorCode.VALIDATION_ERROR: "Data yang dimasukkan tidak valid.",
    ErrorCode.AUTH_ERROR: "Sesi Anda telah berakhir. Silakan login kembali.",
    ErrorCode.UNKNOWN_ERROR: "Terjadi kesalahan yang tidak diketahui. Silakan coba lagi.",
}

NOT_FOUND_MESSAGE = "Data tidak ditemukan."


def classify_error(error: BaseException) -> AppError:
    """
    Maps an exception to an AppError.

    HTTP 401/403 become AUTH_ERROR, any other status (404, 5xx, ...) is an
    API_ERROR; timeouts and connection failures are NETWORK_ERROR.
    """
    if isinstance(error, ApiError):
        details = {"status": error.status, "data": error.payload}
        if error.status in (401, 403):
            return AppError(ErrorCode.AUTH_ERROR, error.message, details)
        return AppError(ErrorCode.API_ERROR, error.message or "Server error occurred", details)

    if isinstance(error, NetworkError):
        return AppError(
            ErrorCode.NETWORK_ERROR,
            "Network error - please check your connection",
            {"original_error": error.message, "timeout": error.timeout},
        )

    if isinstance(error, ValidationError):
        return AppError(ErrorCode.VALIDATION_ERROR, "Validation failed", {"errors": error.errors})

    if isinstance(error, AuthError):
        return AppError(ErrorCode.AUTH_ERROR, str(error))

    return AppError(
        ErrorCode.UNKNOWN_ERROR,
        str(error) or "An unknown error occurred",
        {"original_error": repr(error)},
    )


def user_friendly_message(error: AppError) -> str:
    """Localized message for the front end."""
    if error.code == ErrorCode.VALIDATION_ERROR:
        errors = error.details.get("errors") or []
        return ", ".join(errors) or USER_MESSAGES[ErrorCode.VALIDATION_ERROR]
    if error.code == ErrorCode.API_ERROR and error.details.get("status") == 404:
        return NOT_FOUND_MESSAGE
    return USER_MESSAGES.get(error.code, USER_MESSAGES[ErrorCode.UNKNOWN_ERROR])


def log_error(error: AppError) -> None:
    logger.error(
        f"Application error [{error.code.value}] {error.message} "
        f"details={error.details} at {error.timestamp.isoformat()}"
    )
