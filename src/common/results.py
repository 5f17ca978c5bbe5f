from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import classify_error, log_error, user_friendly_message

T = TypeVar("T")


@dataclass
class UseCaseResult(Generic[T]):
    """
    Outcome of a use case. Failures carry a localized message instead of
    raising, so routes can hand it straight to the front end.
    """
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "UseCaseResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: Optional[str] = None) -> "UseCaseResult[T]":
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def from_exception(cls, error: BaseException) -> "UseCaseResult[T]":
        """Classifies, logs and wraps an unexpected failure."""
        app_error = classify_error(error)
        log_error(app_error)
        return cls.fail(user_friendly_message(app_error), app_error.code.value)
