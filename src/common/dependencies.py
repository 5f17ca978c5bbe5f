"""
FastAPI glue shared by every router: service lookup and result-to-HTTP mapping.
"""
from typing import Iterable

from fastapi import Depends, HTTPException, Request

from .exceptions import ErrorCode, NOT_FOUND_MESSAGE, USER_MESSAGES
from .results import UseCaseResult

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR.value: 400,
    ErrorCode.AUTH_ERROR.value: 401,
    ErrorCode.API_ERROR.value: 502,
    ErrorCode.NETWORK_ERROR.value: 502,
    ErrorCode.UNKNOWN_ERROR.value: 500,
}


def get_services(request: Request):
    """Services built at startup and attached to app.state."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(status_code=503, detail="Services not initialized")
    return services


def require_session(services=Depends(get_services)) -> None:
    if not services.auth_use_case.is_authenticated():
        raise HTTPException(status_code=401, detail=USER_MESSAGES[ErrorCode.AUTH_ERROR])


def ensure_success(result: UseCaseResult, not_found: Iterable[str] = (NOT_FOUND_MESSAGE,)):
    """
    Returns result.data or raises HTTPException carrying the localized message.
    """
    if result.success:
        return result.data

    if result.error in tuple(not_found):
        status = 404
    else:
        status = STATUS_BY_CODE.get(result.error_code or "", 500)
    raise HTTPException(status_code=status, detail=result.error)
