"""
Login, logout and current-user endpoints.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ....common.dependencies import ensure_success, get_services
from ...domain import User
from ...infrastructure import jwt_utils

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    username: str = Field("", description="Dashboard username")
    password: str = Field("", description="Plain password, sent as-is to the lalin API")


def _user_payload(user: User) -> dict:
    payload = {
        "id": user.id,
        "username": user.username,
        "isLoggedIn": user.is_logged_in,
    }
    if jwt_utils.decode_token(user.token):
        payload["expiresIn"] = jwt_utils.format_time_until_expiration(user.token)
        payload["expiringSoon"] = jwt_utils.is_token_expiring_soon(user.token)
    return payload


@router.post("/login")
def login(body: LoginRequest, services=Depends(get_services)):
    user = ensure_success(services.auth_use_case.login(body.username, body.password))
    return {"user": _user_payload(user), "token": user.token}


@router.post("/logout")
def logout(services=Depends(get_services)):
    ensure_success(services.auth_use_case.logout())
    return {"status": "logged_out"}


@router.get("/me")
def current_user(services=Depends(get_services)):
    user = ensure_success(services.auth_use_case.get_current_user())
    return {"user": _user_payload(user)}
