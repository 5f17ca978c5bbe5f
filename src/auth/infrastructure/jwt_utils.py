"""
Read-only helpers for the bearer token returned by /auth/login.

The payload is decoded without verifying the signature; the token is only
inspected to warn the user before it expires.
"""
import base64
import binascii
import json
import time
from typing import Any, Dict, Optional


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    parts = token.split(".") if token else []
    if len(parts) != 3:
        return None

    payload = parts[1]
    payload += "=" * (-len(payload) % 4)
    try:
        decoded = base64.urlsafe_b64decode(payload.encode("ascii"))
        data = json.loads(decoded)
    except (binascii.Error, UnicodeError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def _expiration(token: str) -> Optional[float]:
    payload = decode_token(token)
    if not payload or not isinstance(payload.get("exp"), (int, float)):
        return None
    return float(payload["exp"])


def is_token_expired(token: str, now: Optional[float] = None) -> bool:
    exp = _expiration(token)
    if exp is None:
        return True
    return exp < (now if now is not None else time.time())


def minutes_until_expiration(token: str, now: Optional[float] = None) -> float:
    exp = _expiration(token)
    if exp is None:
        return 0.0
    remaining = exp - (now if now is not None else time.time())
    return max(0.0, remaining / 60)


def is_token_expiring_soon(token: str, minutes_threshold: float = 5, now: Optional[float] = None) -> bool:
    if _expiration(token) is None:
        return True
    return minutes_until_expiration(token, now) <= minutes_threshold


def format_time_until_expiration(token: str, now: Optional[float] = None) -> str:
    minutes = minutes_until_expiration(token, now)

    if minutes <= 0:
        return "Expired"
    if minutes < 60:
        return f"{int(minutes)} menit"

    hours = int(minutes // 60)
    remaining = int(minutes % 60)
    if remaining == 0:
        return f"{hours} jam"
    return f"{hours} jam {remaining} menit"
