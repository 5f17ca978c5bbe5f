"""
Input sanitizing and field validation helpers.

Every validator returns a list of localized error messages; an empty list
means the value is valid.
"""
import re
from datetime import date, datetime
from typing import List, Optional

_ANGLE_BRACKETS = re.compile(r"[<>]")


def sanitize_string(value: str) -> str:
    return _ANGLE_BRACKETS.sub("", value.strip())


def validate_min_length(value: Optional[str], field_name: str, min_length: int) -> List[str]:
    if value and len(value) < min_length:
        return [f"{field_name} minimal {min_length} karakter"]
    return []


def validate_date(value: Optional[str], today: Optional[date] = None) -> List[str]:
    """
    Validates an ISO date string (YYYY-MM-DD) that must not lie in the future.
    """
    if not value:
        return ["Tanggal tidak boleh kosong"]

    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return ["Format tanggal tidak valid"]

    if parsed > (today or date.today()):
        return ["Tanggal tidak boleh lebih dari hari ini"]
    return []
