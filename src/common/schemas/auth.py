from typing import Optional
from pydantic import BaseModel, Field


class LoginResponseSchema(BaseModel):
    """
    Answer of POST /auth/login.
    """
    status: bool = False
    message: str = ""
    code: Optional[int] = None
    is_logged_in: int = Field(0, description="1 when the credentials were accepted")
    token: str = ""
