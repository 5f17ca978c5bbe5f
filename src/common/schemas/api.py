from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class RowsWrapper(BaseModel):
    rows: List[Dict[str, Any]] = Field(default_factory=list)


class PageData(BaseModel):
    """
    The `data` member of a paginated lalin API answer.
    Rows are nested twice: data.rows.rows.
    """
    rows: RowsWrapper = Field(default_factory=RowsWrapper)
    total_pages: int = Field(0, ge=0)
    current_page: int = Field(1, ge=0)
    total_records: int = Field(0, ge=0)


class ApiEnvelope(BaseModel):
    """
    Standard lalin API envelope: {status, message, code, data}.
    """
    status: bool = False
    message: str = ""
    code: Optional[int] = None
    data: Optional[Any] = None


class PaginatedEnvelope(ApiEnvelope):
    data: PageData = Field(default_factory=PageData)
