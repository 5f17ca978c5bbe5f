from .api import ApiEnvelope, PaginatedEnvelope, PageData, RowsWrapper
from .lalin import LalinSchema
from .gerbang import GerbangSchema
from .auth import LoginResponseSchema

__all__ = [
    "ApiEnvelope",
    "PaginatedEnvelope",
    "PageData",
    "RowsWrapper",
    "LalinSchema",
    "GerbangSchema",
    "LoginResponseSchema",
]
