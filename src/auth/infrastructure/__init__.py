"""
Infrastructure module initialization.
"""
from .session_store import InMemorySessionStore, JsonFileSessionStore, create_session_store
from .repositories import UserApiRepository

__all__ = [
    "InMemorySessionStore",
    "JsonFileSessionStore",
    "create_session_store",
    "UserApiRepository",
]
