"""
Domain module initialization.
"""
from .entities import LoginCredentials, User
from .repositories import (
    SessionStore,
    UserRepository,
    TOKEN_KEY,
    USERNAME_KEY,
    IS_LOGGED_IN_KEY,
)
