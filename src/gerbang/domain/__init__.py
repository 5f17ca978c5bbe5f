"""
Domain module initialization.
"""
from .entities import GateRecord
from .repositories import GerbangRepository
