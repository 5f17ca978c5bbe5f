"""
Infrastructure module initialization.
"""
from .repositories import GerbangApiRepository, gate_from_row, parse_gate_page

__all__ = ["GerbangApiRepository", "gate_from_row", "parse_gate_page"]
