"""
Domain repositories for the lalin module.
"""
from typing import List, Protocol
from .entities import LalinFilters, TrafficRecord
from ...common.pagination import Page
from ...gerbang.domain import GateRecord


class LalinRepository(Protocol):
    def get_lalin_data(self, filters: LalinFilters, page: int, limit: int) -> Page[TrafficRecord]:
        ...

    def get_gerbang_data(self) -> List[GateRecord]:
        ...
