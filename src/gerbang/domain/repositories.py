"""
Domain repositories for the gerbang module.
"""
from typing import Any, Dict, Optional, Protocol
from .entities import GateRecord
from ...common.pagination import Page


class GerbangRepository(Protocol):
    def get_all(self, page: int, limit: int) -> Page[GateRecord]:
        ...

    def get_by_id(self, gate_id: int) -> Optional[GateRecord]:
        ...

    def create(self, gate: GateRecord) -> GateRecord:
        ...

    def update(self, gate_id: int, fields: Dict[str, Any]) -> GateRecord:
        ...

    def delete(self, gate_id: int, branch_id: int) -> None:
        ...

    def search(self, query: str, page: int, limit: int) -> Page[GateRecord]:
        ...
