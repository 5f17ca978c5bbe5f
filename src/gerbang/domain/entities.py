"""
Domain entities for the gerbang (toll gate) module.
"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class GateRecord:
    """
    A toll gate and the branch (ruas) it belongs to.
    Gate ids are only unique within a branch.
    """
    id: int
    branch_id: int
    gate_name: str
    branch_name: str

    def validate(self) -> List[str]:
        errors = []
        if not self.gate_name or not self.gate_name.strip():
            errors.append("Nama Gerbang tidak boleh kosong")
        if not self.branch_name or not self.branch_name.strip():
            errors.append("Nama Cabang tidak boleh kosong")
        if self.branch_id <= 0:
            errors.append("ID Cabang harus lebih dari 0")
        return errors

    def matches(self, query: str) -> bool:
        query = query.lower()
        return query in self.gate_name.lower() or query in self.branch_name.lower()
