from typing import Any, Dict, List, Optional

from ..domain import GateRecord, GerbangRepository
from ...common.exceptions import ErrorCode
from ...common.logging import setup_logger
from ...common.pagination import Page
from ...common.results import UseCaseResult
from ...common.validation import sanitize_string, validate_min_length

logger = setup_logger(__name__)

INVALID_GATE_ID = "ID Gerbang tidak valid"
INVALID_BRANCH_ID = "ID Cabang tidak valid"
GATE_NOT_FOUND = "Gerbang tidak ditemukan"


def _invalid(message: str) -> UseCaseResult:
    return UseCaseResult.fail(message, ErrorCode.VALIDATION_ERROR.value)


class GerbangUseCase:
    """
    Master data (gerbang) listing and CRUD with field validation.
    """
    def __init__(self, gerbang_repository: GerbangRepository):
        self.gerbang_repository = gerbang_repository

    def get_gerbangs(self, search: Optional[str] = None, page: int = 1, limit: int = 10) -> UseCaseResult[Page[GateRecord]]:
        if page < 1 or limit < 1:
            return _invalid("Halaman dan limit harus lebih dari 0")

        query = sanitize_string(search) if search else ""
        try:
            if query:
                result = self.gerbang_repository.search(query, page, limit)
            else:
                result = self.gerbang_repository.get_all(page, limit)
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok(result)

    def get_gerbang_by_id(self, gate_id: int) -> UseCaseResult[GateRecord]:
        if not gate_id or gate_id <= 0:
            return _invalid(INVALID_GATE_ID)

        try:
            gate = self.gerbang_repository.get_by_id(gate_id)
        except Exception as e:
            return UseCaseResult.from_exception(e)

        if gate is None:
            return UseCaseResult.fail(GATE_NOT_FOUND, ErrorCode.API_ERROR.value)
        return UseCaseResult.ok(gate)

    def create_gerbang(self, branch_id: int, gate_name: str, branch_name: str, gate_id: int = 0) -> UseCaseResult[GateRecord]:
        errors = self.validate_gerbang_data(branch_id, gate_name, branch_name)
        if gate_id < 0:
            errors.append(INVALID_GATE_ID)
        if errors:
            return _invalid(", ".join(errors))

        gate = GateRecord(
            id=gate_id,
            branch_id=branch_id,
            gate_name=sanitize_string(gate_name),
            branch_name=sanitize_string(branch_name),
        )
        # Sanitizing may have emptied a name
        entity_errors = gate.validate()
        if entity_errors:
            return _invalid(", ".join(entity_errors))

        try:
            created = self.gerbang_repository.create(gate)
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok(created)

    def update_gerbang(self, gate_id: int, branch_id: Optional[int] = None,
                       gate_name: Optional[str] = None,
                       branch_name: Optional[str] = None) -> UseCaseResult[GateRecord]:
        if not gate_id or gate_id <= 0:
            return _invalid(INVALID_GATE_ID)

        fields: Dict[str, Any] = {}
        errors: List[str] = []
        if branch_id is not None:
            if branch_id <= 0:
                errors.append("ID Cabang harus lebih dari 0")
            fields["branch_id"] = branch_id
        if gate_name is not None:
            fields["gate_name"] = sanitize_string(gate_name)
            errors += self._name_errors(fields["gate_name"], "Nama Gerbang")
        if branch_name is not None:
            fields["branch_name"] = sanitize_string(branch_name)
            errors += self._name_errors(fields["branch_name"], "Nama Cabang")
        if errors:
            return _invalid(", ".join(errors))

        try:
            updated = self.gerbang_repository.update(gate_id, fields)
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok(updated)

    def delete_gerbang(self, gate_id: int, branch_id: int) -> UseCaseResult[None]:
        if not gate_id or gate_id <= 0:
            return _invalid(INVALID_GATE_ID)
        if not branch_id or branch_id <= 0:
            return _invalid(INVALID_BRANCH_ID)

        try:
            self.gerbang_repository.delete(gate_id, branch_id)
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok()

    @classmethod
    def validate_gerbang_data(cls, branch_id: int, gate_name: str, branch_name: str) -> List[str]:
        errors = []
        if not gate_name or not gate_name.strip():
            errors.append("Nama Gerbang tidak boleh kosong")
        if not branch_name or not branch_name.strip():
            errors.append("Nama Cabang tidak boleh kosong")
        if branch_id is None or branch_id <= 0:
            errors.append("ID Cabang harus lebih dari 0")
        errors += validate_min_length(gate_name, "Nama Gerbang", 3)
        errors += validate_min_length(branch_name, "Nama Cabang", 3)
        return errors

    @staticmethod
    def _name_errors(value: str, field_name: str) -> List[str]:
        if not value:
            return [f"{field_name} tidak boleh kosong"]
        return validate_min_length(value, field_name, 3)
