from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaError

from ..domain import GateRecord, GerbangRepository
from ...common.exceptions import ApiError
from ...common.http import ApiClient
from ...common.logging import setup_logger, log_execution_time
from ...common.pagination import Page, paginate
from ...common.schemas import GerbangSchema, PaginatedEnvelope

logger = setup_logger(__name__)

SEARCH_FETCH_LIMIT = 1000


def gate_from_row(row: Dict[str, Any]) -> GateRecord:
    schema = GerbangSchema.model_validate(row)
    return GateRecord(
        id=schema.id,
        branch_id=schema.id_cabang,
        gate_name=schema.nama_gerbang,
        branch_name=schema.nama_cabang,
    )


def parse_gate_page(body: Any, what: str = "gerbangs") -> Page[GateRecord]:
    """Parses a paginated /gerbangs envelope, raising ApiError on status=false."""
    try:
        envelope = PaginatedEnvelope.model_validate(body)
        if not envelope.status:
            raise ApiError(envelope.message or f"Failed to fetch {what}", payload=body)
        gates = [gate_from_row(row) for row in envelope.data.rows.rows]
    except SchemaError as e:
        raise ApiError(f"Malformed {what} response: {e}", payload=body) from e

    return Page(
        items=gates,
        total_pages=envelope.data.total_pages,
        current_page=envelope.data.current_page,
        total_records=envelope.data.total_records,
    )


class GerbangApiRepository(GerbangRepository):
    """
    Gate CRUD over the lalin API.
    """
    def __init__(self, api_client: ApiClient):
        self.api_client = api_client

    @log_execution_time(logger)
    def get_all(self, page: int, limit: int) -> Page[GateRecord]:
        response = self.api_client.get('/gerbangs', params={'page': page, 'limit': limit})
        return parse_gate_page(response.data)

    def get_by_id(self, gate_id: int) -> Optional[GateRecord]:
        try:
            response = self.api_client.get(f'/gerbangs/{gate_id}')
        except ApiError as e:
            if e.status == 404:
                return None
            raise
        return self._gate_from_body(response.data)

    def create(self, gate: GateRecord) -> GateRecord:
        payload = {
            'IdCabang': gate.branch_id,
            'NamaGerbang': gate.gate_name,
            'NamaCabang': gate.branch_name,
        }
        if gate.id > 0:
            payload['id'] = gate.id

        response = self.api_client.post('/gerbangs/', payload)
        logger.info(f"Created gerbang {gate.gate_name} in branch {gate.branch_id}")
        return self._gate_from_body(response.data) or gate

    def update(self, gate_id: int, fields: Dict[str, Any]) -> GateRecord:
        payload = {'id': gate_id}
        payload.update({
            key: fields.get(attr) for key, attr in (
                ('IdCabang', 'branch_id'),
                ('NamaGerbang', 'gate_name'),
                ('NamaCabang', 'branch_name'),
            )
            if fields.get(attr) is not None
        })

        response = self.api_client.put('/gerbangs/', payload)
        logger.info(f"Updated gerbang {gate_id}")
        updated = self._gate_from_body(response.data)
        if updated is not None:
            return updated

        # Bare {status, message} answer: read back the stored record
        stored = self.get_by_id(gate_id)
        if stored is None:
            raise ApiError(f"Gerbang {gate_id} not found after update", status=404, payload=response.data)
        return stored

    def delete(self, gate_id: int, branch_id: int) -> None:
        self.api_client.delete('/gerbangs/', {'id': gate_id, 'IdCabang': branch_id})
        logger.info(f"Deleted gerbang {gate_id} in branch {branch_id}")

    def search(self, query: str, page: int, limit: int) -> Page[GateRecord]:
        # The API has no search parameter; filter a large first page locally
        all_gates = self.get_all(1, SEARCH_FETCH_LIMIT).items
        matches: List[GateRecord] = [g for g in all_gates if g.matches(query)]
        return paginate(matches, page, limit)

    @staticmethod
    def _gate_from_body(body: Any) -> Optional[GateRecord]:
        """
        Single-gate answers come either bare or wrapped in {status, data}.
        """
        if not isinstance(body, dict):
            return None
        if 'status' in body and body.get('status') is False:
            raise ApiError(body.get('message') or 'Gerbang request failed', payload=body)

        candidate = body.get('data', body)
        if isinstance(candidate, dict) and 'rows' in candidate:
            rows = candidate['rows'].get('rows', []) if isinstance(candidate['rows'], dict) else candidate['rows']
            candidate = rows[0] if rows else None
        if not isinstance(candidate, dict) or 'id' not in candidate:
            return None

        try:
            return gate_from_row(candidate)
        except SchemaError as e:
            raise ApiError(f"Malformed gerbang response: {e}", payload=body) from e
