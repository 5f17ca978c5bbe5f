from typing import Any, Dict, List

from pydantic import ValidationError as SchemaError

from ..domain import LalinFilters, LalinRepository, TrafficRecord
from ...common.exceptions import ApiError
from ...common.http import ApiClient
from ...common.logging import setup_logger, log_execution_time
from ...common.pagination import Page
from ...common.schemas import LalinSchema, PaginatedEnvelope
from ...gerbang.domain import GateRecord
from ...gerbang.infrastructure import parse_gate_page

logger = setup_logger(__name__)


def record_from_row(row: Dict[str, Any]) -> TrafficRecord:
    s = LalinSchema.model_validate(row)
    return TrafficRecord(
        date=s.tanggal,
        branch_id=s.id_cabang,
        gate_id=s.id_gerbang,
        lane_id=s.id_gardu,
        vehicle_class=s.golongan,
        cash=s.tunai,
        official_operational=s.dinas_opr,
        official_partner=s.dinas_mitra,
        official_employee=s.dinas_kary,
        e_flo=s.e_flo,
        e_mandiri=s.e_mandiri,
        e_bri=s.e_bri,
        e_bni=s.e_bni,
        e_bca=s.e_bca,
        e_nobu=s.e_nobu,
        e_dki=s.e_dki,
        e_mega=s.e_mega,
    )


class LalinApiRepository(LalinRepository):
    """
    Reads traffic rows from GET /lalins and the gate lookup from GET /gerbangs.
    """
    def __init__(self, api_client: ApiClient, gerbang_lookup_limit: int = 1000):
        self.api_client = api_client
        self.gerbang_lookup_limit = gerbang_lookup_limit

    @log_execution_time(logger)
    def get_lalin_data(self, filters: LalinFilters, page: int, limit: int) -> Page[TrafficRecord]:
        params: Dict[str, Any] = {'page': page, 'limit': limit}
        if filters.tanggal:
            params['tanggal'] = filters.tanggal
        if filters.search:
            params['search'] = filters.search

        response = self.api_client.get('/lalins', params=params)

        try:
            envelope = PaginatedEnvelope.model_validate(response.data)
            if not envelope.status:
                raise ApiError(envelope.message or 'Failed to fetch lalin data', payload=response.data)
        except SchemaError as e:
            raise ApiError(f"Malformed lalin response: {e}", payload=response.data) from e

        records: List[TrafficRecord] = []
        for row in envelope.data.rows.rows:
            try:
                records.append(record_from_row(row))
            except SchemaError as e:
                logger.warning(f"Skipping invalid lalin row {row}: {e.error_count()} error(s)")

        logger.debug(f"Fetched {len(records)} lalin rows (page {page}, tanggal={filters.tanggal})")
        return Page(
            items=records,
            total_pages=envelope.data.total_pages,
            current_page=envelope.data.current_page,
            total_records=envelope.data.total_records,
        )

    @log_execution_time(logger)
    def get_gerbang_data(self) -> List[GateRecord]:
        response = self.api_client.get(
            '/gerbangs', params={'page': 1, 'limit': self.gerbang_lookup_limit}
        )
        return parse_gate_page(response.data, what="gerbang data").items
