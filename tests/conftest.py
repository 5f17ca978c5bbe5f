import base64
import json

import pytest
from unittest.mock import MagicMock

from src.common.pagination import Page
from src.gerbang.domain import GateRecord
from src.lalin.domain import TrafficRecord


def _make_token(payload: dict) -> str:
    """Unsigned JWT-shaped token carrying the given payload."""
    def encode(part: dict) -> str:
        return base64.urlsafe_b64encode(json.dumps(part).encode()).rstrip(b"=").decode()
    return f"{encode({'alg': 'HS256', 'typ': 'JWT'})}.{encode(payload)}.signature"


@pytest.fixture
def gates():
    return [
        GateRecord(id=1, branch_id=16, gate_name="Kayu Besar", branch_name="Jakarta-Tangerang"),
        GateRecord(id=2, branch_id=16, gate_name="Karang Tengah", branch_name="Jakarta-Tangerang"),
        GateRecord(id=1, branch_id=17, gate_name="Cikupa", branch_name="Alpha Ruas"),
    ]


@pytest.fixture
def records():
    """
    Four records on 2023-11-01; the first two share a grouping key.
    Keseluruhan totals: Kayu Besar 37, Karang Tengah 10, Cikupa 7.
    """
    return [
        TrafficRecord(date="2023-11-01", branch_id=16, gate_id=1, lane_id=1, vehicle_class=1,
                      cash=10, official_operational=5, e_bca=20),
        TrafficRecord(date="2023-11-01", branch_id=16, gate_id=1, lane_id=1, vehicle_class=1,
                      cash=2),
        TrafficRecord(date="2023-11-01", branch_id=16, gate_id=2, lane_id=1, vehicle_class=2,
                      e_flo=4, e_mandiri=6),
        TrafficRecord(date="2023-11-01", branch_id=17, gate_id=1, lane_id=3, vehicle_class=5,
                      cash=7),
    ]


@pytest.fixture
def lalin_repository(records, gates):
    repository = MagicMock()
    repository.get_lalin_data.return_value = Page(
        items=records, total_pages=3, current_page=1, total_records=25
    )
    repository.get_gerbang_data.return_value = gates
    return repository


@pytest.fixture
def mock_api_client():
    return MagicMock()


def _lalin_row(**overrides):
    row = {
        "Tanggal": "2023-11-01T00:00:00.000Z",
        "IdCabang": 16,
        "IdGerbang": 1,
        "IdGardu": 1,
        "Golongan": 1,
        "Tunai": 10,
        "DinasOpr": 5,
        "DinasMitra": 0,
        "DinasKary": 0,
        "eFlo": 0,
        "eMandiri": 0,
        "eBri": 0,
        "eBni": 0,
        "eBca": 20,
        "eNobu": 0,
        "eDKI": 0,
        "eMega": None,
    }
    row.update(overrides)
    return row


def _envelope(rows, status=True, message="", total_pages=1, current_page=1, total_records=None):
    return {
        "status": status,
        "message": message,
        "code": 200,
        "data": {
            "total_pages": total_pages,
            "current_page": current_page,
            "total_records": len(rows) if total_records is None else total_records,
            "rows": {"rows": rows},
        },
    }


@pytest.fixture
def make_token():
    return _make_token


@pytest.fixture
def lalin_row():
    return _lalin_row


@pytest.fixture
def envelope():
    return _envelope
