import pytest
from pydantic import ValidationError

from src.common.schemas import (
    GerbangSchema, LalinSchema, LoginResponseSchema, PaginatedEnvelope
)

# --- Lalin Tests ---
def test_lalin_valid(lalin_row):
    row = LalinSchema.model_validate(lalin_row())
    assert row.tanggal == "2023-11-01"
    assert row.id_gardu == 1
    assert row.e_mega == 0

def test_lalin_by_field_name():
    row = LalinSchema(tanggal="2023-11-01", id_cabang=1, id_gerbang=2, id_gardu=3, golongan=4)
    assert row.tunai == 0

@pytest.mark.parametrize("golongan", [0, 6])
def test_lalin_invalid_golongan(lalin_row, golongan):
    with pytest.raises(ValidationError):
        LalinSchema.model_validate(lalin_row(Golongan=golongan))

def test_lalin_missing_gate(lalin_row):
    row = lalin_row()
    del row["IdGerbang"]
    with pytest.raises(ValidationError):
        LalinSchema.model_validate(row)

# --- Gerbang Tests ---
def test_gerbang_aliases_round_trip():
    gate = GerbangSchema.model_validate(
        {"id": 1, "IdCabang": 16, "NamaGerbang": "Kayu Besar", "NamaCabang": "Jakarta-Tangerang"}
    )
    assert gate.nama_gerbang == "Kayu Besar"
    assert gate.model_dump(by_alias=True)["IdCabang"] == 16

def test_gerbang_requires_branch():
    with pytest.raises(ValidationError):
        GerbangSchema.model_validate({"id": 1, "NamaGerbang": "Kayu Besar"})

# --- Envelope Tests ---
def test_paginated_envelope_nesting(envelope, lalin_row):
    parsed = PaginatedEnvelope.model_validate(envelope([lalin_row()], total_pages=5))
    assert parsed.status is True
    assert parsed.data.total_pages == 5
    assert len(parsed.data.rows.rows) == 1

def test_paginated_envelope_defaults():
    parsed = PaginatedEnvelope.model_validate({"status": False, "message": "Gagal"})
    assert parsed.data.rows.rows == []

def test_paginated_envelope_negative_pages():
    with pytest.raises(ValidationError):
        PaginatedEnvelope.model_validate({"status": True, "data": {"total_pages": -1}})

# --- Auth Tests ---
def test_login_response():
    data = LoginResponseSchema.model_validate({"status": True, "is_logged_in": 1, "token": "abc"})
    assert data.token == "abc"
    assert data.message == ""
