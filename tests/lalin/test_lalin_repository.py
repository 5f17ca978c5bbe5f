import pytest

from src.common.exceptions import ApiError
from src.common.http import ApiResponse
from src.lalin.domain import LalinFilters
from src.lalin.infrastructure import LalinApiRepository, record_from_row


def test_record_from_row_maps_aliases(lalin_row):
    record = record_from_row(lalin_row(eNobu=3))

    assert record.date == "2023-11-01"
    assert (record.branch_id, record.gate_id, record.lane_id) == (16, 1, 1)
    assert record.cash == 10
    assert record.official_operational == 5
    assert record.e_bca == 20
    assert record.e_nobu == 3
    assert record.e_mega == 0


def test_get_lalin_data_sends_filters(mock_api_client, lalin_row, envelope):
    mock_api_client.get.return_value = ApiResponse(
        data=envelope([lalin_row(), lalin_row(Golongan=2)], total_pages=4, total_records=40),
        status=200,
    )
    repository = LalinApiRepository(mock_api_client)

    page = repository.get_lalin_data(LalinFilters(tanggal="2023-11-01", search="kayu"), 2, 10)

    mock_api_client.get.assert_called_once_with(
        '/lalins', params={'page': 2, 'limit': 10, 'tanggal': '2023-11-01', 'search': 'kayu'}
    )
    assert len(page.items) == 2
    assert page.items[1].vehicle_class == 2
    assert page.total_pages == 4
    assert page.total_records == 40


def test_get_lalin_data_omits_empty_filters(mock_api_client, envelope):
    mock_api_client.get.return_value = ApiResponse(data=envelope([]), status=200)

    LalinApiRepository(mock_api_client).get_lalin_data(LalinFilters(), 1, 5)

    mock_api_client.get.assert_called_once_with('/lalins', params={'page': 1, 'limit': 5})


def test_get_lalin_data_status_false(mock_api_client, envelope):
    mock_api_client.get.return_value = ApiResponse(
        data=envelope([], status=False, message="Data kosong"), status=200
    )

    with pytest.raises(ApiError, match="Data kosong"):
        LalinApiRepository(mock_api_client).get_lalin_data(LalinFilters(), 1, 10)


def test_get_lalin_data_skips_invalid_rows(mock_api_client, lalin_row, envelope):
    mock_api_client.get.return_value = ApiResponse(
        data=envelope([lalin_row(Golongan=9), lalin_row(Golongan=2)], total_records=2), status=200
    )

    page = LalinApiRepository(mock_api_client).get_lalin_data(LalinFilters(), 1, 10)

    assert [r.vehicle_class for r in page.items] == [2]
    assert page.total_records == 2


def test_get_lalin_data_malformed_envelope(mock_api_client):
    mock_api_client.get.return_value = ApiResponse(data={"status": True, "data": []}, status=200)

    with pytest.raises(ApiError, match="Malformed lalin response"):
        LalinApiRepository(mock_api_client).get_lalin_data(LalinFilters(), 1, 10)


def test_get_gerbang_data_uses_lookup_limit(mock_api_client, envelope):
    mock_api_client.get.return_value = ApiResponse(
        data=envelope([{"id": 1, "IdCabang": 16, "NamaGerbang": "Kayu Besar", "NamaCabang": "Jakarta-Tangerang"}]),
        status=200,
    )

    gates = LalinApiRepository(mock_api_client, gerbang_lookup_limit=500).get_gerbang_data()

    mock_api_client.get.assert_called_once_with('/gerbangs', params={'page': 1, 'limit': 500})
    assert gates[0].gate_name == "Kayu Besar"
    assert gates[0].branch_id == 16
