"""
Master data (gerbang) CRUD endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from ....common.dependencies import ensure_success, get_services, require_session
from ....common.exceptions import NOT_FOUND_MESSAGE
from ....common.pagination import Page
from ....common.schemas import GerbangSchema
from ...application.use_cases import GATE_NOT_FOUND
from ...domain import GateRecord

router = APIRouter(prefix="/gerbangs", tags=["gerbang"], dependencies=[Depends(require_session)])

NOT_FOUND = (NOT_FOUND_MESSAGE, GATE_NOT_FOUND)


class GerbangCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(0, ge=0, description="Gate ID; 0 lets the API assign one")
    id_cabang: int = Field(0, alias="IdCabang")
    nama_gerbang: str = Field("", alias="NamaGerbang")
    nama_cabang: str = Field("", alias="NamaCabang")


class GerbangUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_cabang: Optional[int] = Field(None, alias="IdCabang")
    nama_gerbang: Optional[str] = Field(None, alias="NamaGerbang")
    nama_cabang: Optional[str] = Field(None, alias="NamaCabang")


def gate_to_json(gate: GateRecord) -> dict:
    return GerbangSchema(
        id=gate.id,
        id_cabang=gate.branch_id,
        nama_gerbang=gate.gate_name,
        nama_cabang=gate.branch_name,
    ).model_dump(by_alias=True)


def page_to_json(page: Page[GateRecord]) -> dict:
    return {
        "rows": [gate_to_json(g) for g in page.items],
        "total_pages": page.total_pages,
        "current_page": page.current_page,
        "total_records": page.total_records,
    }


@router.get("")
def list_gerbangs(
    search: Optional[str] = None,
    page: int = Query(1),
    limit: int = Query(10),
    services=Depends(get_services),
):
    result = services.gerbang_use_case.get_gerbangs(search=search, page=page, limit=limit)
    return page_to_json(ensure_success(result))


@router.get("/{gate_id}")
def get_gerbang(gate_id: int, services=Depends(get_services)):
    result = services.gerbang_use_case.get_gerbang_by_id(gate_id)
    return gate_to_json(ensure_success(result, not_found=NOT_FOUND))


@router.post("", status_code=201)
def create_gerbang(body: GerbangCreateRequest, services=Depends(get_services)):
    result = services.gerbang_use_case.create_gerbang(
        branch_id=body.id_cabang,
        gate_name=body.nama_gerbang,
        branch_name=body.nama_cabang,
        gate_id=body.id,
    )
    return gate_to_json(ensure_success(result))


@router.put("/{gate_id}")
def update_gerbang(gate_id: int, body: GerbangUpdateRequest, services=Depends(get_services)):
    result = services.gerbang_use_case.update_gerbang(
        gate_id,
        branch_id=body.id_cabang,
        gate_name=body.nama_gerbang,
        branch_name=body.nama_cabang,
    )
    return gate_to_json(ensure_success(result, not_found=NOT_FOUND))


@router.delete("/{gate_id}")
def delete_gerbang(gate_id: int, branch_id: int = Query(...), services=Depends(get_services)):
    ensure_success(services.gerbang_use_case.delete_gerbang(gate_id, branch_id), not_found=NOT_FOUND)
    return {"status": "deleted", "id": gate_id, "IdCabang": branch_id}
