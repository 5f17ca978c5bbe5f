from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LalinSchema(BaseModel):
    """
    A traffic row as served by GET /lalins.
    Amounts are vehicle counts per payment channel.
    """
    model_config = ConfigDict(populate_by_name=True)

    tanggal: str = Field(..., alias="Tanggal", description="Date of the record")
    id_cabang: int = Field(..., alias="IdCabang", description="Branch (ruas) ID")
    id_gerbang: int = Field(..., alias="IdGerbang", description="Toll gate ID")
    id_gardu: int = Field(..., alias="IdGardu", description="Lane (gardu) ID")
    golongan: int = Field(..., alias="Golongan", ge=1, le=5, description="Vehicle class I-V")
    tunai: int = Field(0, alias="Tunai")
    dinas_opr: int = Field(0, alias="DinasOpr")
    dinas_mitra: int = Field(0, alias="DinasMitra")
    dinas_kary: int = Field(0, alias="DinasKary")
    e_flo: int = Field(0, alias="eFlo")
    e_mandiri: int = Field(0, alias="eMandiri")
    e_bri: int = Field(0, alias="eBri")
    e_bni: int = Field(0, alias="eBni")
    e_bca: int = Field(0, alias="eBca")
    e_nobu: int = Field(0, alias="eNobu")
    e_dki: int = Field(0, alias="eDKI")
    e_mega: int = Field(0, alias="eMega")

    @field_validator('tanggal', mode='before')
    @classmethod
    def keep_date_part(cls, v):
        # The API sometimes sends full ISO timestamps
        if isinstance(v, str):
            return v[:10]
        return v

    @field_validator(
        'tunai', 'dinas_opr', 'dinas_mitra', 'dinas_kary', 'e_flo', 'e_mandiri',
        'e_bri', 'e_bni', 'e_bca', 'e_nobu', 'e_dki', 'e_mega',
        mode='before',
    )
    @classmethod
    def null_as_zero(cls, v: Optional[int]):
        return 0 if v is None else v
