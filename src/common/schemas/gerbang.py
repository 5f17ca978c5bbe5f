from pydantic import BaseModel, ConfigDict, Field


class GerbangSchema(BaseModel):
    """
    A toll gate as served by /gerbangs.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Gate ID, unique within a branch")
    id_cabang: int = Field(..., alias="IdCabang", description="Branch (ruas) ID")
    nama_gerbang: str = Field("", alias="NamaGerbang", description="Gate name")
    nama_cabang: str = Field("", alias="NamaCabang", description="Branch name")
