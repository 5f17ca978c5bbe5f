"""
Dashboard summary endpoint.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from .....common.dependencies import ensure_success, get_services, require_session

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_session)])


@router.get("/dashboard")
def get_dashboard(tanggal: Optional[str] = None, services=Depends(get_services)):
    """
    Traffic totals per payment channel, shift, gate and branch.
    Falls back to the configured default date.
    """
    day = tanggal or services.config.report.default_date
    data = ensure_success(services.dashboard_use_case.get_dashboard_data(day))
    return {"tanggal": day, **data.to_dict()}
