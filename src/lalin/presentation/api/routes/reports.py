"""
Daily report endpoints: JSON table and PDF download.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from .....common.dependencies import ensure_success, get_services, require_session
from .....common.exceptions import ValidationError
from ....domain import LalinFilters, PaymentMethod
from ....infrastructure import report_filename

router = APIRouter(tags=["reports"])


def parse_method(metode: str) -> PaymentMethod:
    try:
        return PaymentMethod.parse(metode)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=", ".join(e.errors))


@router.get("/payment-methods")
def list_payment_methods():
    return [
        {"value": m.value, "label": m.display_name, "tab": m.tab_name}
        for m in PaymentMethod.all_methods()
    ]


@router.get("/reports/daily", dependencies=[Depends(require_session)])
def get_daily_report(
    tanggal: Optional[str] = None,
    search: Optional[str] = None,
    metode: str = PaymentMethod.KESELURUHAN.value,
    page: int = Query(1),
    limit: int = Query(10),
    services=Depends(get_services),
):
    method = parse_method(metode)
    filters = LalinFilters(tanggal=tanggal, search=search)
    report = ensure_success(services.report_use_case.get_report_data(filters, page, limit))
    table = services.report_use_case.build_table(report.rows, method)
    return {
        "metode": method.value,
        "rows": [r.to_dict() for r in report.rows],
        "table": [t.to_dict(method) for t in table],
        "total_pages": report.total_pages,
        "current_page": report.current_page,
        "total_records": report.total_records,
    }


@router.get("/reports/daily/pdf", dependencies=[Depends(require_session)])
def download_daily_report(
    tanggal: Optional[str] = None,
    search: Optional[str] = None,
    metode: str = PaymentMethod.KESELURUHAN.value,
    page: int = Query(1),
    limit: int = Query(10),
    services=Depends(get_services),
):
    method = parse_method(metode)
    filters = LalinFilters(tanggal=tanggal, search=search)
    report = ensure_success(services.report_use_case.get_report_data(filters, page, limit))
    content = ensure_success(services.report_use_case.export_pdf(report.rows, filters, method))
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(tanggal)}"'},
    )
