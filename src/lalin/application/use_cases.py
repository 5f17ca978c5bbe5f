from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple

from .report_aggregator import GateDirectory, aggregate_report, build_table_rows, filter_rows
from ..domain import (
    DashboardData,
    LalinFilters,
    LalinRepository,
    PaymentMethod,
    ReportPage,
    ReportRow,
    TotalsRow,
    TrafficRecord,
)
from ..infrastructure.pdf_exporter import ReportPdfExporter
from ...common.exceptions import ErrorCode
from ...common.logging import setup_logger, log_execution_time
from ...common.pagination import Page
from ...common.results import UseCaseResult
from ...common.validation import sanitize_string, validate_date
from ...gerbang.domain import GateRecord

logger = setup_logger(__name__)

NO_EXPORT_DATA = "Tidak ada data untuk di-export"

# Bank name -> TrafficRecord attribute
BANK_FIELDS = (
    ("BCA", "e_bca"),
    ("BRI", "e_bri"),
    ("BNI", "e_bni"),
    ("DKI", "e_dki"),
    ("Mandiri", "e_mandiri"),
    ("Mega", "e_mega"),
    ("Nobu", "e_nobu"),
    ("Flo", "e_flo"),
)


def _invalid(errors: List[str]) -> UseCaseResult:
    return UseCaseResult.fail(", ".join(errors), ErrorCode.VALIDATION_ERROR.value)


def fetch_concurrently(repository: LalinRepository, filters: LalinFilters,
                       page: int, limit: int) -> Tuple[Page[TrafficRecord], List[GateRecord]]:
    """
    Fetches a page of lalin records and the gate lookup in parallel.
    The first failure is re-raised.
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        lalin_future = executor.submit(repository.get_lalin_data, filters, page, limit)
        gates_future = executor.submit(repository.get_gerbang_data)
        return lalin_future.result(), gates_future.result()


def shift_for(record: TrafficRecord) -> int:
    return (record.gate_id + record.lane_id) % 3 + 1


class ReportUseCase:
    """
    Daily report: aggregated rows, per-method table and PDF export.
    """
    def __init__(self, lalin_repository: LalinRepository, pdf_exporter: Optional[ReportPdfExporter] = None):
        self.lalin_repository = lalin_repository
        self.pdf_exporter = pdf_exporter or ReportPdfExporter()

    @log_execution_time(logger)
    def get_report_data(self, filters: LalinFilters, page: int = 1, limit: int = 10) -> UseCaseResult[ReportPage]:
        if page < 1 or limit < 1:
            return _invalid(["Halaman dan limit harus lebih dari 0"])
        if filters.tanggal:
            errors = validate_date(filters.tanggal)
            if errors:
                return _invalid(errors)

        search = sanitize_string(filters.search) if filters.search else None
        filters = LalinFilters(tanggal=filters.tanggal, search=search or None)

        try:
            lalin_page, gates = fetch_concurrently(self.lalin_repository, filters, page, limit)
        except Exception as e:
            return UseCaseResult.from_exception(e)

        rows = filter_rows(aggregate_report(lalin_page.items, gates), filters.search)
        logger.info(
            f"Report {filters.tanggal or 'all dates'}: {len(lalin_page.items)} records -> {len(rows)} rows"
        )
        return UseCaseResult.ok(ReportPage(
            rows=rows,
            total_pages=lalin_page.total_pages,
            current_page=lalin_page.current_page,
            total_records=lalin_page.total_records,
        ))

    def build_table(self, rows: List[ReportRow], method: PaymentMethod) -> List[TotalsRow]:
        return build_table_rows(rows, method)

    def export_pdf(self, rows: List[ReportRow], filters: LalinFilters,
                   method: PaymentMethod) -> UseCaseResult[bytes]:
        if not rows:
            return UseCaseResult.fail(NO_EXPORT_DATA, ErrorCode.VALIDATION_ERROR.value)

        try:
            content = self.pdf_exporter.render(self.build_table(rows, method), method, filters.tanggal)
        except Exception as e:
            return UseCaseResult.from_exception(e)
        return UseCaseResult.ok(content)


class DashboardUseCase:
    """
    Dashboard totals by payment channel, shift, gate and branch for one day.
    """
    def __init__(self, lalin_repository: LalinRepository, limit: int = 2000):
        self.lalin_repository = lalin_repository
        self.limit = limit

    @log_execution_time(logger)
    def get_dashboard_data(self, tanggal: str, limit: Optional[int] = None) -> UseCaseResult[DashboardData]:
        errors = validate_date(tanggal)
        if errors:
            return _invalid(errors)

        try:
            lalin_page, gates = fetch_concurrently(
                self.lalin_repository, LalinFilters(tanggal=tanggal), 1, limit or self.limit
            )
        except Exception as e:
            return UseCaseResult.from_exception(e)

        return UseCaseResult.ok(self.summarize(lalin_page.items, gates))

    @staticmethod
    def summarize(records: List[TrafficRecord], gates: List[GateRecord]) -> DashboardData:
        directory = GateDirectory(gates)
        by_payment_method: Dict[str, int] = {bank: 0 for bank, _ in BANK_FIELDS}
        by_shift: Dict[str, int] = {"Shift 1": 0, "Shift 2": 0, "Shift 3": 0}
        by_gate: Dict[str, int] = {}
        by_branch: Dict[str, int] = {}

        for record in records:
            total = record.total_all
            for bank, attr in BANK_FIELDS:
                by_payment_method[bank] += getattr(record, attr)

            by_shift[f"Shift {shift_for(record)}"] += total

            branch_name, gate_name = directory.names_for(record.branch_id, record.gate_id)
            by_gate[gate_name] = by_gate.get(gate_name, 0) + total
            by_branch[branch_name] = by_branch.get(branch_name, 0) + total

        return DashboardData(
            by_payment_method=by_payment_method,
            by_shift=by_shift,
            by_gate=by_gate,
            by_branch=by_branch,
        )
