"""
Domain entities for the lalin (traffic) module.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .payment_method import PaymentMethod

VEHICLE_CLASSES = (1, 2, 3, 4, 5)
CLASS_LABELS = {1: "Gol I", 2: "Gol II", 3: "Gol III", 4: "Gol IV", 5: "Gol V"}


@dataclass(frozen=True)
class TrafficRecord:
    """
    Vehicle counts for one lane, vehicle class and date, split per payment channel.
    """
    date: str  # YYYY-MM-DD
    branch_id: int
    gate_id: int
    lane_id: int
    vehicle_class: int
    cash: int = 0
    official_operational: int = 0
    official_partner: int = 0
    official_employee: int = 0
    e_flo: int = 0
    e_mandiri: int = 0
    e_bri: int = 0
    e_bni: int = 0
    e_bca: int = 0
    e_nobu: int = 0
    e_dki: int = 0
    e_mega: int = 0

    @property
    def total_etoll(self) -> int:
        return (self.e_mandiri + self.e_bri + self.e_bni + self.e_bca
                + self.e_nobu + self.e_dki + self.e_mega)

    @property
    def total_official_pass(self) -> int:
        return self.official_operational + self.official_partner + self.official_employee

    @property
    def total_all(self) -> int:
        return self.cash + self.total_etoll + self.e_flo + self.total_official_pass

    @property
    def total_etf(self) -> int:
        return self.total_etoll + self.cash + self.e_flo

    def value_for(self, method: PaymentMethod) -> int:
        if method == PaymentMethod.TUNAI:
            return self.cash
        if method == PaymentMethod.ETOLL:
            return self.total_etoll
        if method == PaymentMethod.FLO:
            return self.e_flo
        if method == PaymentMethod.KTP:
            return self.total_official_pass
        if method == PaymentMethod.KESELURUHAN:
            return self.total_all
        if method == PaymentMethod.ETF:
            return self.total_etf
        return 0


@dataclass
class ClassTotals:
    """
    Running sums for one vehicle class of a report row.
    """
    cash: int = 0
    official_pass: int = 0
    flo: int = 0
    etoll: int = 0
    total_all: int = 0
    etf: int = 0

    def add(self, record: TrafficRecord) -> None:
        self.cash += record.cash
        self.official_pass += record.total_official_pass
        self.flo += record.e_flo
        self.etoll += record.total_etoll
        self.total_all += record.total_all
        self.etf += record.total_etf

    def value_for(self, method: PaymentMethod) -> int:
        return {
            PaymentMethod.TUNAI: self.cash,
            PaymentMethod.KTP: self.official_pass,
            PaymentMethod.FLO: self.flo,
            PaymentMethod.ETOLL: self.etoll,
            PaymentMethod.KESELURUHAN: self.total_all,
            PaymentMethod.ETF: self.etf,
        }[method]

    def to_dict(self) -> Dict[str, int]:
        return {
            PaymentMethod.TUNAI.value: self.cash,
            PaymentMethod.KTP.value: self.official_pass,
            PaymentMethod.FLO.value: self.flo,
            PaymentMethod.ETOLL.value: self.etoll,
            PaymentMethod.KESELURUHAN.value: self.total_all,
            PaymentMethod.ETF.value: self.etf,
        }


@dataclass
class ReportRow:
    """
    One line of the daily report: a (branch, gate, lane, date) group.
    """
    branch_id: int
    gate_id: int
    branch_name: str
    gate_name: str
    lane_id: int
    date: str
    day_name: str
    per_class: Dict[int, ClassTotals] = field(default_factory=dict)

    @property
    def key(self) -> tuple:
        return (self.branch_id, self.gate_id, self.lane_id, self.date)

    def class_totals(self, vehicle_class: int) -> ClassTotals:
        if vehicle_class not in self.per_class:
            self.per_class[vehicle_class] = ClassTotals()
        return self.per_class[vehicle_class]

    def value(self, vehicle_class: int, method: PaymentMethod) -> int:
        totals = self.per_class.get(vehicle_class)
        return totals.value_for(method) if totals else 0

    def total(self, method: PaymentMethod) -> int:
        return sum(self.value(c, method) for c in VEHICLE_CLASSES)

    def to_dict(self) -> Dict:
        return {
            "ruas": self.branch_name,
            "gerbang": self.gate_name,
            "gardu": self.lane_id,
            "tanggal": self.date,
            "hari": self.day_name,
            "gol": {str(c): t.to_dict() for c, t in sorted(self.per_class.items())},
        }


@dataclass
class TotalsRow:
    """
    A rendered table line for a single payment method.
    kind is 'data', 'subtotal' or 'grandtotal'.
    """
    kind: str
    label: str
    values: Dict[int, int]
    total: int
    row: Optional[ReportRow] = None

    def to_dict(self, method: PaymentMethod) -> Dict:
        data = {
            "type": self.kind,
            "label": self.label,
            "metode": method.display_name if self.kind == "data" else "",
            "total": self.total,
        }
        for c in VEHICLE_CLASSES:
            data[f"gol{c}"] = self.values.get(c, 0)
        if self.row is not None:
            data.update({
                "ruas": self.row.branch_name,
                "gerbang": self.row.gate_name,
                "gardu": self.row.lane_id,
                "hari": self.row.day_name,
                "tanggal": self.row.date,
            })
        return data


@dataclass(frozen=True)
class LalinFilters:
    tanggal: Optional[str] = None
    search: Optional[str] = None


@dataclass
class DashboardData:
    by_payment_method: Dict[str, int] = field(default_factory=dict)
    by_shift: Dict[str, int] = field(default_factory=dict)
    by_gate: Dict[str, int] = field(default_factory=dict)
    by_branch: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            "byPaymentMethod": dict(self.by_payment_method),
            "byShift": dict(self.by_shift),
            "byGerbang": dict(self.by_gate),
            "byRuas": dict(self.by_branch),
        }


@dataclass
class ReportPage:
    rows: List[ReportRow]
    total_pages: int
    current_page: int
    total_records: int = 0
