"""
Aggregation of traffic records into the daily report.

Records are grouped by (branch, gate, lane, date). Each group keeps one
ClassTotals per vehicle class holding every payment-method bucket, so the
same grouped rows can be rendered for any payment method.

Records whose gate is missing from the gate list are kept and labelled
"Ruas <branch_id>" / "Gerbang <gate_id>", so report totals always match the
raw data.
"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from ..domain import PaymentMethod, ReportRow, TotalsRow, TrafficRecord, VEHICLE_CLASSES
from ...common.logging import setup_logger
from ...gerbang.domain import GateRecord

logger = setup_logger(__name__)

DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

SUBTOTAL_LABEL = "Total Lalin {ruas}"
GRAND_TOTAL_LABEL = "Total Lalin Keseluruhan"


def day_name(date_str: str) -> str:
    """Indonesian weekday for a YYYY-MM-DD date, empty when unparsable."""
    try:
        return DAY_NAMES[datetime.strptime(date_str[:10], "%Y-%m-%d").weekday()]
    except (TypeError, ValueError):
        return ""


def branch_placeholder(branch_id: int) -> str:
    return f"Ruas {branch_id}"


def gate_placeholder(gate_id: int) -> str:
    return f"Gerbang {gate_id}"


class GateDirectory:
    """
    Name lookup for gates and branches with placeholder fallback.
    """
    def __init__(self, gates: Iterable[GateRecord]):
        self._gates: Dict[Tuple[int, int], GateRecord] = {}
        self._branches: Dict[int, str] = {}
        for gate in gates:
            self._gates[(gate.branch_id, gate.id)] = gate
            self._branches.setdefault(gate.branch_id, gate.branch_name)
        self._warned = set()

    def names_for(self, branch_id: int, gate_id: int) -> Tuple[str, str]:
        gate = self._gates.get((branch_id, gate_id))
        if gate is not None:
            return gate.branch_name, gate.gate_name

        if (branch_id, gate_id) not in self._warned:
            self._warned.add((branch_id, gate_id))
            logger.warning(f"Unknown gerbang {gate_id} in ruas {branch_id}, using placeholder labels")
        branch_name = self._branches.get(branch_id) or branch_placeholder(branch_id)
        return branch_name, gate_placeholder(gate_id)

    def branch_name(self, branch_id: int) -> str:
        return self._branches.get(branch_id) or branch_placeholder(branch_id)


def aggregate_report(records: Iterable[TrafficRecord], gates: Iterable[GateRecord]) -> List[ReportRow]:
    """
    Groups records into ReportRows, in order of first appearance.
    """
    directory = GateDirectory(gates)
    grouped: Dict[Tuple[int, int, int, str], ReportRow] = {}

    for record in records:
        key = (record.branch_id, record.gate_id, record.lane_id, record.date)
        row = grouped.get(key)
        if row is None:
            branch_name, gate_name = directory.names_for(record.branch_id, record.gate_id)
            row = ReportRow(
                branch_id=record.branch_id,
                gate_id=record.gate_id,
                branch_name=branch_name,
                gate_name=gate_name,
                lane_id=record.lane_id,
                date=record.date,
                day_name=day_name(record.date),
            )
            grouped[key] = row

        row.class_totals(record.vehicle_class).add(record)

    return list(grouped.values())


def filter_rows(rows: Iterable[ReportRow], search: Optional[str]) -> List[ReportRow]:
    """Keeps rows whose branch or gate name contains the search term."""
    if not search or not search.strip():
        return list(rows)
    term = search.strip().lower()
    return [r for r in rows if term in r.branch_name.lower() or term in r.gate_name.lower()]


def sort_rows(rows: Iterable[ReportRow]) -> List[ReportRow]:
    # Stable: rows of the same branch keep their API order
    return sorted(rows, key=lambda r: r.branch_name.casefold())


def build_table_rows(rows: Iterable[ReportRow], method: PaymentMethod) -> List[TotalsRow]:
    """
    Data rows sorted by branch name, then one subtotal per branch (same
    order), then the grand total.
    """
    sorted_rows = sort_rows(rows)
    if not sorted_rows:
        return []

    table: List[TotalsRow] = []
    branch_labels: Dict[int, str] = {}
    branch_totals: Dict[int, Dict[int, int]] = {}
    grand = {c: 0 for c in VEHICLE_CLASSES}

    for row in sorted_rows:
        values = {c: row.value(c, method) for c in VEHICLE_CLASSES}
        table.append(TotalsRow(
            kind="data",
            label=str(len(table) + 1),
            values=values,
            total=sum(values.values()),
            row=row,
        ))

        branch_labels.setdefault(row.branch_id, row.branch_name)
        subtotal = branch_totals.setdefault(row.branch_id, {c: 0 for c in VEHICLE_CLASSES})
        for c, v in values.items():
            subtotal[c] += v
            grand[c] += v

    for branch_id, values in branch_totals.items():
        table.append(TotalsRow(
            kind="subtotal",
            label=SUBTOTAL_LABEL.format(ruas=branch_labels[branch_id]),
            values=values,
            total=sum(values.values()),
        ))

    table.append(TotalsRow(
        kind="grandtotal",
        label=GRAND_TOTAL_LABEL,
        values=grand,
        total=sum(grand.values()),
    ))
    return table
