"""
Domain module initialization.
"""
from .payment_method import PaymentMethod
from .entities import (
    TrafficRecord,
    ClassTotals,
    ReportRow,
    TotalsRow,
    LalinFilters,
    DashboardData,
    ReportPage,
    VEHICLE_CLASSES,
    CLASS_LABELS,
)
from .repositories import LalinRepository
