"""
Infrastructure module initialization.
"""
from .repositories import LalinApiRepository, record_from_row
from .pdf_exporter import ReportPdfExporter, report_filename

__all__ = ["LalinApiRepository", "record_from_row", "ReportPdfExporter", "report_filename"]
