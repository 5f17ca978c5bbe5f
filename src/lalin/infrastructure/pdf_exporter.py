"""
PDF rendering of the daily lalin report with reportlab.
"""
import io
from datetime import datetime
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from ..domain import PaymentMethod, TotalsRow, VEHICLE_CLASSES, CLASS_LABELS
from ...common.logging import setup_logger

logger = setup_logger(__name__)

TITLE = "Laporan Lalu Lintas Per Hari"
HEADERS = ["No.", "Ruas", "Gerbang", "Gardu", "Hari", "Tanggal", "Metode Pembayaran"] \
    + [CLASS_LABELS[c] for c in VEHICLE_CLASSES] + ["Total Lalin"]
COLUMN_WIDTHS_MM = [12, 32, 32, 14, 18, 22, 30, 18, 18, 18, 18, 18, 21]
HEADER_COLOR = colors.Color(66 / 255, 139 / 255, 202 / 255)
STRIPE_COLOR = colors.Color(245 / 255, 245 / 255, 245 / 255)


def report_filename(tanggal: Optional[str]) -> str:
    day = tanggal or datetime.now().strftime("%Y-%m-%d")
    return f"Laporan_Lalin_{day.replace('-', '_')}.pdf"


class ReportPdfExporter:
    """
    Renders TotalsRows (data, subtotal and grand-total lines) as a landscape A4 table.
    """

    def __init__(self, font_size: int = 8):
        self.font_size = font_size
        self.styles = getSampleStyleSheet()

    def _table_data(self, rows: List[TotalsRow], method: PaymentMethod) -> List[list]:
        data = [list(HEADERS)]
        for row in rows:
            values = [row.values.get(c, 0) for c in VEHICLE_CLASSES] + [row.total]
            if row.kind == "data" and row.row is not None:
                data.append([
                    row.label,
                    row.row.branch_name,
                    row.row.gate_name,
                    row.row.lane_id,
                    row.row.day_name,
                    row.row.date,
                    method.display_name,
                ] + values)
            else:
                # Label spans the seven descriptive columns
                data.append([row.label, "", "", "", "", "", ""] + values)
        return data

    def _table_style(self, rows: List[TotalsRow]) -> TableStyle:
        commands = [
            ('BACKGROUND', (0, 0), (-1, 0), HEADER_COLOR),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), self.font_size),
            ('ALIGN', (7, 0), (-1, -1), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.25, colors.grey),
            ('TOPPADDING', (0, 0), (-1, -1), 2),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
        ]
        for index, row in enumerate(rows, start=1):
            if row.kind == "data":
                if index % 2 == 0:
                    commands.append(('BACKGROUND', (0, index), (-1, index), STRIPE_COLOR))
                continue
            commands += [
                ('SPAN', (0, index), (6, index)),
                ('ALIGN', (0, index), (6, index), 'CENTER'),
                ('FONTNAME', (0, index), (-1, index), 'Helvetica-Bold'),
            ]
            if row.kind == "grandtotal":
                commands += [
                    ('BACKGROUND', (0, index), (-1, index), colors.HexColor('#374151')),
                    ('TEXTCOLOR', (0, index), (-1, index), colors.white),
                ]
            else:
                commands.append(('BACKGROUND', (0, index), (-1, index), colors.HexColor('#E5E7EB')))
        return TableStyle(commands)

    def _draw_footer(self, canvas, doc, printed_at: str):
        canvas.saveState()
        canvas.setFont('Helvetica', 10)
        width, _ = doc.pagesize
        canvas.drawString(12 * mm, 10 * mm, f"Halaman {canvas.getPageNumber()} dari {doc.total_pages}")
        canvas.drawRightString(width - 12 * mm, 10 * mm, f"Dicetak pada: {printed_at}")
        canvas.restoreState()

    def render(self, rows: List[TotalsRow], method: PaymentMethod, tanggal: Optional[str] = None) -> bytes:
        """
        Returns the PDF document as bytes.
        The document is built twice so the footer knows the page count.
        """
        day = tanggal or datetime.now().strftime("%Y-%m-%d")
        printed_at = datetime.now().strftime("%d/%m/%Y %H.%M.%S")

        table_data = self._table_data(rows, method)
        table_style = self._table_style(rows)

        def footer(canvas, doc):
            self._draw_footer(canvas, doc, printed_at)

        total_pages = 0
        for _ in range(2):
            table = Table(table_data, colWidths=[w * mm for w in COLUMN_WIDTHS_MM], repeatRows=1)
            table.setStyle(table_style)
            elements = [
                Paragraph(TITLE, self.styles['Heading1']),
                Paragraph(f"Tanggal: {day}", self.styles['Normal']),
                Spacer(1, 6 * mm),
                table,
            ]

            buffer = io.BytesIO()
            doc = SimpleDocTemplate(
                buffer,
                pagesize=landscape(A4),
                leftMargin=12 * mm,
                rightMargin=12 * mm,
                topMargin=14 * mm,
                bottomMargin=20 * mm,
                title=TITLE,
            )
            doc.total_pages = total_pages
            doc.build(elements, onFirstPage=footer, onLaterPages=footer)
            total_pages = doc.page

        logger.info(f"Rendered report PDF for {day}: {len(rows)} rows, {total_pages} pages")
        return buffer.getvalue()
