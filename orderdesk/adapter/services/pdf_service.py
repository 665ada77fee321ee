"""ReportLab PDF Generation Service Implementation

Implements invoice rendering with the ReportLab canvas.

Rendering happens in two steps. layout_invoice() walks the invoice with a
single vertical cursor (millimetres from the top of an A4 page) and
produces a page plan of draw operations; _draw() replays that plan onto a
canvas. Page breaks are decided entirely in the layout step.

Layout rules:
- Header and "Bill To" block on page 1 only; the issuer block, when
  configured, sits opposite the invoice details
- Column header on page 1 only; continuation pages start at the top margin
- A row starts a new page when the cursor is past the bottom limit
- No separator after the last item or before a page break
- Totals block follows the last row; it moves to a new page if it would
  cross the bottom limit
- Notes are word-wrapped and may continue onto further pages
- Footer caption on every page
"""

import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import List, Union

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from orderdesk.app.services.pdf_service import PdfService
from orderdesk.domain.errors import DocumentRenderError
from orderdesk.domain.invoice import Invoice
from orderdesk.domain.line_item import LineItem
from orderdesk.domain.money import display_tax_rate, round_money

logger = logging.getLogger(__name__)

PAGE_HEIGHT_MM = 297
LEFT_MM = 20
RIGHT_MM = 190
TOP_MARGIN_MM = 20
BOTTOM_LIMIT_MM = 260
FOOTER_Y_MM = 280
CENTER_X_MM = 105

TABLE_HEADER_Y_MM = 125
TABLE_HEADER_HEIGHT_MM = 8
FIRST_ROW_Y_MM = 140
ROW_HEIGHT_MM = 8
SEPARATOR_OFFSET_MM = 3

COLUMN_X_MM = {
    "description": 22,
    "quantity": 120,
    "unit_price": 140,
    "total": 170,
}

TOTALS_GAP_MM = 10
TAX_LINE_OFFSET_MM = 7
TOTAL_LINE_OFFSET_MM = 10
TOTALS_BLOCK_HEIGHT_MM = TAX_LINE_OFFSET_MM + TOTAL_LINE_OFFSET_MM

NOTES_GAP_MM = 20
NOTES_FIRST_LINE_OFFSET_MM = 6
NOTES_LINE_HEIGHT_MM = 5
NOTES_WIDTH_MM = 170

DESCRIPTION_MAX_CHARS = 50
FOOTER_TEXT = "Thank you for your business!"
ISSUER_MAX_ADDRESS_LINES = 4

REGULAR = "Helvetica"
BOLD = "Helvetica-Bold"

HEADER_FILL = colors.HexColor("#3B82F6")
SEPARATOR_COLOR = colors.HexColor("#C8C8C8")
FOOTER_COLOR = colors.HexColor("#808080")


@dataclass
class TextOp:
    x: float
    y: float
    text: str
    font: str = REGULAR
    size: float = 10
    align: str = "left"
    color: colors.Color = colors.black

    def draw(self, pdf: canvas.Canvas) -> None:
        pdf.setFont(self.font, self.size)
        pdf.setFillColor(self.color)
        x, y = self.x * mm, (PAGE_HEIGHT_MM - self.y) * mm
        if self.align == "center":
            pdf.drawCentredString(x, y, self.text)
        elif self.align == "right":
            pdf.drawRightString(x, y, self.text)
        else:
            pdf.drawString(x, y, self.text)


@dataclass
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: colors.Color = SEPARATOR_COLOR
    width: float = 0.5

    def draw(self, pdf: canvas.Canvas) -> None:
        pdf.setStrokeColor(self.color)
        pdf.setLineWidth(self.width)
        pdf.line(
            self.x1 * mm,
            (PAGE_HEIGHT_MM - self.y1) * mm,
            self.x2 * mm,
            (PAGE_HEIGHT_MM - self.y2) * mm,
        )


@dataclass
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill: colors.Color = HEADER_FILL

    def draw(self, pdf: canvas.Canvas) -> None:
        pdf.setFillColor(self.fill)
        pdf.rect(
            self.x * mm,
            (PAGE_HEIGHT_MM - self.y - self.height) * mm,
            self.width * mm,
            self.height * mm,
            stroke=0,
            fill=1,
        )


DrawOp = Union[TextOp, LineOp, RectOp]


@dataclass
class PageLayout:
    """Draw operations for one page and the item rows placed on it"""

    number: int
    ops: List[DrawOp] = field(default_factory=list)
    item_indexes: List[int] = field(default_factory=list)
    has_totals: bool = False

    def texts(self) -> List[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]


@dataclass
class InvoiceLayout:
    pages: List[PageLayout] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def add_page(self) -> PageLayout:
        page = PageLayout(number=len(self.pages) + 1)
        self.pages.append(page)
        return page


def truncate_description(description: str) -> str:
    return str(description or "No description")[:DESCRIPTION_MAX_CHARS]


def format_quantity(item: LineItem) -> str:
    return f"{item.quantity:,.6f}".rstrip("0").rstrip(".")


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Produces a fixed-layout A4 invoice with coordinate-based pagination.
    """

    def __init__(
        self,
        currency_symbol: str = "$",
        issuer_name: str = "",
        issuer_address: str = "",
    ):
        self.currency_symbol = currency_symbol
        self.issuer_name = issuer_name
        self.issuer_address = issuer_address

    def render_invoice(self, invoice: Invoice) -> bytes:
        """
        Render an invoice as a paginated PDF

        Args:
            invoice: Invoice to render

        Returns:
            PDF document as bytes

        Raises:
            DocumentRenderError: layout or drawing failed
        """
        try:
            layout = self.layout_invoice(invoice)
            pdf_bytes = self._draw(invoice, layout)
        except Exception as e:
            logger.error(f"Rendering invoice {invoice.invoice_number} failed: {e}")
            raise DocumentRenderError(
                f"Failed to render invoice {invoice.invoice_number}: {e}"
            ) from e

        logger.info(
            f"Rendered invoice {invoice.invoice_number} "
            f"({layout.page_count} page(s), {len(pdf_bytes)} bytes)"
        )
        return pdf_bytes

    def layout_invoice(self, invoice: Invoice) -> InvoiceLayout:
        """
        Lay the invoice out onto pages without drawing anything

        Args:
            invoice: Invoice to lay out

        Returns:
            InvoiceLayout with one PageLayout per output page
        """
        layout = InvoiceLayout()
        page = layout.add_page()

        self._layout_header(page, invoice)
        cursor = self._layout_table_header(page)

        items = invoice.items
        for index, item in enumerate(items):
            if cursor > BOTTOM_LIMIT_MM:
                page = layout.add_page()
                cursor = TOP_MARGIN_MM

            self._layout_row(page, item, cursor)
            page.item_indexes.append(index)
            cursor += ROW_HEIGHT_MM

            is_last = index == len(items) - 1
            if not is_last and cursor <= BOTTOM_LIMIT_MM:
                page.ops.append(
                    LineOp(
                        LEFT_MM,
                        cursor - SEPARATOR_OFFSET_MM,
                        RIGHT_MM,
                        cursor - SEPARATOR_OFFSET_MM,
                    )
                )

        cursor += TOTALS_GAP_MM
        if cursor + TOTALS_BLOCK_HEIGHT_MM > BOTTOM_LIMIT_MM:
            page = layout.add_page()
            cursor = TOP_MARGIN_MM
        cursor = self._layout_totals(page, invoice, cursor)

        if invoice.notes:
            page = self._layout_notes(layout, page, invoice.notes, cursor + NOTES_GAP_MM)

        for each_page in layout.pages:
            each_page.ops.append(
                TextOp(
                    CENTER_X_MM,
                    FOOTER_Y_MM,
                    FOOTER_TEXT,
                    size=8,
                    align="center",
                    color=FOOTER_COLOR,
                )
            )

        return layout

    def _money(self, amount) -> str:
        return f"{self.currency_symbol}{round_money(amount):,.2f}"

    def _layout_header(self, page: PageLayout, invoice: Invoice) -> None:
        page.ops.append(TextOp(CENTER_X_MM, 20, "INVOICE", font=BOLD, size=24, align="center"))

        details = [
            f"Invoice #: {invoice.invoice_number}",
            f"Issue Date: {invoice.issue_date.strftime('%Y-%m-%d')}",
            f"Due Date: {invoice.due_date.strftime('%Y-%m-%d')}",
            f"Status: {invoice.status.value}",
        ]
        for offset, line in enumerate(details):
            page.ops.append(TextOp(LEFT_MM, 40 + offset * 6, line))

        self._layout_issuer(page)

        page.ops.append(TextOp(LEFT_MM, 75, "Bill To:", font=BOLD))
        y = 81
        page.ops.append(TextOp(LEFT_MM, y, invoice.client.name))

        # Absent contact fields are skipped, not left as blank lines
        optional_lines = [
            f"Client Ref: {invoice.client_reference_code}"
            if invoice.client_reference_code else "",
            invoice.client.email,
            invoice.client.phone,
            invoice.client.location,
        ]
        for line in optional_lines:
            if line:
                y += 6
                page.ops.append(TextOp(LEFT_MM, y, line))

    def _layout_issuer(self, page: PageLayout) -> None:
        y = 40
        if self.issuer_name:
            page.ops.append(TextOp(RIGHT_MM, y, self.issuer_name, font=BOLD, align="right"))
            y += 6
        address_lines = [line.strip() for line in (self.issuer_address or "").splitlines() if line.strip()]
        for line in address_lines[:ISSUER_MAX_ADDRESS_LINES]:
            page.ops.append(TextOp(RIGHT_MM, y, line, align="right"))
            y += 6

    def _layout_table_header(self, page: PageLayout) -> float:
        page.ops.append(
            RectOp(LEFT_MM, TABLE_HEADER_Y_MM, RIGHT_MM - LEFT_MM, TABLE_HEADER_HEIGHT_MM)
        )
        label_y = TABLE_HEADER_Y_MM + 5.5
        for key, label in (
            ("description", "Description"),
            ("quantity", "Qty"),
            ("unit_price", "Price"),
            ("total", "Total"),
        ):
            page.ops.append(
                TextOp(COLUMN_X_MM[key], label_y, label, font=BOLD, color=colors.white)
            )
        return FIRST_ROW_Y_MM

    def _layout_row(self, page: PageLayout, item: LineItem, y: float) -> None:
        page.ops.extend(
            [
                TextOp(COLUMN_X_MM["description"], y, truncate_description(item.description)),
                TextOp(COLUMN_X_MM["quantity"], y, format_quantity(item)),
                TextOp(COLUMN_X_MM["unit_price"], y, self._money(item.unit_price)),
                TextOp(COLUMN_X_MM["total"], y, self._money(item.total_price)),
            ]
        )

    def _layout_totals(self, page: PageLayout, invoice: Invoice, y: float) -> float:
        label_x = COLUMN_X_MM["unit_price"]
        value_x = COLUMN_X_MM["total"]

        page.ops.append(TextOp(label_x, y, "Subtotal:"))
        page.ops.append(TextOp(value_x, y, self._money(invoice.subtotal)))

        y += TAX_LINE_OFFSET_MM
        rate = display_tax_rate(invoice.tax_rate)
        page.ops.append(TextOp(label_x, y, f"Tax ({rate:.2f}%):"))
        page.ops.append(TextOp(value_x, y, self._money(invoice.tax_amount)))

        y += TOTAL_LINE_OFFSET_MM
        page.ops.append(TextOp(label_x, y, "Total:", font=BOLD, size=12))
        page.ops.append(TextOp(value_x, y, self._money(invoice.total_amount), font=BOLD, size=12))

        page.has_totals = True
        return y

    def _layout_notes(
        self, layout: InvoiceLayout, page: PageLayout, notes: str, y: float
    ) -> PageLayout:
        if y > BOTTOM_LIMIT_MM:
            page = layout.add_page()
            y = TOP_MARGIN_MM
        page.ops.append(TextOp(LEFT_MM, y, "Notes:", font=BOLD))

        y += NOTES_FIRST_LINE_OFFSET_MM
        for line in simpleSplit(notes, REGULAR, 10, NOTES_WIDTH_MM * mm):
            if y > BOTTOM_LIMIT_MM:
                page = layout.add_page()
                y = TOP_MARGIN_MM
            page.ops.append(TextOp(LEFT_MM, y, line))
            y += NOTES_LINE_HEIGHT_MM
        return page

    def _draw(self, invoice: Invoice, layout: InvoiceLayout) -> bytes:
        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle(f"Invoice {invoice.invoice_number}")
        pdf.setSubject(f"Invoice for {invoice.client.name}")

        for page in layout.pages:
            for op in page.ops:
                op.draw(pdf)
            pdf.showPage()

        pdf.save()
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
