"""InvoiceStats Use Case

Dashboard figures over all invoices.
"""

from libs.result import Result, Return, Error
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from orderdesk.domain.invoice import InvoiceStatus
from orderdesk.domain.money import ZERO, round_money
from .dtos import InvoiceStatsDTO


class InvoiceStats:
    """
    Use case: Invoice statistics

    Revenue is the sum of total_amount over Paid invoices only.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[InvoiceStatsDTO]:
        try:
            invoices = await self.invoice_repo.list_all()
        except Exception as e:
            return Return.err(
                Error(
                    code="INVOICE_STATS_FAILED",
                    message="Failed to compute invoice statistics",
                    reason=str(e),
                )
            )

        paid = [invoice for invoice in invoices if invoice.status == InvoiceStatus.PAID]
        revenue = sum((invoice.total_amount for invoice in paid), ZERO)

        return Return.ok(
            InvoiceStatsDTO(
                total_invoices=len(invoices),
                paid_invoices=len(paid),
                total_revenue=round_money(revenue),
            )
        )
