"""PDF Generation Service Interface

Defines the contract for rendering invoice documents.
"""

from abc import ABC, abstractmethod
from orderdesk.domain.invoice import Invoice


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides invoice document rendering.
    """

    @abstractmethod
    def render_invoice(self, invoice: Invoice) -> bytes:
        """
        Render an invoice as a paginated PDF

        Args:
            invoice: Invoice to render

        Returns:
            PDF document as bytes

        Raises:
            DocumentRenderError: document could not be produced; no
                partial output is returned
        """
        pass

    def filename_for(self, invoice: Invoice) -> str:
        """File name the document is delivered under"""
        return f"{invoice.invoice_number}.pdf"
