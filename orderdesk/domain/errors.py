"""Domain exceptions"""


class DomainError(Exception):
    """Base class for domain rule violations"""


class InvoiceValidationError(DomainError):
    """Raised when an invoice cannot be built from the given order/client"""


class DocumentRenderError(DomainError):
    """Raised when an invoice document cannot be produced"""
