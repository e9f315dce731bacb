"""Domain errors raised by invoice services."""


class InvoiceOperationError(Exception):
    """A persistence step failed and the unit of work was rolled back."""


class InvoiceNumberAllocationError(InvoiceOperationError):
    """The office settings counter could not be read or advanced."""
