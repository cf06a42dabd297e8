"""UI components for terminal output."""

from .tables import ClientTable, ContractorTable, InvoiceTable, TimeEntryTable

__all__ = [
    "ClientTable",
    "ContractorTable",
    "InvoiceTable",
    "TimeEntryTable",
]
