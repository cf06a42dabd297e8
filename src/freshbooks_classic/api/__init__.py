"""FreshBooks Classic API modules."""

from .client import FreshBooksClient
from .clients import ClientsAPI
from .contractors import ContractorsAPI
from .invoices import InvoicesAPI
from .time_entries import TimeEntriesAPI

__all__ = [
    "FreshBooksClient",
    "ClientsAPI",
    "ContractorsAPI",
    "InvoicesAPI",
    "TimeEntriesAPI",
]
