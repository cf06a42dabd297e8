"""Data models for FreshBooks Classic requests and replies."""

from .schemas import (
    Client,
    ClientList,
    Contractor,
    ContractorList,
    Invoice,
    InvoiceList,
    LineItem,
    Pagination,
    Project,
    ProjectList,
    Request,
    Response,
    Task,
    TaskList,
    TimeEntry,
    TimeEntryList,
    User,
    UserList,
)

__all__ = [
    "Client",
    "ClientList",
    "Contractor",
    "ContractorList",
    "Invoice",
    "InvoiceList",
    "LineItem",
    "Pagination",
    "Project",
    "ProjectList",
    "Request",
    "Response",
    "Task",
    "TaskList",
    "TimeEntry",
    "TimeEntryList",
    "User",
    "UserList",
]
