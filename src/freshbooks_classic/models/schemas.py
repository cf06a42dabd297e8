"""Pydantic models for FreshBooks Classic request and response documents."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..timestamps import Timestamp


def _as_list(value: Any) -> list:
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def _collect(value: Any, item_tag: str, field: Optional[str] = None) -> list:
    """Unwrap ``<tasks><task>...</task></tasks>`` style containers.

    Already-built lists pass through so records can also be constructed
    directly in Python.
    """
    if not isinstance(value, dict):
        return _as_list(value)
    items = _as_list(value.get(item_tag))
    if field is None:
        return items
    collected = []
    for item in items:
        if isinstance(item, dict):
            item = item.get(field)
        if item not in (None, ""):
            collected.append(item)
    return collected


class Record(BaseModel):
    """Base for entity records decoded from XML elements.

    Empty elements are treated as absent so the field keeps its default.
    """

    class Config:
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None and v != ""}
        return data


class Pagination(BaseModel):
    """Paging attributes carried by every list section."""

    page: int = 0
    total: int = 0
    per_page: int = 0
    pages: int = 0


class Client(Record):
    """A client record."""

    client_id: Optional[int] = None
    organization: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    username: str = ""
    currency_code: str = ""
    updated: Optional[Timestamp] = None

    @property
    def name(self) -> str:
        """Organization, or the contact's name when there is none."""
        if self.organization:
            return self.organization
        return f"{self.first_name} {self.last_name}".strip() or "Unknown"


class Task(Record):
    """A billable task."""

    task_id: Optional[int] = None
    name: str = ""
    description: str = ""
    billable: Optional[bool] = None
    rate: Optional[Decimal] = None


class User(Record):
    """A staff member."""

    staff_id: Optional[int] = None
    email: str = ""
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    rate: Optional[Decimal] = None

    @property
    def display_name(self) -> str:
        """Combined display name."""
        return f"{self.first_name} {self.last_name}".strip() or self.email or "Unknown"


class Project(Record):
    """A project with the tasks and staff assigned to it."""

    project_id: Optional[int] = None
    client_id: Optional[int] = None
    name: str = ""
    description: str = ""
    billing_method: str = ""
    rate: Optional[Decimal] = None
    task_ids: list[int] = Field(default=[], alias="tasks")
    staff_ids: list[int] = Field(default=[], alias="staff")

    @field_validator("task_ids", mode="before")
    @classmethod
    def _unwrap_tasks(cls, value: Any) -> list:
        return _collect(value, "task", "task_id")

    @field_validator("staff_ids", mode="before")
    @classmethod
    def _unwrap_staff(cls, value: Any) -> list:
        return _collect(value, "staff", "staff_id")


class TimeEntry(Record):
    """A time entry.

    ``project_id``, ``task_id``, ``staff_id`` and ``date`` are required by the
    service when a time entry is sent; decoding does not enforce it.
    """

    time_entry_id: Optional[int] = None
    project_id: Optional[int] = None
    task_id: Optional[int] = None
    staff_id: Optional[int] = None
    date: Optional[dt.date] = None
    notes: str = ""
    hours: Optional[Decimal] = None
    billed: Optional[bool] = None


class Contractor(Record):
    """A contractor and the projects they work on."""

    contractor_id: Optional[int] = None
    name: str = ""
    email: str = ""
    rate: Optional[Decimal] = None
    task_id: Optional[int] = None
    projects: list[Project] = []

    @field_validator("projects", mode="before")
    @classmethod
    def _unwrap_projects(cls, value: Any) -> list:
        return _collect(value, "project")


class LineItem(Record):
    """A line item on an invoice."""

    line_id: Optional[int] = None
    name: str = ""
    description: str = ""
    amount: Optional[Decimal] = None
    unit_cost: Optional[Decimal] = None
    quantity: Optional[Decimal] = None
    type: str = ""


class Invoice(Record):
    """An invoice record."""

    invoice_id: Optional[int] = None
    client_id: Optional[int] = None
    number: str = ""
    amount: Optional[Decimal] = None
    amount_outstanding: Optional[Decimal] = None
    paid: Optional[Decimal] = None
    currency_code: str = ""
    status: str = ""
    date: Optional[Timestamp] = None
    updated: Optional[Timestamp] = None
    organization: str = ""
    lines: list[LineItem] = []

    @field_validator("lines", mode="before")
    @classmethod
    def _unwrap_lines(cls, value: Any) -> list:
        return _collect(value, "line")


class ClientList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    clients: list[Client] = []


class ProjectList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    projects: list[Project] = []


class TaskList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    tasks: list[Task] = []


class UserList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    users: list[User] = []


class TimeEntryList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    time_entries: list[TimeEntry] = []


class ContractorList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    contractors: list[Contractor] = []


class InvoiceList(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)
    invoices: list[Invoice] = []


class Request(BaseModel):
    """A request document.

    ``method`` is always stamped by the operation being invoked. String
    filters are omitted from the wire when empty, date filters when None.
    """

    method: str = ""
    per_page: int = 0
    page: int = 0

    email: str = ""
    username: str = ""
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    update_from: Optional[dt.datetime] = None
    update_to: Optional[dt.datetime] = None
    task_id: str = ""
    project_id: str = ""
    client_id: str = ""
    invoice_id: str = ""
    time_entry: Optional[TimeEntry] = None

    class Config:
        extra = "forbid"

    @field_validator("task_id", "project_id", "client_id", "invoice_id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def with_defaults(self, method: str, per_page: int) -> "Request":
        """Copy with the method stamped and non-positive paging replaced."""
        return self.model_copy(update={
            "method": method,
            "page": self.page if self.page >= 1 else 1,
            "per_page": self.per_page if self.per_page >= 1 else per_page,
        })


class Response(BaseModel):
    """A decoded reply.

    Only the section matching the invoked method is filled in by the
    service; a non-empty ``error`` means failure whatever the sections hold.
    """

    status: str = ""
    error: str = ""
    code: str = ""
    clients: ClientList = Field(default_factory=ClientList)
    projects: ProjectList = Field(default_factory=ProjectList)
    tasks: TaskList = Field(default_factory=TaskList)
    users: UserList = Field(default_factory=UserList, alias="staff_members")
    time_entries: TimeEntryList = Field(default_factory=TimeEntryList)
    contractors: ContractorList = Field(default_factory=ContractorList)
    invoices: InvoiceList = Field(default_factory=InvoiceList)

    class Config:
        populate_by_name = True

    @property
    def failed(self) -> bool:
        return bool(self.error)
