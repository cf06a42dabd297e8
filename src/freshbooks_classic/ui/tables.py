"""Rich table formatters for CLI output."""

from decimal import Decimal
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import Client, Contractor, Invoice, Pagination, TimeEntry


def pagination_caption(pagination: Optional[Pagination]) -> Optional[str]:
    if pagination is None or not pagination.total:
        return None
    return f"page {pagination.page} · {pagination.total} total · {pagination.per_page} per page"


class ClientTable:
    """Rich table formatter for clients."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(self, clients: list[Client], title: Optional[str] = None, pagination: Optional[Pagination] = None) -> Table:
        table = Table(title=title, caption=pagination_caption(pagination))

        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name", style="green")
        table.add_column("Email")
        table.add_column("Currency", style="dim")

        for client in clients:
            table.add_row(
                str(client.client_id or "-"),
                client.name,
                client.email or "-",
                client.currency_code or "-",
            )

        return table

    def print_table(self, clients: list[Client], title: Optional[str] = None, pagination: Optional[Pagination] = None) -> None:
        self.console.print(self.create_table(clients, title, pagination))


class TimeEntryTable:
    """Rich table formatter for time entries."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(
        self,
        entries: list[TimeEntry],
        title: Optional[str] = None,
        pagination: Optional[Pagination] = None,
        show_notes: bool = False,
    ) -> Table:
        """Create a Rich table from time entries with an hours total."""
        table = Table(title=title, caption=pagination_caption(pagination), show_footer=True)

        table.add_column("Date", style="cyan", no_wrap=True)
        table.add_column("Staff", style="green")
        table.add_column("Project", style="blue")
        table.add_column("Task", style="yellow")
        table.add_column("Hours", justify="right", style="magenta")
        if show_notes:
            table.add_column("Notes", max_width=30)

        total_hours = Decimal("0")
        for entry in entries:
            hours = entry.hours or Decimal("0")
            total_hours += hours
            cells = [
                entry.date.isoformat() if entry.date else "-",
                str(entry.staff_id or "-"),
                str(entry.project_id or "-"),
                str(entry.task_id or "-"),
                f"{hours:.2f}",
            ]
            if show_notes:
                note = entry.notes[:27] + "..." if len(entry.notes) > 30 else entry.notes
                cells.append(note)
            table.add_row(*cells)

        table.columns[3].footer = Text("TOTAL", style="bold")
        table.columns[4].footer = Text(f"{total_hours:.2f}", style="bold magenta")
        return table

    def print_table(
        self,
        entries: list[TimeEntry],
        title: Optional[str] = None,
        pagination: Optional[Pagination] = None,
        show_notes: bool = False,
    ) -> None:
        """Print the time entries table."""
        self.console.print(self.create_table(entries, title, pagination, show_notes))


class ContractorTable:
    """Rich table formatter for contractors."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(self, contractors: list[Contractor], title: Optional[str] = None, pagination: Optional[Pagination] = None) -> Table:
        table = Table(title=title, caption=pagination_caption(pagination))

        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name", style="green")
        table.add_column("Email")
        table.add_column("Rate", justify="right")
        table.add_column("Projects", style="blue")

        for contractor in contractors:
            projects = ", ".join(p.name or str(p.project_id) for p in contractor.projects)
            table.add_row(
                str(contractor.contractor_id or "-"),
                contractor.name or "-",
                contractor.email or "-",
                f"${contractor.rate:.2f}" if contractor.rate is not None else "-",
                projects or "-",
            )

        return table

    def print_table(self, contractors: list[Contractor], title: Optional[str] = None, pagination: Optional[Pagination] = None) -> None:
        self.console.print(self.create_table(contractors, title, pagination))


class InvoiceTable:
    """Rich table formatter for invoices."""

    STATUS_COLORS = {
        "paid": "green",
        "partial": "yellow",
        "viewed": "cyan",
        "sent": "blue",
        "draft": "dim",
        "auto-paid": "green",
        "retry": "red",
        "failed": "red",
        "disputed": "red",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def get_status_style(self, status: str) -> str:
        """Get Rich style for invoice status."""
        return self.STATUS_COLORS.get(status.lower(), "white")

    def create_table(
        self,
        invoices: list[Invoice],
        title: Optional[str] = None,
        pagination: Optional[Pagination] = None,
    ) -> Table:
        """Create a Rich table from invoices."""
        table = Table(title=title, caption=pagination_caption(pagination), show_footer=True)

        table.add_column("Invoice #", style="cyan", no_wrap=True)
        table.add_column("Client", style="green")
        table.add_column("Date", style="dim")
        table.add_column("Status", justify="center")
        table.add_column("Amount", justify="right")
        table.add_column("Outstanding", justify="right", style="yellow")

        total_amount = Decimal("0")
        total_outstanding = Decimal("0")

        for inv in invoices:
            amount = inv.amount or Decimal("0")
            outstanding = inv.amount_outstanding or Decimal("0")
            total_amount += amount
            total_outstanding += outstanding

            status = inv.status or "-"
            table.add_row(
                inv.number or str(inv.invoice_id),
                inv.organization or str(inv.client_id or "-"),
                inv.date.strftime("%Y-%m-%d") if inv.date else "-",
                Text(status, style=self.get_status_style(status)),
                f"{amount:.2f} {inv.currency_code}".strip(),
                f"{outstanding:.2f}",
            )

        table.columns[3].footer = Text("TOTAL", style="bold")
        table.columns[4].footer = Text(f"{total_amount:.2f}", style="bold")
        table.columns[5].footer = Text(f"{total_outstanding:.2f}", style="bold yellow")

        return table

    def print_table(
        self,
        invoices: list[Invoice],
        title: Optional[str] = None,
        pagination: Optional[Pagination] = None,
    ) -> None:
        """Print the invoices table."""
        self.console.print(self.create_table(invoices, title, pagination))
