"""CLI entry point for the FreshBooks Classic client."""

import json
import sys
from datetime import date, datetime
from typing import Any, Optional

import click
from pydantic import BaseModel
from rich.console import Console

from .api.client import FreshBooksClient
from .api.clients import ClientsAPI
from .api.contractors import ContractorsAPI
from .api.invoices import InvoicesAPI
from .api.time_entries import TimeEntriesAPI
from .config import load_config
from .models import Pagination
from .ui.tables import ClientTable, ContractorTable, InvoiceTable, TimeEntryTable

console = Console()

DATE = click.DateTime(formats=["%Y-%m-%d"])
TIMESTAMP = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S"])


def paging_options(func):
    """Attach the --page/--per-page/--all/--json options shared by list commands."""
    func = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(func)
    func = click.option("--all", "fetch_all", is_flag=True, help="Fetch every page")(func)
    func = click.option("--per-page", type=int, help="Results per page")(func)
    func = click.option("--page", type=int, help="Page number (default 1)")(func)
    return func


def as_date(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value else None


def open_client(ctx: click.Context) -> FreshBooksClient:
    """Build a client from the loaded configuration."""
    config = load_config()
    return FreshBooksClient(
        config.account,
        config.credential,
        per_page=config.per_page,
        verbose=ctx.obj.get("verbose", False),
    )


def print_json(items: list[BaseModel], pagination: Optional[Pagination]) -> None:
    output: dict[str, Any] = {
        "items": [item.model_dump(mode="json") for item in items],
        "pagination": pagination.model_dump() if pagination else None,
    }
    print(json.dumps(output, indent=2))


def run_listing(ctx: click.Context, api_class, filters: dict, page, per_page, fetch_all: bool):
    """Fetch one page, or every page with --all; returns (items, pagination)."""
    with open_client(ctx) as client:
        api = api_class(client)
        if fetch_all:
            return api.list_all(per_page=per_page, **filters), None
        return api.list(page=page, per_page=per_page, **filters)


@click.group()
@click.version_option(package_name="freshbooks-classic")
@click.option("--verbose", "-v", is_flag=True, help="Print request progress to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Command line access to the FreshBooks Classic XML API."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.group()
def clients():
    """Client commands."""
    pass


@clients.command("list")
@click.option("--email", help="Filter by client email")
@click.option("--username", help="Filter by client username")
@paging_options
@click.pass_context
def clients_list(ctx, email, username, page, per_page, fetch_all, as_json):
    """List clients."""
    try:
        filters = {"email": email, "username": username}
        items, pagination = run_listing(ctx, ClientsAPI, filters, page, per_page, fetch_all)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if as_json:
        print_json(items, pagination)
        return
    if not items:
        console.print("[yellow]No clients found.[/yellow]")
        return
    ClientTable(console).print_table(items, title="Clients", pagination=pagination)


@cli.group()
def time():
    """Time entry commands."""
    pass


@time.command("list")
@click.option("--project-id", help="Filter by project ID")
@click.option("--task-id", help="Filter by task ID")
@click.option("--from", "date_from", type=DATE, help="Start date (YYYY-MM-DD)")
@click.option("--to", "date_to", type=DATE, help="End date (YYYY-MM-DD)")
@click.option("--show-notes", is_flag=True, help="Show entry notes")
@paging_options
@click.pass_context
def time_list(ctx, project_id, task_id, date_from, date_to, show_notes, page, per_page, fetch_all, as_json):
    """List time entries with optional filters."""
    try:
        filters = {
            "project_id": project_id,
            "task_id": task_id,
            "date_from": as_date(date_from),
            "date_to": as_date(date_to),
        }
        items, pagination = run_listing(ctx, TimeEntriesAPI, filters, page, per_page, fetch_all)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if as_json:
        print_json(items, pagination)
        return
    if not items:
        console.print("[yellow]No time entries found.[/yellow]")
        return
    TimeEntryTable(console).print_table(items, title="Time Entries", pagination=pagination, show_notes=show_notes)


@cli.group()
def contractors():
    """Contractor commands."""
    pass


@contractors.command("list")
@paging_options
@click.pass_context
def contractors_list(ctx, page, per_page, fetch_all, as_json):
    """List contractors."""
    try:
        items, pagination = run_listing(ctx, ContractorsAPI, {}, page, per_page, fetch_all)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if as_json:
        print_json(items, pagination)
        return
    if not items:
        console.print("[yellow]No contractors found.[/yellow]")
        return
    ContractorTable(console).print_table(items, title="Contractors", pagination=pagination)


@cli.group()
def invoices():
    """Invoice commands."""
    pass


@invoices.command("list")
@click.option("--client-id", help="Filter by client ID")
@click.option("--from", "date_from", type=DATE, help="Earliest invoice date (YYYY-MM-DD)")
@click.option("--to", "date_to", type=DATE, help="Latest invoice date (YYYY-MM-DD)")
@click.option("--updated-since", type=TIMESTAMP, help="Only invoices modified since this time")
@paging_options
@click.pass_context
def invoices_list(ctx, client_id, date_from, date_to, updated_since, page, per_page, fetch_all, as_json):
    """List invoices with optional filters."""
    try:
        filters = {
            "client_id": client_id,
            "date_from": as_date(date_from),
            "date_to": as_date(date_to),
            "update_from": updated_since,
        }
        items, pagination = run_listing(ctx, InvoicesAPI, filters, page, per_page, fetch_all)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if as_json:
        print_json(items, pagination)
        return
    if not items:
        console.print("[yellow]No invoices found.[/yellow]")
        return
    InvoiceTable(console).print_table(items, title="Invoices", pagination=pagination)


if __name__ == "__main__":
    cli()
