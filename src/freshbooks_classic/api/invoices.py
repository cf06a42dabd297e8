"""Invoices API module."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..models import Invoice, Pagination, Request
from .listing import ListingAPI, merge_request


class InvoicesAPI(ListingAPI):
    """API for listing invoices."""

    METHOD = "invoice.list"
    SECTION = "invoices"

    def list(
        self,
        request: Optional[Request] = None,
        client_id: Optional[Union[int, str]] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        update_from: Optional[datetime] = None,
        update_to: Optional[datetime] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> tuple[list[Invoice], Pagination]:
        """
        List invoices with optional filters.

        Args:
            request: Prepared request; keyword filters are applied on top
            client_id: Only invoices for this client
            date_from: Earliest invoice date
            date_to: Latest invoice date
            update_from: Only invoices modified at or after this time
            update_to: Only invoices modified at or before this time
            page: Page number (1-indexed, defaults to 1)
            per_page: Results per page (defaults to the client's page size)

        Returns:
            Tuple of (invoices list, pagination)
        """
        request = merge_request(
            request,
            client_id=client_id,
            date_from=date_from,
            date_to=date_to,
            update_from=update_from,
            update_to=update_to,
            page=page,
            per_page=per_page,
        )
        return self.fetch(request)

    def list_all(
        self,
        client_id: Optional[Union[int, str]] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        update_from: Optional[datetime] = None,
        update_to: Optional[datetime] = None,
        per_page: Optional[int] = None,
    ) -> list[Invoice]:
        """List all invoices (paginated automatically)."""
        request = merge_request(
            None,
            client_id=client_id,
            date_from=date_from,
            date_to=date_to,
            update_from=update_from,
            update_to=update_to,
            per_page=per_page,
        )
        return self.fetch_all(request)
