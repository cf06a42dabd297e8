"""Time entries API module."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..models import Pagination, Request, TimeEntry
from .listing import ListingAPI, merge_request


class TimeEntriesAPI(ListingAPI):
    """API for listing time entries."""

    METHOD = "time_entry.list"
    SECTION = "time_entries"

    def list(
        self,
        request: Optional[Request] = None,
        project_id: Optional[Union[int, str]] = None,
        task_id: Optional[Union[int, str]] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> tuple[list[TimeEntry], Pagination]:
        """
        List time entries with optional filters.

        Args:
            request: Prepared request; keyword filters are applied on top
            project_id: Filter by project
            task_id: Filter by task
            date_from: Start of date range (inclusive)
            date_to: End of date range (inclusive)
            page: Page number (1-indexed, defaults to 1)
            per_page: Results per page (defaults to the client's page size)

        Returns:
            Tuple of (time entries list, pagination)
        """
        request = merge_request(
            request,
            project_id=project_id,
            task_id=task_id,
            date_from=date_from,
            date_to=date_to,
            page=page,
            per_page=per_page,
        )
        return self.fetch(request)

    def list_all(
        self,
        project_id: Optional[Union[int, str]] = None,
        task_id: Optional[Union[int, str]] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        per_page: Optional[int] = None,
    ) -> list[TimeEntry]:
        """List all time entries (paginated automatically)."""
        request = merge_request(
            None,
            project_id=project_id,
            task_id=task_id,
            date_from=date_from,
            date_to=date_to,
            per_page=per_page,
        )
        return self.fetch_all(request)
