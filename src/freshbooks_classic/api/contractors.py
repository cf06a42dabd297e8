"""Contractors API module."""

from __future__ import annotations

from typing import Optional

from ..models import Contractor, Pagination, Request
from .listing import ListingAPI, merge_request


class ContractorsAPI(ListingAPI):
    """API for listing contractors."""

    METHOD = "contractor.list"
    SECTION = "contractors"

    def list(
        self,
        request: Optional[Request] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> tuple[list[Contractor], Pagination]:
        """List one page of contractors."""
        return self.fetch(merge_request(request, page=page, per_page=per_page))

    def list_all(self, per_page: Optional[int] = None) -> list[Contractor]:
        return self.fetch_all(merge_request(None, per_page=per_page))
