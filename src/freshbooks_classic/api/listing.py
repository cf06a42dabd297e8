"""Shared behavior of the ``*.list`` API modules."""

from __future__ import annotations

from typing import Any, Optional

from ..models import Pagination, Request
from .client import FreshBooksClient


def merge_request(request: Optional[Request], **filters: Any) -> Request:
    """Overlay keyword filters on a request; None values are ignored."""
    filters = {k: v for k, v in filters.items() if v is not None}
    if request is None:
        return Request(**filters)
    if not filters:
        return request
    return Request(**{**request.model_dump(), **filters})


class ListingAPI:
    """Base for one paginated list method.

    Subclasses set ``METHOD`` (the service method name) and ``SECTION``
    (the reply section holding the results).
    """

    METHOD = ""
    SECTION = ""

    def __init__(self, client: FreshBooksClient):
        self.client = client

    def fetch(self, request: Optional[Request] = None) -> tuple[list[Any], Pagination]:
        """Fetch one page for an already-built request."""
        return self.client.list_section(request, self.METHOD, self.SECTION)

    def fetch_all(self, request: Optional[Request] = None) -> list[Any]:
        """Fetch every page, starting from page 1."""
        request = request or Request()
        all_items: list[Any] = []
        page = 1

        while True:
            items, pagination = self.fetch(request.model_copy(update={"page": page}))
            all_items.extend(items)

            if len(all_items) >= pagination.total or not items:
                break

            page += 1

        return all_items
