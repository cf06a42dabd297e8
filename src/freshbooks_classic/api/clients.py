"""Clients API module."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models import Client, Pagination, Request
from .listing import ListingAPI, merge_request


class ClientsAPI(ListingAPI):
    """API for listing clients."""

    METHOD = "client.list"
    SECTION = "clients"

    def list(
        self,
        request: Optional[Request] = None,
        email: Optional[str] = None,
        username: Optional[str] = None,
        update_from: Optional[datetime] = None,
        update_to: Optional[datetime] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> tuple[list[Client], Pagination]:
        """List clients, optionally filtered by email, username or modification time."""
        request = merge_request(
            request,
            email=email,
            username=username,
            update_from=update_from,
            update_to=update_to,
            page=page,
            per_page=per_page,
        )
        return self.fetch(request)

    def list_all(
        self,
        email: Optional[str] = None,
        username: Optional[str] = None,
        per_page: Optional[int] = None,
    ) -> list[Client]:
        """List all clients."""
        return self.fetch_all(merge_request(None, email=email, username=username, per_page=per_page))

    def get_clients_by_id(self) -> dict[int, Client]:
        """Get clients indexed by ID."""
        return {c.client_id: c for c in self.list_all() if c.client_id is not None}
