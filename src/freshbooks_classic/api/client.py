"""FreshBooks Classic API client: request transport and shared list plumbing."""

from typing import Any, Optional, Union

import httpx
from rich.console import Console

from ..auth import Credential, coerce_credential, select_auth
from ..codec import decode_response, encode_request
from ..exceptions import AuthenticationError, NetworkError, ServiceError, TransportError
from ..models import Pagination, Request, Response

console = Console(stderr=True)


class FreshBooksClient:
    """HTTP client for one FreshBooks Classic account."""

    URL_TEMPLATE = "https://{account}.freshbooks.com/api/2.1/xml-in"
    DEFAULT_PER_PAGE = 25

    def __init__(
        self,
        account: str,
        credential: Optional[Union[Credential, str]] = None,
        per_page: int = DEFAULT_PER_PAGE,
        http_client: Optional[httpx.Client] = None,
        verbose: bool = False,
    ):
        self.account = account
        self.base_url = self.URL_TEMPLATE.format(account=account)
        self.per_page = per_page
        self.credential = coerce_credential(credential)
        self.verbose = verbose
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=30.0)
        return self._client

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": "application/xml"}

    def _handle_response(self, response: httpx.Response) -> bytes:
        """Return the reply body, or raise for any non-2xx status."""
        status = f"HTTP {response.status_code} {response.reason_phrase}".strip()
        if response.status_code == 401:
            raise AuthenticationError(status, status_code=401)
        if not response.is_success:
            raise TransportError(status, status_code=response.status_code)
        return response.content

    def post(self, body: bytes) -> bytes:
        """POST a serialized request document and return the raw reply."""
        auth = select_auth(self.credential, self.base_url)
        headers = {**self.headers, **auth.pop("headers", {})}

        try:
            response = self.client.post(self.base_url, content=body, headers=headers, **auth)
        except httpx.TimeoutException as e:
            raise NetworkError("Request timed out") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Network error: {e}") from e

        if self.verbose:
            console.print(f"[dim]{self.base_url} -> {response.status_code}[/dim]")
        return self._handle_response(response)

    def call(self, request: Optional[Request], method: str) -> Response:
        """Run one API method and return the decoded reply.

        The caller's request is not modified; a defaulted copy is sent.
        """
        request = (request or Request()).with_defaults(method, self.per_page)
        if self.verbose:
            console.print(f"[dim]{method} page={request.page} per_page={request.per_page}[/dim]")

        response = decode_response(self.post(encode_request(request)))
        if response.failed:
            raise ServiceError(response.error, code=response.code or None)
        return response

    def list_section(self, request: Optional[Request], method: str, section: str) -> tuple[list[Any], Pagination]:
        """Run a ``*.list`` method and pull out its section."""
        response = self.call(request, method)
        listing = getattr(response, section)
        return getattr(listing, section), listing.pagination

    def list_clients(self, request: Optional[Request] = None) -> tuple[list[Any], Pagination]:
        return self.list_section(request, "client.list", "clients")

    def list_time_entries(self, request: Optional[Request] = None) -> tuple[list[Any], Pagination]:
        return self.list_section(request, "time_entry.list", "time_entries")

    def list_contractors(self, request: Optional[Request] = None) -> tuple[list[Any], Pagination]:
        return self.list_section(request, "contractor.list", "contractors")

    def list_invoices(self, request: Optional[Request] = None) -> tuple[list[Any], Pagination]:
        return self.list_section(request, "invoice.list", "invoices")

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FreshBooksClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
