"""Unit tests for the listing API modules."""

from datetime import date, datetime

from lxml import etree

from freshbooks_classic.api.clients import ClientsAPI
from freshbooks_classic.api.contractors import ContractorsAPI
from freshbooks_classic.api.invoices import InvoicesAPI
from freshbooks_classic.api.listing import merge_request
from freshbooks_classic.api.time_entries import TimeEntriesAPI
from freshbooks_classic.models import Request

API_URL = "https://acme.freshbooks.com/api/2.1/xml-in"


def time_entry_page(page: int, total: int, entry_ids: list[int]) -> bytes:
    entries = "".join(
        f"<time_entry><time_entry_id>{i}</time_entry_id><hours>1</hours></time_entry>" for i in entry_ids
    )
    return (
        f'<response status="ok"><time_entries page="{page}" per_page="2" total="{total}">'
        f"{entries}</time_entries></response>"
    ).encode()


class TestMergeRequest:
    """Tests for merge_request()."""

    def test_builds_new_request(self):
        request = merge_request(None, email="a@example.com", username=None)
        assert request.email == "a@example.com"
        assert request.username == ""

    def test_overlays_existing_request(self):
        base = Request(client_id="1", date_from=date(2023, 1, 1))
        merged = merge_request(base, client_id=2)

        assert merged.client_id == "2"
        assert merged.date_from == date(2023, 1, 1)
        assert base.client_id == "1"

    def test_returns_same_request_without_filters(self):
        base = Request(page=4)
        assert merge_request(base, page=None) is base


class TestInvoicesAPI:
    """Tests for InvoicesAPI."""

    def test_list_with_filters(self, httpx_mock, fb_client, invoice_list_response):
        """Keyword filters reach the wire; unset ones do not."""
        httpx_mock.add_response(url=API_URL, method="POST", content=invoice_list_response)

        invoices, pagination = InvoicesAPI(fb_client).list(
            client_id=3,
            date_from=date(2023, 5, 1),
            update_from=datetime(2023, 5, 2, 0, 0, 0),
        )

        root = etree.fromstring(httpx_mock.get_request().content)
        assert root.get("method") == "invoice.list"
        assert [c.tag for c in root] == ["per_page", "page", "date_from", "update_from", "client_id"]
        assert root.findtext("update_from") == "2023-05-02 00:00:00"
        assert len(invoices) == 2
        assert pagination.total == 2

    def test_list_page_override(self, httpx_mock, fb_client, invoice_list_response):
        httpx_mock.add_response(url=API_URL, method="POST", content=invoice_list_response)

        InvoicesAPI(fb_client).list(Request(page=5), per_page=100)

        root = etree.fromstring(httpx_mock.get_request().content)
        assert root.findtext("page") == "5"
        assert root.findtext("per_page") == "100"


class TestTimeEntriesAPI:
    """Tests for TimeEntriesAPI."""

    def test_list_all_walks_pages(self, httpx_mock, fb_client):
        """Pages are fetched until the reported total is reached."""
        httpx_mock.add_response(url=API_URL, method="POST", content=time_entry_page(1, 3, [1, 2]))
        httpx_mock.add_response(url=API_URL, method="POST", content=time_entry_page(2, 3, [3]))

        entries = TimeEntriesAPI(fb_client).list_all(project_id=9, per_page=2)

        assert [e.time_entry_id for e in entries] == [1, 2, 3]
        pages = [etree.fromstring(r.content).findtext("page") for r in httpx_mock.get_requests()]
        assert pages == ["1", "2"]
        assert all(etree.fromstring(r.content).findtext("project_id") == "9" for r in httpx_mock.get_requests())

    def test_list_all_stops_on_empty_page(self, httpx_mock, fb_client):
        httpx_mock.add_response(url=API_URL, method="POST", content=time_entry_page(1, 10, [1]))
        httpx_mock.add_response(url=API_URL, method="POST", content=time_entry_page(2, 10, []))

        entries = TimeEntriesAPI(fb_client).list_all()

        assert [e.time_entry_id for e in entries] == [1]

    def test_list_date_range(self, httpx_mock, fb_client, time_entry_list_response):
        httpx_mock.add_response(url=API_URL, method="POST", content=time_entry_list_response)

        TimeEntriesAPI(fb_client).list(date_from=date(2023, 5, 1), date_to=date(2023, 5, 31))

        root = etree.fromstring(httpx_mock.get_request().content)
        assert root.findtext("date_from") == "2023-05-01"
        assert root.findtext("date_to") == "2023-05-31"


class TestClientsAPI:
    """Tests for ClientsAPI."""

    def test_get_clients_by_id(self, httpx_mock, fb_client, client_list_response):
        httpx_mock.add_response(url=API_URL, method="POST", content=client_list_response)

        clients = ClientsAPI(fb_client).get_clients_by_id()

        assert set(clients) == {13, 14}
        assert clients[14].name == "John Smith"


class TestContractorsAPI:
    """Tests for ContractorsAPI."""

    def test_list(self, httpx_mock, fb_client, contractor_list_response):
        httpx_mock.add_response(url=API_URL, method="POST", content=contractor_list_response)

        contractors, pagination = ContractorsAPI(fb_client).list()

        assert contractors[0].projects[0].name == "Kitchen Remodel"
        assert pagination.per_page == 25
