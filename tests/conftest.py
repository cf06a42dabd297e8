"""Shared pytest fixtures for FreshBooks Classic tests."""

from pathlib import Path

import pytest

from freshbooks_classic.api.client import FreshBooksClient
from freshbooks_classic.auth import APIToken, OAuthToken

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    """Load an XML fixture file."""
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def api_token():
    return APIToken("test_api_token")


@pytest.fixture
def oauth_token():
    return OAuthToken(
        consumer_key="acme",
        consumer_secret="consumer_secret",
        token="oauth_token",
        token_secret="oauth_token_secret",
    )


@pytest.fixture
def fb_client(api_token):
    """Client for account 'acme' authenticated with a static token."""
    with FreshBooksClient("acme", api_token) as client:
        yield client


@pytest.fixture
def invoice_list_response():
    return load_fixture("invoice_list_response.xml")


@pytest.fixture
def error_response():
    return load_fixture("error_response.xml")


@pytest.fixture
def error_with_invoices_response():
    return load_fixture("error_with_invoices_response.xml")


@pytest.fixture
def client_list_response():
    return load_fixture("client_list_response.xml")


@pytest.fixture
def time_entry_list_response():
    return load_fixture("time_entry_list_response.xml")


@pytest.fixture
def contractor_list_response():
    return load_fixture("contractor_list_response.xml")
