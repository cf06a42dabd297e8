"""Client for the FreshBooks Classic XML API."""

from .api import ClientsAPI, ContractorsAPI, FreshBooksClient, InvoicesAPI, TimeEntriesAPI
from .auth import APIToken, OAuthToken
from .exceptions import (
    AuthenticationError,
    DecodeError,
    FreshBooksError,
    NetworkError,
    ServiceError,
    TimestampParseError,
    TransportError,
)
from .models import Pagination, Request, Response
from .timestamps import parse_timestamp

__all__ = [
    "FreshBooksClient",
    "ClientsAPI",
    "ContractorsAPI",
    "InvoicesAPI",
    "TimeEntriesAPI",
    "APIToken",
    "OAuthToken",
    "FreshBooksError",
    "TransportError",
    "AuthenticationError",
    "NetworkError",
    "DecodeError",
    "TimestampParseError",
    "ServiceError",
    "Pagination",
    "Request",
    "Response",
    "parse_timestamp",
]
