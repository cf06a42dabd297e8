"""Parsing of the date-time formats used in FreshBooks Classic replies."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

from .exceptions import TimestampParseError

PRIMARY_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(text: str) -> datetime:
    """Parse service text into a datetime.

    The service writes ``YYYY-MM-DD HH:MM:SS``; anything else is tried as
    ISO 8601 / RFC 3339 (``2023-05-01T12:00:00Z``, ``...+02:00``).
    """
    text = text.strip()
    try:
        return datetime.strptime(text, PRIMARY_FORMAT)
    except ValueError:
        pass

    fallback = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(fallback)
    except ValueError:
        raise TimestampParseError(text) from None


def _coerce_timestamp(value: Any) -> Any:
    if isinstance(value, str):
        return parse_timestamp(value)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_coerce_timestamp)]
