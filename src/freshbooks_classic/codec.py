"""XML encoding of request documents and decoding of replies."""

import datetime as dt
from typing import Any

from lxml import etree
from pydantic import BaseModel, ValidationError

from .exceptions import DecodeError
from .models import Request, Response
from .timestamps import PRIMARY_FORMAT

# reply section element -> (repeated item element, list field on the section)
SECTIONS = {
    "clients": ("client", "clients"),
    "projects": ("project", "projects"),
    "tasks": ("task", "tasks"),
    "staff_members": ("member", "users"),
    "time_entries": ("time_entry", "time_entries"),
    "contractors": ("contractor", "contractors"),
    "invoices": ("invoice", "invoices"),
}

PAGINATION_ATTRIBUTES = ("page", "total", "per_page", "pages")

PAGING_FIELDS = ("method", "per_page", "page")


def format_value(value: Any) -> str:
    """Render a Python value the way the service expects it in element text."""
    if isinstance(value, dt.datetime):
        return value.strftime(PRIMARY_FORMAT)
    if isinstance(value, dt.date):
        return value.isoformat()
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _append_fields(parent: etree._Element, model: BaseModel, skip: tuple = ()) -> None:
    for name in type(model).model_fields:
        if name in skip:
            continue
        value = getattr(model, name)
        if value is None or value == "" or value == []:
            continue
        if isinstance(value, BaseModel):
            _append_fields(etree.SubElement(parent, name), value)
        else:
            etree.SubElement(parent, name).text = format_value(value)


def encode_request(request: Request) -> bytes:
    """Serialize a request document.

    ``method``, ``per_page`` and ``page`` are always written; unset filters
    are left out entirely.
    """
    root = etree.Element("request", method=request.method)
    etree.SubElement(root, "per_page").text = str(request.per_page)
    etree.SubElement(root, "page").text = str(request.page)
    _append_fields(root, request, skip=PAGING_FIELDS)
    return etree.tostring(root, xml_declaration=True, encoding="utf-8", pretty_print=True)


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _children(element: etree._Element) -> list:
    # skips comments and processing instructions
    return [child for child in element if isinstance(child.tag, str)]


def element_to_value(element: etree._Element) -> Any:
    """Turn an element into text (leaf) or a dict keyed by child name.

    Repeated children collect into a list.
    """
    children = _children(element)
    if not children:
        return (element.text or "").strip()

    data: dict[str, Any] = {}
    for child in children:
        name = _local_name(child)
        value = element_to_value(child)
        if name not in data:
            data[name] = value
        elif isinstance(data[name], list):
            data[name].append(value)
        else:
            data[name] = [data[name], value]
    return data


def _decode_section(element: etree._Element, item_tag: str, field: str) -> dict:
    pagination = {}
    for key in PAGINATION_ATTRIBUTES:
        if element.get(key) is not None:
            pagination[key] = element.get(key)

    items = []
    for child in _children(element):
        if _local_name(child) != item_tag:
            continue
        value = element_to_value(child)
        items.append(value if isinstance(value, dict) else {})

    return {"pagination": pagination, field: items}


def decode_response(body: bytes) -> Response:
    """Parse a reply into a Response.

    Namespaces are ignored. Sections the reply does not carry stay empty.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(body, parser)
    except etree.XMLSyntaxError as e:
        raise DecodeError(f"Malformed XML reply: {e}") from e

    data: dict[str, Any] = {"status": root.get("status", "")}
    for child in _children(root):
        name = _local_name(child)
        if name in SECTIONS:
            item_tag, field = SECTIONS[name]
            data[name] = _decode_section(child, item_tag, field)
        elif name in ("error", "code"):
            data[name] = (child.text or "").strip()

    try:
        return Response.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected reply content: {e}") from e
