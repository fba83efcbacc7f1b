"""
JSON/XML content negotiation.

JSON is the default representation.  A client that lists
``application/xml`` or ``text/xml`` in its ``Accept`` header with a
higher quality than any JSON type gets an XML document instead.
Element names come from the ``xml_name`` of the response schema
(falling back to the class name), list payloads are wrapped in an
``ArrayOf<Item>`` element named after the item schema even when the
list is empty, and field names are written in CamelCase.  ``None`` values are left out of the XML document.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, Union

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

JSON_MEDIA_TYPES = {"application/json", "text/json", "application/*", "*/*"}
XML_MEDIA_TYPES = {"application/xml", "text/xml"}

Payload = Union[BaseModel, Sequence[BaseModel]]


def parse_accept(header: Optional[str]) -> List[Tuple[str, float]]:
    """Split an ``Accept`` header into ``(media_type, quality)`` pairs.

    The result is ordered by descending quality; entries with equal
    quality keep their header order.
    """
    if not header:
        return []
    entries = []
    for part in header.split(","):
        pieces = [p.strip() for p in part.split(";")]
        media_type = pieces[0].lower()
        if not media_type:
            continue
        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        entries.append((media_type, quality))
    return sorted(entries, key=lambda entry: entry[1], reverse=True)


def wants_xml(request: Request) -> bool:
    """Return ``True`` when XML ranks above JSON in the ``Accept`` header."""
    for media_type, quality in parse_accept(request.headers.get("accept")):
        if quality <= 0:
            continue
        if media_type in XML_MEDIA_TYPES:
            return True
        if media_type in JSON_MEDIA_TYPES:
            return False
    return False


def element_name(model_type: Type[BaseModel]) -> str:
    return getattr(model_type, "xml_name", None) or model_type.__name__


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def _append_value(parent: ET.Element, tag: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        parent.append(model_to_element(value, tag))
    elif isinstance(value, (list, tuple)):
        container = ET.SubElement(parent, tag)
        for item in value:
            item_tag = element_name(type(item)) if isinstance(item, BaseModel) else "Item"
            _append_value(container, item_tag, item)
    elif isinstance(value, bool):
        ET.SubElement(parent, tag).text = "true" if value else "false"
    else:
        ET.SubElement(parent, tag).text = str(value)


def model_to_element(model: BaseModel, tag: Optional[str] = None) -> ET.Element:
    """Convert a pydantic model into an XML element tree."""
    element = ET.Element(tag or element_name(type(model)))
    names = list(type(model).model_fields) + list(type(model).model_computed_fields)
    for field_name in names:
        _append_value(element, _camel(field_name), getattr(model, field_name))
    return element


def to_xml(content: Payload, item_type: Optional[Type[BaseModel]] = None) -> bytes:
    """Serialize a model or a list of models into an XML document.

    ``item_type`` names the root of a list document; without it the
    first item decides, and an empty list becomes ``ArrayOfItem``.
    """
    if isinstance(content, BaseModel):
        root = model_to_element(content)
    else:
        items = list(content)
        if item_type is None and items:
            item_type = type(items[0])
        item_name = element_name(item_type) if item_type is not None else "Item"
        root = ET.Element(f"ArrayOf{item_name}")
        for item in items:
            root.append(model_to_element(item))
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def negotiate(
    request: Request,
    content: Payload,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    item_type: Optional[Type[BaseModel]] = None,
) -> Response:
    """Render ``content`` as JSON or XML depending on the request.

    List endpoints pass ``item_type`` so that the XML root element does
    not depend on whether the list is empty.
    """
    if wants_xml(request):
        return Response(
            content=to_xml(content, item_type),
            status_code=status_code,
            headers=headers,
            media_type="application/xml",
        )
    return JSONResponse(
        content=jsonable_encoder(content),
        status_code=status_code,
        headers=headers,
    )
