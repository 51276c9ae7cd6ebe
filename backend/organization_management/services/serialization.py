"""JSON and XML (de)serialization of pydantic models.

XML layout: a single model becomes ``<Tag>`` and a sequence becomes
``<ArrayOfTag>`` with one ``<Tag>`` child per item, where ``Tag`` is the
model's ``title`` (falling back to the class name). Fields are child elements
named by their alias; ``None`` fields are omitted. Text containing code
points XML 1.0 cannot carry raises ``SerializationError``.
"""

from __future__ import annotations

import json
import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import Any, Optional, TypeVar

import defusedxml.ElementTree as DefusedET
from defusedxml import DefusedXmlException
from pydantic import BaseModel, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ARRAY_PREFIX = "ArrayOf"

# Code points outside the XML 1.0 Char production.
ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class InputError(ValueError):
    """Raised when the serialized input is empty or missing."""


class DeserializationError(Exception):
    """Raised when serialized input cannot be parsed or validated."""


class SerializationError(ValueError):
    """Raised when a value cannot be represented in the target format."""


def has_illegal_xml_chars(text: str) -> bool:
    return ILLEGAL_XML_CHARS.search(text) is not None


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    return value


def to_json(value: Any) -> str:
    return json.dumps(_dump(value), ensure_ascii=False)


def from_json(data: str | None, type_: Any) -> Any:
    if data is None or not data.strip():
        raise InputError("JSON input cannot be null or empty.")

    try:
        value = TypeAdapter(Optional[type_]).validate_json(data)
    except ValidationError as e:
        raise DeserializationError(_describe(e)) from e

    if value is None:
        raise InputError("JSON input cannot be null or empty.")
    return value


def xml_tag(model: type[BaseModel]) -> str:
    return model.model_config.get("title") or model.__name__


def to_xml(value: BaseModel | Sequence[BaseModel], model: type[BaseModel] | None = None) -> str:
    """Serialize a model, or a sequence of ``model`` instances, to an XML string."""
    if isinstance(value, BaseModel):
        root = _to_element(value, xml_tag(model or type(value)))
    else:
        items = list(value)
        if model is None:
            if not items:
                raise ValueError("model is required to serialize an empty sequence")
            model = type(items[0])
        tag = xml_tag(model)
        root = ET.Element(f"{ARRAY_PREFIX}{tag}")
        for item in items:
            root.append(_to_element(item, tag))

    # ElementTree leaves \r unescaped and parsers normalise it away on read.
    return ET.tostring(root, encoding="unicode").replace("\r", "&#13;")


def from_xml(data: str | None, model: type[M]) -> M | list[M]:
    """Parse a ``<Tag>`` document into one model or ``<ArrayOfTag>`` into a list."""
    if data is None or not data.strip():
        raise InputError("XML input cannot be null or empty.")

    try:
        root = DefusedET.fromstring(data)
    except (ET.ParseError, DefusedXmlException) as e:
        raise DeserializationError(str(e) or type(e).__name__) from e

    tag = xml_tag(model)
    try:
        if root.tag == tag:
            return model.model_validate(_element_fields(root))
        if root.tag == f"{ARRAY_PREFIX}{tag}":
            items: list[M] = []
            for child in root:
                if child.tag != tag:
                    raise DeserializationError(f"Unexpected element <{child.tag}> inside <{root.tag}>")
                items.append(model.model_validate(_element_fields(child)))
            return items
    except ValidationError as e:
        raise DeserializationError(_describe(e)) from e

    raise DeserializationError(f"Unexpected root element <{root.tag}>, expected <{tag}> or <{ARRAY_PREFIX}{tag}>")


def _to_element(instance: BaseModel, tag: str) -> ET.Element:
    element = ET.Element(tag)
    for key, value in instance.model_dump(mode="json", by_alias=True).items():
        if value is None:
            continue
        text = value if isinstance(value, str) else json.dumps(value)
        if has_illegal_xml_chars(text):
            raise SerializationError(f"Field {key!r} of <{tag}> contains characters not allowed in XML")
        child = ET.SubElement(element, key)
        child.text = text
    return element


def _element_fields(element: ET.Element) -> dict[str, str]:
    # An empty element is an empty string; an absent element is None.
    return {child.tag: child.text or "" for child in element}


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in error.errors()
    )
