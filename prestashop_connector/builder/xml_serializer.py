"""
XML Serializer - Write envelopes for the PrestaShop webservice

Every write is a document with a <prestashop> root and one child named after
the entity:

    <?xml version="1.0" encoding="UTF-8"?>
    <prestashop>
        <product>
            <id>12</id>
            <price>19.9</price>
            <name><language id="1">Shoe</language></name>
        </product>
    </prestashop>

Encoding rules:
- scalars become text content (None becomes an empty element)
- TranslatableField becomes nested <language id=".."> elements
- dicts become nested elements, lists repeat the parent tag

Each entity kind has its own serializer so the accepted shapes stay explicit.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict

from .multilang import TranslatableField, append_language_elements

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "prestashop"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _append_value(parent: ET.Element, tag: str, value: Any) -> None:
    if isinstance(value, TranslatableField):
        append_language_elements(ET.SubElement(parent, tag), value)

    elif isinstance(value, dict):
        child = ET.SubElement(parent, tag)
        for key, nested in value.items():
            _append_value(child, key, nested)

    elif isinstance(value, list):
        for item in value:
            _append_value(parent, tag, item)

    else:
        ET.SubElement(parent, tag).text = _to_text(value)


def build_envelope(entity: str, payload: Dict[str, Any]) -> ET.Element:
    """Build the <prestashop><entity>...</entity></prestashop> tree"""
    root = ET.Element(ROOT_ELEMENT)
    entity_element = ET.SubElement(root, entity)

    for key, value in payload.items():
        _append_value(entity_element, key, value)

    return root


def serialize_entity(entity: str, payload: Dict[str, Any]) -> str:
    """Serialize a payload into a UTF-8 XML document string"""
    body = XML_DECLARATION + ET.tostring(build_envelope(entity, payload), encoding="unicode")
    logger.debug(f"Serialized {entity} payload ({len(payload)} fields)")
    return body


def serialize_customer(payload: Dict[str, Any]) -> str:
    return serialize_entity("customer", payload)


def serialize_order(payload: Dict[str, Any]) -> str:
    return serialize_entity("order", payload)


def serialize_product(payload: Dict[str, Any]) -> str:
    """Products carry translatable fields; their text is escaped, not CDATA-wrapped"""
    return serialize_entity("product", payload)


def serialize_specific_price(payload: Dict[str, Any]) -> str:
    return serialize_entity("specific_price", payload)


def serialize_stock_available(payload: Dict[str, Any]) -> str:
    return serialize_entity("stock_available", payload)


SERIALIZERS: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "customer": serialize_customer,
    "order": serialize_order,
    "product": serialize_product,
    "specific_price": serialize_specific_price,
    "stock_available": serialize_stock_available,
}


def get_serializer(entity: str) -> Callable[[Dict[str, Any]], str]:
    """Serializer for an entity kind, falling back to the generic encoding"""
    serializer = SERIALIZERS.get(entity)
    if serializer is None:
        logger.warning(f"No dedicated serializer for {entity}, using generic encoding")
        return lambda payload: serialize_entity(entity, payload)
    return serializer
