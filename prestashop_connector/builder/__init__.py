"""
Payload Builder Module

Builds write payloads for the PrestaShop webservice with:
- Blank-schema templates overlaid with caller fields
- Multi-language attributes (<language id="..">)
- Boolean/datetime normalization
- Per-entity XML envelopes
"""

from .payload_builder import (
    PayloadBuilder,
    PayloadConfig,
    overlay,
    CUSTOMER_PAYLOAD,
    ORDER_PAYLOAD,
    PRODUCT_PAYLOAD,
    SPECIFIC_PRICE_PAYLOAD,
    STOCK_AVAILABLE_PAYLOAD,
)
from .multilang import (
    Translation,
    TranslatableField,
    build_multilang_element,
    format_multilang_field,
)
from .value_normalizer import normalize_payload, normalize_value
from .xml_serializer import serialize_entity, get_serializer

__all__ = [
    "PayloadBuilder",
    "PayloadConfig",
    "overlay",
    "CUSTOMER_PAYLOAD",
    "ORDER_PAYLOAD",
    "PRODUCT_PAYLOAD",
    "SPECIFIC_PRICE_PAYLOAD",
    "STOCK_AVAILABLE_PAYLOAD",
    "Translation",
    "TranslatableField",
    "build_multilang_element",
    "format_multilang_field",
    "normalize_payload",
    "normalize_value",
    "serialize_entity",
    "get_serializer",
]
