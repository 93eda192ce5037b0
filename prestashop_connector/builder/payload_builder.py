"""
Payload Builder - Assembles entity payloads for create/update calls

Create path:
    blank schema -> required fields -> translatable fields -> optional fields
    -> strip read-only keys -> normalize values -> XML envelope

Update path:
    {"id": ...} -> supplied fields only -> strip -> normalize -> XML envelope
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .multilang import TranslatableField
from .value_normalizer import normalize_payload
from .xml_serializer import get_serializer

logger = logging.getLogger(__name__)

# Server-managed keys the webservice rejects or ignores on write
COMMON_READONLY_FIELDS = ("associations", "date_add", "date_upd")


@dataclass
class PayloadConfig:
    """Per-entity payload rules"""

    entity: str  # XML element name, e.g. "product"
    endpoint: str  # Collection endpoint, e.g. "products"
    readonly_fields: Tuple[str, ...] = COMMON_READONLY_FIELDS
    date_only_fields: Tuple[str, ...] = ()


CUSTOMER_PAYLOAD = PayloadConfig(
    entity="customer",
    endpoint="customers",
    date_only_fields=("birthday",),
)

ORDER_PAYLOAD = PayloadConfig(entity="order", endpoint="orders")

PRODUCT_PAYLOAD = PayloadConfig(
    entity="product",
    endpoint="products",
    readonly_fields=COMMON_READONLY_FIELDS + (
        "cache_default_attribute",
        "supplier_reference",
        "location",
        "quantity_discount",
    ),
)

SPECIFIC_PRICE_PAYLOAD = PayloadConfig(entity="specific_price", endpoint="specific_prices")

STOCK_AVAILABLE_PAYLOAD = PayloadConfig(entity="stock_available", endpoint="stock_availables")


def is_empty(value: Any) -> bool:
    """Empty caller values are skipped rather than sent"""
    return value is None or value == "" or (isinstance(value, (dict, list)) and not value)


def overlay(
    template: Dict[str, Any],
    required: Optional[Dict[str, Any]] = None,
    optional: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge caller fields onto a template

    Precedence: optional > required > template. Empty required values are
    skipped so they never blank out a template default.

    Returns:
        A new dict; inputs are not modified
    """
    payload = dict(template)

    for key, value in (required or {}).items():
        if not is_empty(value):
            payload[key] = value

    payload.update(optional or {})
    return payload


def build_translatable_fields(params: Optional[Dict[str, Any]]) -> Dict[str, TranslatableField]:
    """
    Convert {"meta_title": {"translations": [...]}, ...} host parameters

    Entries that are not translation collections are ignored.
    """
    fields = {}
    for key, value in (params or {}).items():
        if isinstance(value, TranslatableField):
            fields[key] = value
        elif TranslatableField.is_translatable_param(value):
            fields[key] = TranslatableField.from_dict(value)
        else:
            logger.debug(f"Ignoring non-translatable parameter: {key}")
    return fields


class PayloadBuilder:
    """
    Builds write payloads for one webservice

    Usage:
    ```python
    builder = PayloadBuilder(client)
    payload = builder.build_create(
        PRODUCT_PAYLOAD,
        required={"price": 19.9},
        translatable={"name": {"translations": [{"id": 1, "value": "Shoe"}]}},
        optional={"active": True},
    )
    body = builder.to_xml(PRODUCT_PAYLOAD, payload)
    ```
    """

    def __init__(self, client=None):
        """
        Initialize PayloadBuilder

        Args:
            client: PrestaShopClient used for blank-schema fetches (create path only)
        """
        self.client = client

    def fetch_template(self, config: PayloadConfig) -> Dict[str, Any]:
        """
        Fetch the blank schema for an entity

        Language lists in the template become TranslatableField so they are
        encoded like caller-supplied translations.
        """
        if self.client is None:
            raise ValueError("A client is required to fetch blank schemas")

        template = self.client.get_blank_schema(config.endpoint, config.entity)

        if isinstance(template, list):
            template = dict(template[0]) if template and isinstance(template[0], dict) else {}

        template = dict(template or {})

        for key, value in template.items():
            if TranslatableField.is_template_value(value):
                template[key] = TranslatableField.from_template(value)

        return template

    def build_create(
        self,
        config: PayloadConfig,
        required: Optional[Dict[str, Any]] = None,
        translatable: Optional[Dict[str, Any]] = None,
        optional: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Build a full creation payload seeded from the blank schema

        Args:
            config: Entity rules
            required: Scalar fields (empty values skipped)
            translatable: {attribute: {"translations": [...]}} parameters
            optional: Additional fields, merged last

        Returns:
            Normalized payload without read-only keys
        """
        template = self.fetch_template(config)
        return self._assemble(config, template, required, translatable, optional)

    def build_update(
        self,
        config: PayloadConfig,
        entity_id: Any,
        required: Optional[Dict[str, Any]] = None,
        translatable: Optional[Dict[str, Any]] = None,
        optional: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Build a partial payload: the identifier plus supplied fields only

        Optional fields with empty values are dropped, so nothing unset is
        ever sent.
        """
        optional = {k: v for k, v in (optional or {}).items() if not is_empty(v)}
        return self._assemble(config, {"id": entity_id}, required, translatable, optional)

    def _assemble(
        self,
        config: PayloadConfig,
        seed: Dict[str, Any],
        required: Optional[Dict[str, Any]],
        translatable: Optional[Dict[str, Any]],
        optional: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        required = dict(required or {})
        required.update(build_translatable_fields(translatable))

        payload = overlay(seed, required, optional)

        for key in config.readonly_fields:
            payload.pop(key, None)

        normalize_payload(payload, config.date_only_fields)

        logger.info(f"Built {config.entity} payload with {len(payload)} fields")
        return payload

    def to_xml(self, config: PayloadConfig, payload: Dict[str, Any]) -> str:
        """Serialize with the entity's serializer"""
        return get_serializer(config.entity)(payload)
