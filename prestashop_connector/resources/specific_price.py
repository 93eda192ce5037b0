"""Specific price operations."""
from typing import Any, Dict

from prestashop_connector.builder import SPECIFIC_PRICE_PAYLOAD
from prestashop_connector.resources.base import ResourceHandler, get_param, require_param

# Dates the webservice reads as "no limit"
UNLIMITED_DATE = "0000-00-00 00:00:00"

IMPACT_DISCOUNT = "discount"
IMPACT_FIXED_PRICE = "fixedPrice"
IMPACT_MODES = {"discount": IMPACT_DISCOUNT, "fixedPrice": IMPACT_FIXED_PRICE, "fixed": IMPACT_FIXED_PRICE}


def get_impact_mode(params: Dict[str, Any]) -> str:
    return IMPACT_MODES.get(get_param(params, "impact_mode", IMPACT_DISCOUNT), IMPACT_DISCOUNT)


def get_reduction(params: Dict[str, Any]) -> float:
    """Percentages are entered as 0-100 but stored as a ratio."""
    reduction = float(get_param(params, "reduction_value", 0))
    if get_param(params, "reduction_type", "amount") == "percentage":
        reduction /= 100
    return reduction


class SpecificPriceResource(ResourceHandler):
    """Price overrides and discounts scoped by product, customer, currency, country, group and dates."""

    endpoint = "specific_prices"
    id_param = "specific_price_id"
    payload_config = SPECIFIC_PRICE_PAYLOAD

    operations = {
        **ResourceHandler.operations,
        "create": "create",
        "update": "update",
    }

    def create(self, params: Dict[str, Any]) -> Any:
        fields = {
            "id_product": require_param(params, "product_id"),
            "id_product_attribute": get_param(params, "combination_id", 0),
            "id_cart": 0,
            "id_currency": get_param(params, "currency_id", 0),
            "id_country": get_param(params, "country_id", 0),
            "id_group": get_param(params, "group_id", 0),
            "id_customer": get_param(params, "customer_id", 0),
            "from_quantity": get_param(params, "from_quantity", 1),
            "from": UNLIMITED_DATE,
            "to": UNLIMITED_DATE,
        }

        if not get_param(params, "unlimited_duration", True):
            fields["from"] = get_param(params, "from_date", UNLIMITED_DATE)
            fields["to"] = get_param(params, "to_date", UNLIMITED_DATE)

        if get_impact_mode(params) == IMPACT_FIXED_PRICE:
            fields.update({
                "price": require_param(params, "fixed_price_tax_excluded"),
                "reduction": 0,
                "reduction_tax": 1,
                "reduction_type": "amount",
            })
        else:
            fields.update({
                "price": -1,
                "reduction": get_reduction(params),
                "reduction_tax": get_param(params, "reduction_include_tax", 1),
                "reduction_type": get_param(params, "reduction_type", "amount"),
            })

        if get_param(params, "is_multishop", False):
            fields["id_shop"] = get_param(params, "shop_id", 0)
            fields["id_shop_group"] = get_param(params, "shop_group_id", 0)

        # Zero ids are meaningful ("all"), so they go in as optional fields
        payload = self.payload_builder.build_create(self.payload_config, optional=fields)
        return self.send("POST", self.endpoint, payload)

    def update(self, params: Dict[str, Any]) -> Any:
        specific_price_id = require_param(params, self.id_param)

        # Zero means "not supplied" on update
        fields = {
            target: get_param(params, source) or None
            for source, target in (
                ("product_id", "id_product"),
                ("combination_id", "id_product_attribute"),
                ("from_quantity", "from_quantity"),
                ("currency_id", "id_currency"),
                ("country_id", "id_country"),
                ("group_id", "id_group"),
                ("customer_id", "id_customer"),
            )
        }

        impact_mode = get_impact_mode(params)
        if impact_mode == IMPACT_DISCOUNT and "reduction_value" in params:
            fields["reduction"] = get_reduction(params)
            fields["reduction_tax"] = bool(get_param(params, "reduction_include_tax", True))
            fields["reduction_type"] = get_param(params, "reduction_type", "amount")
        elif impact_mode == IMPACT_FIXED_PRICE:
            fields["price"] = get_param(params, "fixed_price_tax_excluded")

        if get_param(params, "unlimited_duration", True):
            fields["from"] = UNLIMITED_DATE
            fields["to"] = UNLIMITED_DATE
        else:
            fields["from"] = get_param(params, "from_date")
            fields["to"] = get_param(params, "to_date")

        if get_param(params, "is_multishop", False):
            fields["id_shop"] = get_param(params, "shop_id") or None
            fields["id_shop_group"] = get_param(params, "shop_group_id") or None

        payload = self.payload_builder.build_update(self.payload_config, specific_price_id, required=fields)
        return self.send("PATCH", f"{self.endpoint}/{specific_price_id}", payload)
