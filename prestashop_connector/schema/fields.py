"""Filterable and sortable attributes per resource."""
from typing import Dict, List

from prestashop_connector.api.lookups import LookupOption, sort_options


CUSTOMER_FIELDS = [
    "id", "id_default_group", "id_lang", "newsletter_date_add",
    "ip_registration_newsletter", "secure_key", "deleted", "lastname",
    "firstname", "email", "id_gender", "birthday", "newsletter", "optin",
    "website", "company", "siret", "ape", "outstanding_allow_amount",
    "show_public_prices", "id_risk", "max_payment_days", "active", "note",
    "is_guest", "id_shop", "id_shop_group",
]

ORDER_FIELDS = [
    "id", "id_address_delivery", "id_address_invoice", "id_cart",
    "id_currency", "id_lang", "id_customer", "id_carrier", "current_state",
    "module", "invoice_number", "invoice_date", "delivery_number",
    "delivery_date", "valid", "shipping_number", "note", "id_shop_group",
    "id_shop", "secure_key", "payment", "recyclable", "gift", "gift_message",
    "mobile_theme", "total_discounts", "total_discounts_tax_incl",
    "total_discounts_tax_excl", "total_paid", "total_paid_tax_incl",
    "total_paid_tax_excl", "total_paid_real", "total_products",
    "total_products_wt", "total_shipping", "total_shipping_tax_incl",
    "total_shipping_tax_excl", "carrier_tax_rate", "total_wrapping",
    "total_wrapping_tax_incl", "total_wrapping_tax_excl", "round_mode",
    "round_type", "conversion_rate", "reference",
]

PRODUCT_FIELDS = [
    "id", "id_manufacturer", "id_supplier", "id_category_default", "new",
    "id_default_image", "id_default_combination", "id_tax_rules_group",
    "position_in_category", "manufacturer_name", "quantity", "type",
    "id_shop_default", "reference", "width", "height", "depth", "weight",
    "ean13", "isbn", "upc", "mpn", "cache_is_pack", "cache_has_attachments",
    "is_virtual", "state", "additional_delivery_times", "product_type",
    "on_sale", "online_only", "ecotax", "minimal_quantity",
    "low_stock_threshold", "low_stock_alert", "price", "wholesale_price",
    "unity", "unit_price", "unit_price_ratio", "additional_shipping_cost",
    "customizable", "text_fields", "uploadable_files", "active",
    "redirect_type", "id_type_redirected", "available_for_order",
    "available_date", "show_condition", "condition", "show_price", "indexed",
    "visibility", "pack_stock_type", "delivery_in_stock",
    "delivery_out_stock", "meta_description", "meta_keywords", "meta_title",
    "link_rewrite", "name", "description", "description_short",
    "available_now", "available_later",
]

SPECIFIC_PRICE_FIELDS = [
    "id", "id_shop_group", "id_shop", "id_cart", "id_product",
    "id_product_attribute", "id_currency", "id_country", "id_group",
    "id_customer", "id_specific_price_rule", "price", "from_quantity",
    "reduction", "reduction_tax", "reduction_type", "from", "to",
]

# Product attributes that hold one value per language
PRODUCT_TRANSLATABLE_FIELDS = [
    "name", "link_rewrite", "meta_description", "meta_keywords",
    "meta_title", "description", "description_short", "available_now",
    "available_later", "delivery_in_stock", "delivery_out_stock",
]

RESOURCE_FIELDS: Dict[str, List[str]] = {
    "customer": CUSTOMER_FIELDS,
    "order": ORDER_FIELDS,
    "product": PRODUCT_FIELDS,
    "specific_price": SPECIFIC_PRICE_FIELDS,
}


def capital_case(name: str) -> str:
    """id_default_group -> Id Default Group"""
    return " ".join(word.capitalize() for word in name.split("_") if word)


def get_fields(resource: str) -> List[str]:
    """Attribute names of a resource ([] when unknown)"""
    return list(RESOURCE_FIELDS.get(resource, []))


def get_attribute_options(resource: str) -> List[LookupOption]:
    """Display options for the filter/sort field pickers, sorted by name"""
    return sort_options([LookupOption(capital_case(f), f) for f in get_fields(resource)])
