"""Product and stock operations."""
import logging
from typing import Any, Dict, Optional

from prestashop_connector.builder import PRODUCT_PAYLOAD, STOCK_AVAILABLE_PAYLOAD, TranslatableField
from prestashop_connector.errors import OperationError
from prestashop_connector.query import build_id_filter
from prestashop_connector.resources.base import ResourceHandler, get_param, require_param
from prestashop_connector.schema.fields import PRODUCT_TRANSLATABLE_FIELDS

logger = logging.getLogger(__name__)


class ProductResource(ResourceHandler):
    """Products, their translatable attributes, and stock quantities."""

    endpoint = "products"
    id_param = "product_id"
    payload_config = PRODUCT_PAYLOAD

    operations = {
        **ResourceHandler.operations,
        "create": "create",
        "update": "update",
        "stock": "update_stock",
    }

    def _translatable(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Translatable attributes given directly, then any translation_fields"""
        fields = {}
        for name in PRODUCT_TRANSLATABLE_FIELDS:
            value = get_param(params, name)
            if TranslatableField.is_translatable_param(value):
                fields[name] = value
        fields.update(get_param(params, "translation_fields", {}))
        return fields

    def create(self, params: Dict[str, Any]) -> Any:
        payload = self.payload_builder.build_create(
            self.payload_config,
            required={"price": get_param(params, "price"), "state": 1},
            translatable=self._translatable(params),
            optional=get_param(params, "additional_fields", {}),
        )
        return self.send("POST", self.endpoint, payload)

    def update(self, params: Dict[str, Any]) -> Any:
        product_id = require_param(params, self.id_param)
        price = get_param(params, "price")

        payload = self.payload_builder.build_update(
            self.payload_config,
            product_id,
            required={"price": price if price and float(price) > 0 else None},
            translatable=self._translatable(params),
            optional=get_param(params, "additional_fields", {}),
        )
        return self.send("PATCH", f"{self.endpoint}/{product_id}", payload)

    def find_stock_id(self, params: Dict[str, Any]) -> Optional[int]:
        """
        Resolve the stock_available record to patch.

        search_mode "byStockId" uses stock_id directly; "byCombination" looks
        the record up by product, combination and (multishop) shop.

        Raises:
            OperationError: When no stock record matches
        """
        if get_param(params, "search_mode", "byStockId") == "byStockId":
            stock_id = get_param(params, "stock_id")
            return int(stock_id) if stock_id not in (None, "") else None

        filters = [
            build_id_filter("id_product", require_param(params, self.id_param)),
            build_id_filter("id_product_attribute", get_param(params, "combination_id", 0)),
        ]
        if get_param(params, "is_multishop", False):
            filters.append(build_id_filter("id_shop", get_param(params, "shop_id", 0)))
            filters.append(build_id_filter("id_shop_group", get_param(params, "shop_group_id", 0)))

        response = self.client.request("GET", "stock_availables", query_string="&".join(filters))
        records = self.client.extract_collection(response, "stock_availables", "stock_available")

        if not records:
            raise OperationError("No stock records were found with these parameters.")

        return int(records[0]["id"])

    def update_stock(self, params: Dict[str, Any]) -> Any:
        quantity = require_param(params, "quantity")
        stock_id = self.find_stock_id(params)

        if not stock_id:
            raise OperationError("No valid stock record identifier found.")

        logger.info(f"Setting stock {stock_id} to {quantity}")
        payload = self.payload_builder.build_update(
            STOCK_AVAILABLE_PAYLOAD, stock_id, required={"quantity": quantity}
        )
        return self.send("PATCH", f"stock_availables/{stock_id}", payload, STOCK_AVAILABLE_PAYLOAD)
