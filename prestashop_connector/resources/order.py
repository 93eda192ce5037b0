"""Order operations."""
from typing import Any, Dict

from prestashop_connector.builder import ORDER_PAYLOAD
from prestashop_connector.resources.base import ResourceHandler, get_param, require_param


class OrderResource(ResourceHandler):
    """Orders are read, deleted, and patched one attribute at a time."""

    endpoint = "orders"
    id_param = "order_id"
    payload_config = ORDER_PAYLOAD

    operations = {
        **ResourceHandler.operations,
        "changeStatus": "change_status",
        "shippingNumber": "set_shipping_number",
        "orderNote": "set_note",
    }

    def _patch(self, params: Dict[str, Any], fields: Dict[str, Any]) -> Any:
        order_id = require_param(params, self.id_param)
        payload = self.payload_builder.build_update(self.payload_config, order_id, required=fields)
        return self.send("PATCH", f"{self.endpoint}/{order_id}", payload)

    def change_status(self, params: Dict[str, Any]) -> Any:
        return self._patch(params, {"current_state": require_param(params, "order_state_id")})

    def set_shipping_number(self, params: Dict[str, Any]) -> Any:
        return self._patch(params, {"shipping_number": get_param(params, "shipping_number", "")})

    def set_note(self, params: Dict[str, Any]) -> Any:
        return self._patch(params, {"note": get_param(params, "note", "")})
