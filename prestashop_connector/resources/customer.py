"""Customer operations."""
from typing import Any, Dict

from prestashop_connector.builder import CUSTOMER_PAYLOAD
from prestashop_connector.resources.base import ResourceHandler, get_param, require_param


class CustomerResource(ResourceHandler):
    """Create, read, update and delete customers."""

    endpoint = "customers"
    id_param = "customer_id"
    payload_config = CUSTOMER_PAYLOAD

    operations = {
        **ResourceHandler.operations,
        "create": "create",
        "update": "update",
    }

    REQUIRED_FIELDS = ("email", "firstname", "lastname", "passwd")

    def _required(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {name: get_param(params, name) for name in self.REQUIRED_FIELDS}

    def create(self, params: Dict[str, Any]) -> Any:
        payload = self.payload_builder.build_create(
            self.payload_config,
            required=self._required(params),
            optional=get_param(params, "additional_fields", {}),
        )
        return self.send("POST", self.endpoint, payload)

    def update(self, params: Dict[str, Any]) -> Any:
        customer_id = require_param(params, self.id_param)
        payload = self.payload_builder.build_update(
            self.payload_config,
            customer_id,
            required=self._required(params),
            optional=get_param(params, "additional_fields", {}),
        )
        return self.send("PATCH", f"{self.endpoint}/{customer_id}", payload)
