"""Run resource operations for a batch of host items."""
import logging
from typing import Any, Dict, List, Optional

from prestashop_connector.api.endpoint_mapper import EndpointMapper
from prestashop_connector.builder import PayloadBuilder
from prestashop_connector.errors import OperationError
from prestashop_connector.resources.base import ResourceHandler
from prestashop_connector.resources.customer import CustomerResource
from prestashop_connector.resources.order import OrderResource
from prestashop_connector.resources.product import ProductResource
from prestashop_connector.resources.specific_price import SpecificPriceResource

logger = logging.getLogger(__name__)

HANDLERS = {
    "customers": CustomerResource,
    "orders": OrderResource,
    "products": ProductResource,
    "specific_prices": SpecificPriceResource,
}


def to_items(data: Any, index: int) -> List[Dict[str, Any]]:
    """Wrap a response as output items attributed to input item `index`."""
    if isinstance(data, list):
        return [{"json": entry, "item": index} for entry in data]
    return [{"json": data if data is not None else {}, "item": index}]


class OperationRunner:
    """
    Processes host items one at a time.

    Each item is a dict of operation parameters. Results are attributed to
    the index of the item that produced them.
    """

    def __init__(self, client, payload_builder: Optional[PayloadBuilder] = None):
        """
        Initialize runner.

        Args:
            client: PrestaShopClient instance
            payload_builder: Shared builder (defaults to one bound to client)
        """
        self.client = client
        self.payload_builder = payload_builder or PayloadBuilder(client)
        self._handlers: Dict[str, ResourceHandler] = {}

    def get_handler(self, resource: str) -> ResourceHandler:
        endpoint = EndpointMapper.get_endpoint(resource)
        if endpoint not in HANDLERS:
            raise OperationError(f"The resource '{resource}' is not supported")

        if endpoint not in self._handlers:
            self._handlers[endpoint] = HANDLERS[endpoint](self.client, self.payload_builder)
        return self._handlers[endpoint]

    def run(
        self,
        resource: str,
        operation: str,
        items: List[Dict[str, Any]],
        continue_on_fail: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        Run one operation for every item.

        Args:
            resource: "customer", "order", "product" or "specific_price"
            operation: Operation name (e.g. "getAll", "changeStatus")
            items: Parameters per item
            continue_on_fail: Record errors per item instead of raising

        Returns:
            [{"json": {...}, "item": index}, ...]; failed items carry
            {"json": {"error": message}}

        Raises:
            Exception: First failure (remote or malformed parameters) when
                continue_on_fail is False
        """
        handler = self.get_handler(resource)
        handler.get_operation(operation)

        results: List[Dict[str, Any]] = []
        failed = 0

        for index, params in enumerate(items):
            try:
                data = handler.execute(operation, params or {})
                results.extend(to_items(data, index))
            except Exception as e:
                if not continue_on_fail:
                    raise
                failed += 1
                logger.warning(f"Item {index} failed: {e}")
                results.append({"json": {"error": str(e)}, "item": index})

        logger.info(
            f"{resource}.{operation}: {len(items) - failed} items succeeded, {failed} failed"
        )
        return results
