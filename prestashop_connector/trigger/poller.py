"""
Poller - Detects newly created entities by their increasing ids

Each event ("customers.created", "orders.created", ...) keeps the highest id
seen so far. A poll asks for everything above it, sorted by id.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from prestashop_connector.api.endpoint_mapper import EndpointMapper
from prestashop_connector.errors import OperationError
from prestashop_connector.query import Condition, ConditionType, QuerySpec, SortDirective, compile_query

logger = logging.getLogger(__name__)

EVENTS = [
    "addresses.created",
    "carriers.created",
    "cart_rules.created",
    "carts.created",
    "categories.created",
    "combinations.created",
    "customer_messages.created",
    "customer_threads.created",
    "customers.created",
    "employees.created",
    "manufacturers.created",
    "messages.created",
    "order_carriers.created",
    "order_details.created",
    "order_histories.created",
    "order_payments.created",
    "orders.created",
    "products.created",
    "specific_price_rules.created",
    "specific_prices.created",
    "stock_availables.created",
    "stores.created",
    "suppliers.created",
    "tags.created",
]


class PollStateStore:
    """Last checked id per event, persisted as JSON"""

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: JSON file; None keeps state in memory only
        """
        self.path = Path(path) if path else None
        self._state: Dict[str, int] = self._load()

    def _load(self) -> Dict[str, int]:
        if self.path is None or not self.path.exists():
            return {}

        with open(self.path, "r") as f:
            return {key: int(value) for key, value in json.load(f).items()}

    def get(self, event: str) -> Optional[int]:
        return self._state.get(event)

    def set(self, event: str, last_id: int) -> None:
        self._state[event] = last_id

        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(self._state, f, indent=2)
            logger.debug(f"Saved poll state to {self.path}")


class Poller:
    """
    Polls one event

    Usage:
    ```python
    poller = Poller(client, "orders.created", starting_id=1200,
                    store=PollStateStore(Path(".state/poll_state.json")))
    new_orders = poller.poll()
    ```
    """

    def __init__(self, client, event: str, starting_id: int = 0, store: Optional[PollStateStore] = None):
        if event not in EVENTS:
            raise OperationError(f"Unknown event: {event}")

        self.client = client
        self.event = event
        self.starting_id = starting_id
        self.store = store or PollStateStore()
        self.endpoint = event.split(".")[0]

    @property
    def last_id(self) -> int:
        last_id = self.store.get(self.event)
        return last_id if last_id else self.starting_id

    def build_query(self) -> str:
        return compile_query(
            QuerySpec(
                conditions=[Condition("id", ConditionType.GT, str(self.last_id))],
                sort=[SortDirective("id")],
            )
        )

    def poll(self) -> List[Dict[str, Any]]:
        """
        Fetch entities created since the last poll

        Returns:
            New entities in id order ([] when nothing new)
        """
        response = self.client.request("GET", self.endpoint, query_string=self.build_query())
        items = self.client.extract_collection(
            response, self.endpoint, EndpointMapper.get_entity(self.endpoint)
        )

        if not items:
            logger.debug(f"{self.event}: nothing new after id {self.last_id}")
            return []

        max_id = max(int(item["id"]) for item in items)
        self.store.set(self.event, max_id)

        logger.info(f"{self.event}: {len(items)} new, last id {max_id}")
        return items
