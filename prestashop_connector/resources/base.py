"""Shared behaviour of the per-resource operation handlers."""
import logging
from typing import Any, Callable, Dict, List, Optional

from prestashop_connector.api.endpoint_mapper import EndpointMapper
from prestashop_connector.builder import PayloadBuilder, PayloadConfig
from prestashop_connector.errors import OperationError
from prestashop_connector.query import Condition, QuerySpec, SortDirective, compile_query

logger = logging.getLogger(__name__)


def get_param(params: Dict[str, Any], name: str, default: Any = None) -> Any:
    """Read a host parameter; None counts as missing."""
    value = params.get(name, default)
    return default if value is None else value


def require_param(params: Dict[str, Any], name: str) -> Any:
    """Read a mandatory host parameter."""
    value = params.get(name)
    if value is None or value == "":
        raise OperationError(f"Missing required parameter: {name}")
    return value


def build_query_spec(params: Dict[str, Any]) -> QuerySpec:
    """
    Build the QuerySpec of a getAll call.

    Limit and sort always apply; conditions only when filter_type is "manual".
    """
    limit = get_param(params, "limit")
    conditions: List[Condition] = []

    if get_param(params, "filter_type", "none") == "manual":
        conditions = [Condition.from_dict(c) for c in get_param(params, "conditions", [])]

    return QuerySpec(
        conditions=conditions,
        sort=[SortDirective.from_dict(s) for s in get_param(params, "sort", [])],
        limit=int(limit) if limit not in (None, "") else None,
    )


class ResourceHandler:
    """
    Base handler: one instance per resource, one method per operation.

    Subclasses set the endpoint, the id parameter name and the operation
    table, and add their write operations.
    """

    endpoint = ""
    id_param = ""
    payload_config: Optional[PayloadConfig] = None

    # Operation name (as the host sends it) -> method name
    operations: Dict[str, str] = {
        "delete": "delete",
        "get": "get",
        "getAll": "get_all",
    }

    def __init__(self, client, payload_builder: Optional[PayloadBuilder] = None):
        self.client = client
        self.payload_builder = payload_builder or PayloadBuilder(client)

    @property
    def entity(self) -> str:
        return EndpointMapper.get_entity(self.endpoint)

    def get_operation(self, operation: str) -> Callable[[Dict[str, Any]], Any]:
        if operation not in self.operations:
            raise OperationError(
                f"The operation '{operation}' is not supported for {self.entity}"
            )
        return getattr(self, self.operations[operation])

    def execute(self, operation: str, params: Dict[str, Any]) -> Any:
        """Run one operation for one item."""
        result = self.get_operation(operation)(params)
        logger.info(f"{self.entity}.{operation} completed")
        return result

    def get(self, params: Dict[str, Any]) -> Any:
        entity_id = require_param(params, self.id_param)
        response = self.client.request("GET", f"{self.endpoint}/{entity_id}")
        return response.get(self.entity, response) if isinstance(response, dict) else response

    def delete(self, params: Dict[str, Any]) -> Dict[str, Any]:
        entity_id = require_param(params, self.id_param)
        self.client.request("DELETE", f"{self.endpoint}/{entity_id}")
        return {"success": True}

    def get_all(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        query_string = compile_query(build_query_spec(params))
        response = self.client.request("GET", self.endpoint, query_string=query_string)
        return self.client.extract_collection(response, self.endpoint, self.entity)

    def send(self, method: str, resource: str, payload: Dict[str, Any], config: Optional[PayloadConfig] = None) -> Any:
        """Serialize a payload and write it."""
        body = self.payload_builder.to_xml(config or self.payload_config, payload)
        return self.client.request(method, resource, body=body)
