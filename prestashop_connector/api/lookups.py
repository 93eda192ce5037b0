"""
Lookups - Dropdown choices and shop-wide settings from the webservice

Languages and the default language are cached for the life of the process
(an unconfigured default language is not cached).
The other lookups are fetched on every call.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from prestashop_connector.api.endpoint_mapper import EndpointMapper
from prestashop_connector.query import build_id_filter

logger = logging.getLogger(__name__)


@dataclass
class LookupOption:
    """A display choice"""

    name: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


class LookupCache:
    """
    Process-wide memo of lookup results

    Entries are filled on first miss and never refreshed. Population is
    first-write-wins: concurrent misses on the same key load only once.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get_or_load(self, key: str, loader: Callable[[], Any], keep_empty: bool = True) -> Any:
        """
        Return the cached value, loading it on a miss

        With keep_empty=False an empty result is returned but not stored, so
        the next call loads again.
        """
        if key in self._values:
            return self._values[key]

        with self._lock:
            if key in self._values:
                return self._values[key]

            value = loader()
            if value or keep_empty:
                logger.debug(f"Populating lookup cache: {key}")
                self._values[key] = value
            return value

    def invalidate(self, key: Optional[str] = None) -> None:
        """Drop one entry, or everything when key is None"""
        with self._lock:
            if key is None:
                self._values.clear()
            else:
                self._values.pop(key, None)


# Shared by every LookupService that is not given its own cache
default_cache = LookupCache()


def _display_name(value: Any) -> str:
    """Names may come back as a plain string or as a language list"""
    if isinstance(value, list):
        for item in value:
            if isinstance(item, dict) and item.get("value"):
                return str(item["value"])
        return ""
    return "" if value is None else str(value)


def sort_options(options: List[LookupOption]) -> List[LookupOption]:
    return sorted(options, key=lambda option: option.name)


class LookupService:
    """
    Resolves lookup collections into LookupOption lists

    Usage:
    ```python
    lookups = LookupService(client)
    lookups.get_default_language()   # "1"
    lookups.get_languages()          # [LookupOption("English", "1"), ...]
    ```
    """

    DEFAULT_LANGUAGE_KEY = "PS_LANG_DEFAULT"

    def __init__(self, client, cache: Optional[LookupCache] = None):
        self.client = client
        self.cache = cache if cache is not None else default_cache

    def _fetch(self, endpoint: str, localized: bool = False) -> List[Dict[str, Any]]:
        query = "display=full"
        if localized:
            query = f"language={self.get_default_language()}&{query}"

        response = self.client.request("GET", endpoint, query_string=query)
        return self.client.extract_collection(response, endpoint, EndpointMapper.get_entity(endpoint))

    def _options(
        self,
        endpoint: str,
        localized: bool = False,
        label: Optional[Callable[[Dict[str, Any]], str]] = None,
    ) -> List[LookupOption]:
        label = label or (lambda item: _display_name(item.get("name")))
        return sort_options(
            [LookupOption(label(item), item.get("id")) for item in self._fetch(endpoint, localized)]
        )

    def get_default_language(self) -> str:
        """Id of the shop's default language ("" when not configured, retried on the next call)"""
        return self.cache.get_or_load(
            "default_language", self._load_default_language, keep_empty=False
        )

    def _load_default_language(self) -> str:
        query = f"{build_id_filter('name', self.DEFAULT_LANGUAGE_KEY)}&display=full"
        response = self.client.request("GET", "configurations", query_string=query)

        for configuration in self.client.extract_collection(response, "configurations", "configuration"):
            return str(configuration.get("value", ""))

        logger.warning("No default language configured")
        return ""

    def get_languages(self) -> List[LookupOption]:
        return self.cache.get_or_load("languages", lambda: self._options("languages"))

    def get_groups(self) -> List[LookupOption]:
        return self._options("groups", localized=True)

    def get_customer_groups(self) -> List[LookupOption]:
        return [LookupOption("All groups", 0)] + self.get_groups()

    def get_shops(self) -> List[LookupOption]:
        return self._options("shops")

    def get_shop_groups(self) -> List[LookupOption]:
        return self._options("shop_groups")

    def get_categories(self) -> List[LookupOption]:
        return self._options("categories", localized=True)

    def get_order_states(self) -> List[LookupOption]:
        return self._options("order_states", localized=True)

    def get_manufacturers(self) -> List[LookupOption]:
        return self._options("manufacturers")

    def get_suppliers(self) -> List[LookupOption]:
        return self._options("suppliers")

    def get_currencies(self) -> List[LookupOption]:
        currencies = self._options(
            "currencies",
            label=lambda item: f"{_display_name(item.get('name'))} ({item.get('iso_code')})",
        )
        return [LookupOption("All currencies", 0)] + currencies

    def get_countries(self) -> List[LookupOption]:
        return [LookupOption("All countries", 0)] + self._options("countries", localized=True)

    LOOKUPS = {
        "languages": "get_languages",
        "groups": "get_groups",
        "customer_groups": "get_customer_groups",
        "shops": "get_shops",
        "shop_groups": "get_shop_groups",
        "categories": "get_categories",
        "order_states": "get_order_states",
        "manufacturers": "get_manufacturers",
        "suppliers": "get_suppliers",
        "currencies": "get_currencies",
        "countries": "get_countries",
    }

    def get(self, name: str) -> List[LookupOption]:
        """Resolve a lookup by name (e.g. "order_states")"""
        if name not in self.LOOKUPS:
            raise KeyError(f"Unknown lookup: {name}")
        return getattr(self, self.LOOKUPS[name])()
