"""
PrestaShop webservice client.

Features:
- Basic authentication with the webservice key
- JSON or XML output format
- Raw query strings (the filter dialect needs literal brackets)
- Error envelopes translated into PrestaShopApiError
"""

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional

import requests
from requests.auth import HTTPBasicAuth

from config import PrestaShopApiConfig
from prestashop_connector.errors import PrestaShopApiError

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.split("}", 1)[-1]


def xml_to_data(element: ET.Element) -> Any:
    """
    Convert a webservice XML element into plain data

    - <name><language id="1">x</language></name> -> [{"id": "1", "value": "x"}]
    - leaf elements -> text ("" when empty)
    - empty leaves with attributes -> attribute dict
    - repeated children -> list
    """
    children = list(element)

    if not children:
        text = (element.text or "").strip()
        if not text and element.attrib:
            # <customer id="1" xlink:href="..."/> in collection listings
            return {_local_name(k): v for k, v in element.attrib.items()}
        return text

    # <languages><language><id>1</id>...</language></languages> is a collection
    if all(
        child.tag == "language" and "id" in child.attrib and not list(child)
        for child in children
    ):
        return [
            {"id": child.get("id"), "value": (child.text or "").strip()}
            for child in children
        ]

    data: Dict[str, Any] = {}
    for child in children:
        value = xml_to_data(child)
        if child.tag in data:
            if not isinstance(data[child.tag], list):
                data[child.tag] = [data[child.tag]]
            data[child.tag].append(value)
        else:
            data[child.tag] = value

    return data


def parse_xml(text: str) -> Dict[str, Any]:
    """Parse a <prestashop> document into {child_tag: data}"""
    root = ET.fromstring(text)
    return xml_to_data(root) if list(root) else {}


class PrestaShopClient:
    """Client for the PrestaShop webservice."""

    def __init__(self, config: PrestaShopApiConfig):
        """Initialize client."""
        self.config = config
        self.base_url = f"{config.base_url.rstrip('/')}/api/"
        self.output_format = (config.output_format or "JSON").upper()

        self.session = requests.Session()
        if config.api_key:
            # The key is the username, the password stays empty
            self.session.auth = HTTPBasicAuth(config.api_key, "")

    def build_url(self, resource: str, query_string: str = "", uri: Optional[str] = None) -> str:
        """Build the request URL; query strings are appended verbatim."""
        if uri:
            return uri if uri.startswith("http") else f"{self.base_url}{uri.lstrip('/')}"

        separator = "&" if query_string else ""
        return (
            f"{self.base_url}{resource.lstrip('/')}"
            f"?{query_string}{separator}output_format={self.output_format}"
        )

    def request(
        self,
        method: str,
        resource: str,
        body: Optional[str] = None,
        query_string: str = "",
        uri: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Issue one authenticated call.

        Args:
            method: GET, POST, PATCH, PUT or DELETE
            resource: Resource path (e.g. "customers/12")
            body: XML document for writes
            query_string: Pre-compiled query fragment, no leading "?"
            uri: Explicit URL overriding resource/query_string
            options: Extra keyword arguments for requests (headers, timeout...)

        Returns:
            Parsed JSON/XML response ({} for empty bodies)

        Raises:
            PrestaShopApiError: On transport failure or HTTP error status
        """
        url = self.build_url(resource, query_string, uri)
        kwargs: Dict[str, Any] = {"timeout": self.config.timeout}

        if body:
            kwargs["data"] = body.encode("utf-8")
            kwargs["headers"] = {"Content-Type": "application/xml; charset=utf-8"}

        if options:
            headers = {**kwargs.get("headers", {}), **options.get("headers", {})}
            kwargs.update({k: v for k, v in options.items() if k != "headers"})
            if headers:
                kwargs["headers"] = headers

        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            errors = self._extract_errors(e.response)
            logger.error(f"{method} {resource} failed with HTTP {e.response.status_code}")
            raise PrestaShopApiError(
                f"{method} {resource} failed with HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                errors=errors,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {resource} failed: {e}")
            raise PrestaShopApiError(f"{method} {resource} failed: {e}") from e

        return self._parse_response(response)

    def _parse_response(self, response: requests.Response) -> Any:
        """Decode the body according to its content."""
        text = response.text or ""
        if not text.strip():
            return {}

        if text.lstrip().startswith("<"):
            try:
                return parse_xml(text)
            except ET.ParseError as e:
                raise PrestaShopApiError(
                    f"Invalid XML response: {e}", status_code=response.status_code
                ) from e

        try:
            return response.json()
        except ValueError as e:
            raise PrestaShopApiError(
                f"Invalid JSON response: {e}", status_code=response.status_code
            ) from e

    def _extract_errors(self, response: Optional[requests.Response]) -> List[Dict[str, Any]]:
        """
        Read the webservice error envelope.

        JSON: {"errors": [{"code": 85, "message": "..."}]}
        XML:  <prestashop><errors><error><code>85</code><message>..</message></error></errors></prestashop>
        """
        if response is None or not response.text:
            return []

        try:
            if response.text.lstrip().startswith("<"):
                data = parse_xml(response.text)
                errors = (data.get("errors") or {}).get("error", [])
            else:
                errors = json.loads(response.text).get("errors", [])
        except (ET.ParseError, ValueError, AttributeError) as e:
            logger.debug(f"Could not parse error body: {e}")
            return []

        if isinstance(errors, dict):
            errors = [errors]

        return [
            {"code": error.get("code"), "message": error.get("message")}
            for error in errors
            if isinstance(error, dict)
        ]

    @staticmethod
    def extract_collection(response: Any, endpoint: str, entity: str) -> List[Dict[str, Any]]:
        """
        Get the list of entities from a collection response.

        JSON gives {"customers": [...]}; XML gives
        {"customers": {"customer": [...]}} or a single dict for one result.
        The webservice answers an empty JSON list ([]) when nothing matches.
        """
        if not isinstance(response, dict):
            return []

        collection = response.get(endpoint) or []

        if isinstance(collection, dict):
            collection = collection.get(entity, [collection]) if collection else []

        if isinstance(collection, dict):
            collection = [collection]

        return [item for item in collection if isinstance(item, dict)]

    def get_blank_schema(self, endpoint: str, entity: str) -> Any:
        """
        Fetch the writable attributes of an entity with default values.

        Args:
            endpoint: Collection endpoint (e.g. "products")
            entity: Singular key in the response (e.g. "product")

        Returns:
            The template (normally a dict)
        """
        response = self.request("GET", endpoint, query_string="schema=blank")
        if not isinstance(response, dict):
            return {}
        return response.get(entity) or {}
