"""
API Module

Webservice transport, endpoint naming and cached lookups.
"""

from .endpoint_mapper import EndpointMapper
from .lookups import LookupCache, LookupOption, LookupService, default_cache
from .prestashop_client import PrestaShopClient

__all__ = [
    "EndpointMapper",
    "LookupCache",
    "LookupOption",
    "LookupService",
    "PrestaShopClient",
    "default_cache",
]
