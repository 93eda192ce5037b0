"""
Resources Module

Per-resource operation handlers and the per-item runner.
"""

from .customer import CustomerResource
from .order import OrderResource
from .product import ProductResource
from .specific_price import SpecificPriceResource
from .runner import OperationRunner

__all__ = [
    "CustomerResource",
    "OrderResource",
    "ProductResource",
    "SpecificPriceResource",
    "OperationRunner",
]
