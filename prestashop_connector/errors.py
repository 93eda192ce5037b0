"""Connector exceptions."""
from typing import Any, Dict, List, Optional


class PrestaShopError(Exception):
    """Base class for connector errors."""


class PrestaShopApiError(PrestaShopError):
    """Raised when the webservice call fails or the shop rejects the request."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(
            f"[{error.get('code')}] {error.get('message')}" for error in self.errors
        )
        return f"{self.message}: {details}"


class OperationError(PrestaShopError):
    """Raised by an operation before any write is attempted."""
