"""
Integrations layer.
This package contains all code used to communicate with the inventory REST API.

Key rule:
- Consumers MUST NOT call the API directly.
- They call a ProductsClient (under inventory_client/integrations/clients).
- The MOCK client serves development; the REAL_HTTP client talks to the server.
"""

from .contracts.interfaces import ProductsClient
from .contracts.products import (
    INVALID_DATE_PLACEHOLDER,
    NO_DATE_PLACEHOLDER,
    Product,
)
from .policy.response_wrappers import (
    ApiError,
    DecodeError,
    EndpointNotFoundError,
    ErrorKind,
    InventoryApiError,
    NetworkError,
    ProductNotFoundError,
    UnexpectedFormatError,
)
from .clients import get_products_client
from .clients.mocks.products import MockProductsClient
from .clients.real_http.products import RealProductsClient

__all__ = [
    # contracts
    "Product", "ProductsClient", "NO_DATE_PLACEHOLDER", "INVALID_DATE_PLACEHOLDER",
    # errors
    "ErrorKind", "InventoryApiError", "NetworkError", "DecodeError",
    "UnexpectedFormatError", "EndpointNotFoundError", "ApiError", "ProductNotFoundError",
    # clients
    "RealProductsClient", "MockProductsClient", "get_products_client",
]
