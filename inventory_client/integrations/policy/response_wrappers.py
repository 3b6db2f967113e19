from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, List, Optional

from inventory_client.integrations.contracts.products import Product


class ErrorKind(str, Enum):
    NETWORK = "NETWORK"
    DECODE = "DECODE"
    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"
    NOT_FOUND = "NOT_FOUND"
    API = "API"


class InventoryApiError(Exception):
    """Base class for every failure reported by a products client."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class NetworkError(InventoryApiError):
    """No response was obtained: connection refused, DNS failure or timeout."""

    kind = ErrorKind.NETWORK


class DecodeError(InventoryApiError):
    """The response body was not JSON, or not the JSON shape expected."""

    kind = ErrorKind.DECODE


class UnexpectedFormatError(DecodeError):
    """Valid JSON of the wrong shape: a list where an object was expected, or the reverse."""


class EndpointNotFoundError(InventoryApiError):
    """HTTP 404 on the collection endpoint: the base URL or path is wrong."""

    kind = ErrorKind.ENDPOINT_NOT_FOUND


class ApiError(InventoryApiError):
    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code
        self.body = body


class ProductNotFoundError(ApiError):
    """HTTP 404 on an item endpoint."""

    kind = ErrorKind.NOT_FOUND


def parse_json_body(text: str, *, url: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DecodeError(
            f"Could not parse the server response from {url} as JSON.",
            payload={"url": url, "body": text},
        ) from exc


def normalize_product_list(raw: Any, *, url: str) -> List[Product]:
    if not isinstance(raw, list):
        raise UnexpectedFormatError(
            f"Unexpected response format from {url}: expected a list, got {type(raw).__name__}.",
            payload={"url": url, "body": raw},
        )
    return [normalize_product(item, url=url) for item in raw]


def normalize_product(raw: Any, *, url: str) -> Product:
    if not isinstance(raw, dict):
        raise UnexpectedFormatError(
            f"Unexpected response format from {url}: expected a product object, got {type(raw).__name__}.",
            payload={"url": url, "body": raw},
        )
    return Product.from_json(raw)


def error_for_status(status_code: int, body: str, *, url: str, collection: bool = False) -> InventoryApiError:
    """Map a non-success HTTP status to the matching error kind."""
    payload = {"url": url, "status_code": status_code, "body": body}
    if status_code == 404 and collection:
        return EndpointNotFoundError(f"Endpoint not found. Check the URL: {url}", payload=payload)
    if status_code == 404:
        return ProductNotFoundError(
            f"Product not found: {url}",
            status_code=status_code,
            body=body,
            payload=payload,
        )
    return ApiError(f"Error {status_code}: {body}", status_code=status_code, body=body, payload=payload)
