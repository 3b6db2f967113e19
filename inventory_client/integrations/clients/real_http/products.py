"""
Real Products HTTP Client.

Purpose:
- Talks to the inventory REST API (/Productos) for list/get/create/update/delete
- Normalizes response bodies into the Product contract

Implementation notes:
- Uses httpx.AsyncClient, one client per call (no shared state between calls)
- Every httpx exception is translated into the InventoryApiError taxonomy,
  so callers never see a transport exception
- No retries: one failure is one reported failure

Important:
- Keep this client as the ONLY place where inventory HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from inventory_client.integrations.contracts.interfaces import ProductsClient
from inventory_client.integrations.contracts.products import Product
from inventory_client.integrations.policy.response_wrappers import (
    DecodeError,
    InventoryApiError,
    NetworkError,
    error_for_status,
    normalize_product,
    normalize_product_list,
    parse_json_body,
)
from inventory_client.utils.config_loader import ProductsApiConfig

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RealProductsClient(ProductsClient):
    def __init__(
        self,
        config: Optional[ProductsApiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or ProductsApiConfig()
        # Injected in tests (httpx.MockTransport); None means the real network
        self._transport = transport

    async def list_products(self) -> List[Product]:
        url = self.config.collection_url
        response = await self._send("GET", url, timeout=self.config.list_timeout_seconds)

        if response.status_code == 200:
            data = self._decode(response, url)
            products = self._normalize(normalize_product_list, data, url)
            logger.info(f"Loaded {len(products)} products from {url}")
            return products

        raise self._failure(response, url, collection=True)

    async def get_product(self, product_id: str) -> Product:
        url = self.config.item_url(product_id)
        response = await self._send("GET", url, timeout=self.config.request_timeout_seconds)

        if response.status_code == 200:
            return self._normalize(normalize_product, self._decode(response, url), url)

        raise self._failure(response, url)

    async def create_product(self, product: Product) -> Product:
        url = self.config.collection_url
        response = await self._send(
            "POST",
            url,
            timeout=self.config.request_timeout_seconds,
            body=product.to_json(),
        )

        if response.status_code in (200, 201):
            created = self._normalize(normalize_product, self._decode(response, url), url)
            logger.info(f"Created product id={created.id}")
            return created

        raise self._failure(response, url, collection=True)

    async def update_product(self, product_id: str, product: Product) -> Product:
        url = self.config.item_url(product_id)
        # The id travels in the path only
        response = await self._send(
            "PUT",
            url,
            timeout=self.config.request_timeout_seconds,
            body=product.to_json(),
        )

        if response.status_code in (200, 204):
            if response.status_code == 204 or not response.text.strip():
                # Server confirmed without echoing; assume it stored exactly what we sent.
                logger.debug(f"Update of {product_id} returned no body; using the submitted fields")
                return product.with_id(product_id)
            return self._normalize(normalize_product, self._decode(response, url), url)

        raise self._failure(response, url)

    async def delete_product(self, product_id: str) -> None:
        url = self.config.item_url(product_id)
        response = await self._send("DELETE", url, timeout=self.config.request_timeout_seconds)

        if response.status_code not in (200, 204):
            raise self._failure(response, url)
        logger.info(f"Deleted product id={product_id}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        url: str,
        *,
        timeout: float,
        body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        logger.info(f"{method} {url}")
        if body is not None:
            logger.debug("Request body: %s", body)
        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=body, headers=JSON_HEADERS)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out after {timeout}s waiting for {url}: {e}")
            raise NetworkError(
                f"Timed out after {timeout}s waiting for the inventory API.",
                payload={"url": url, "method": method},
            ) from e
        except httpx.DecodingError as e:
            logger.error(f"Could not decode response from {url}: {e}")
            raise DecodeError(
                "Could not decode the server response.",
                payload={"url": url, "method": method},
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Request error connecting to inventory API at {url}: {e}")
            raise NetworkError(
                "Network error. Check your internet connection.",
                payload={"url": url, "method": method, "error": str(e)},
            ) from e

        logger.info(f"Status code: {response.status_code}")
        logger.debug("Response body: %s", response.text)
        return response

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> Any:
        try:
            return parse_json_body(response.text, url=url)
        except DecodeError as e:
            logger.error(f"{e.message} Body: {response.text!r}")
            raise

    @staticmethod
    def _normalize(normalizer, data: Any, url: str):
        try:
            return normalizer(data, url=url)
        except InventoryApiError as e:
            logger.error(e.message)
            raise

    @staticmethod
    def _failure(response: httpx.Response, url: str, *, collection: bool = False) -> InventoryApiError:
        error = error_for_status(response.status_code, response.text, url=url, collection=collection)
        logger.error(f"HTTP error from inventory API: {response.status_code} {response.text}")
        return error
