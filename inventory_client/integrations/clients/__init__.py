"""
Products client selection.

Switching implementations happens in ONE place (get_products_client):
- USE_MOCK_PRODUCTS=1 -> in-memory MockProductsClient
- otherwise          -> RealProductsClient configured from config/products_api.yml
"""

import logging
import os
from typing import Optional

from inventory_client.integrations.clients.mocks.products import MockProductsClient
from inventory_client.integrations.clients.real_http.products import RealProductsClient
from inventory_client.integrations.contracts.interfaces import ProductsClient
from inventory_client.utils.config_loader import ProductsApiConfig, load_products_api_config

logger = logging.getLogger(__name__)


def get_products_client(config: Optional[ProductsApiConfig] = None) -> ProductsClient:
    if os.getenv("USE_MOCK_PRODUCTS", "").lower() in ("1", "true", "yes"):
        logger.info("Using in-memory mock products client")
        return MockProductsClient()
    return RealProductsClient(config or load_products_api_config())
