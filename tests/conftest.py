"""Pytest fixtures for inventory client tests."""

import httpx
import pytest

from inventory_client.integrations.clients.real_http.products import RealProductsClient
from inventory_client.utils.config_loader import ProductsApiConfig
from tests.http_helpers import BASE_URL, RecordingHandler


@pytest.fixture
def api_config():
    return ProductsApiConfig(base_url=BASE_URL)


@pytest.fixture
def make_client(api_config):
    def _make(handler: RecordingHandler) -> RealProductsClient:
        return RealProductsClient(api_config, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture(autouse=True)
def _no_inventory_env(monkeypatch):
    for name in ("INVENTORY_API_BASE_URL", "INVENTORY_API_LIST_TIMEOUT", "INVENTORY_API_TIMEOUT", "USE_MOCK_PRODUCTS"):
        monkeypatch.delenv(name, raising=False)
