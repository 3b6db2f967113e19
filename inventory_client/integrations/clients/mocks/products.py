"""
Products MOCK client.

In-memory catalogue for development and UI testing without the inventory API.
Seeded with a few sample products; create/update/delete act on the in-memory
copy only and never touch the network.
"""

import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from inventory_client.integrations.contracts.interfaces import ProductsClient
from inventory_client.integrations.contracts.products import Product
from inventory_client.integrations.policy.response_wrappers import ProductNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_PRODUCTS: List[Product] = [
    Product(
        id="3fa85f64-5717-4562-b3fc-2c963f66afa6",
        name="Laptop HP",
        price=Decimal("15999.99"),
        stock=5,
        registered_at="2025-10-29T23:45:19.749Z",
    ),
    Product(
        id="2fa85f64-5717-4562-b3fc-2c963f66afa7",
        name="Mouse Logitech",
        price=Decimal("299.99"),
        stock=20,
        registered_at="2025-10-29T23:45:19.749Z",
    ),
    Product(
        id="1fa85f64-5717-4562-b3fc-2c963f66afa8",
        name="Teclado Mecánico",
        price=Decimal("1299.99"),
        stock=0,
        registered_at="2025-10-29T23:45:19.749Z",
    ),
]


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class MockProductsClient(ProductsClient):
    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        seed = _MOCK_PRODUCTS if products is None else products
        self._products: Dict[str, Product] = {}
        for product in seed:
            key = product.id or str(uuid.uuid4())
            self._products[key] = product.with_id(key)

    async def list_products(self) -> List[Product]:
        logger.info(f"[MOCK] Listing {len(self._products)} products")
        return list(self._products.values())

    async def get_product(self, product_id: str) -> Product:
        return self._require(product_id)

    async def create_product(self, product: Product) -> Product:
        product_id = str(uuid.uuid4())
        created = Product(
            id=product_id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            registered_at=_utc_now_iso(),
        )
        self._products[product_id] = created
        logger.info(f"[MOCK] Created product {product_id}: {product.name}")
        return created

    async def update_product(self, product_id: str, product: Product) -> Product:
        existing = self._require(product_id)
        updated = Product(
            id=product_id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            registered_at=existing.registered_at,
        )
        self._products[product_id] = updated
        logger.info(f"[MOCK] Updated product {product_id}")
        return updated

    async def delete_product(self, product_id: str) -> None:
        self._require(product_id)
        del self._products[product_id]
        logger.info(f"[MOCK] Deleted product {product_id}")

    def _require(self, product_id: str) -> Product:
        product = self._products.get(str(product_id))
        if product is None:
            raise ProductNotFoundError(
                f"Product not found: {product_id}",
                status_code=404,
                payload={"product_id": product_id},
            )
        return product


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
