from abc import ABC, abstractmethod
from typing import List

from .products import Product


# ---------------------------------------------------------------------------
# Abstract client interface
# ---------------------------------------------------------------------------

class ProductsClient(ABC):
    """Every product catalogue client (real or mock) must implement this interface.

    Failures are reported with the exceptions in
    inventory_client.integrations.policy.response_wrappers.
    """

    @abstractmethod
    async def list_products(self) -> List[Product]:
        """Return every product in the catalogue."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Product:
        """Fetch a single product by ID."""

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Create a product and return the stored record (with id and date)."""

    @abstractmethod
    async def update_product(self, product_id: str, product: Product) -> Product:
        """Replace the editable fields of an existing product."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """Remove a product from the catalogue."""
