#!/usr/bin/env python3
"""
Check connectivity to the inventory API and print the current catalogue.

Usage:
  python scripts/check_products_api.py
  python scripts/check_products_api.py --base-url http://localhost:5000/api
  python scripts/check_products_api.py --roundtrip   # also create, update and delete a probe product

Reads config/products_api.yml and INVENTORY_API_* variables (a .env file is honoured).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

from inventory_client.integrations import InventoryApiError, Product, RealProductsClient  # noqa: E402
from inventory_client.utils.config_loader import load_products_api_config  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def run(client: RealProductsClient, roundtrip: bool) -> None:
    products = await client.list_products()
    print(f"{len(products)} products at {client.config.collection_url}\n")
    for p in products:
        print(f"  {p.id}  {p.name:<30} {p.formatted_price:>12}  stock={p.stock:<5} {p.formatted_registration_date}")

    if not roundtrip:
        return

    print("\nRound trip:")
    created = await client.create_product(Product(name="Producto de prueba", price=Decimal("1.50"), stock=1))
    print(f"  created  {created.id} ({created.formatted_registration_date})")
    updated = await client.update_product(created.id, Product(name="Producto de prueba", price=Decimal("2.00"), stock=2))
    print(f"  updated  {updated.id} price={updated.formatted_price} stock={updated.stock}")
    fetched = await client.get_product(created.id)
    print(f"  fetched  {fetched.id} {fetched.name}")
    await client.delete_product(created.id)
    print(f"  deleted  {created.id}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Check the inventory products API")
    parser.add_argument("--config", type=Path, default=None, help="Path to a products_api.yml file")
    parser.add_argument("--base-url", default=None, help="Override the API base URL")
    parser.add_argument("--roundtrip", action="store_true", help="Also create/update/delete a probe product")
    args = parser.parse_args()

    config = load_products_api_config(args.config)
    if args.base_url:
        config = config.copy(update={"base_url": args.base_url})

    try:
        asyncio.run(run(RealProductsClient(config), args.roundtrip))
    except InventoryApiError as e:
        print(f"FAIL [{e.kind.value}]: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
