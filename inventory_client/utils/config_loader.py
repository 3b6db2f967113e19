"""
Configuration loader for the inventory API client
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote
from pydantic import BaseModel, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "products_api.yml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "INVENTORY_API_BASE_URL": "base_url",
    "INVENTORY_API_LIST_TIMEOUT": "list_timeout_seconds",
    "INVENTORY_API_TIMEOUT": "request_timeout_seconds",
}


class ProductsApiConfig(BaseModel):
    """Inventory API client configuration"""

    base_url: str = "http://miapiunach.somee.com/api"
    collection_path: str = "/Productos"  # capital P, as served by the API
    list_timeout_seconds: float = Field(gt=0.0, default=15.0)
    request_timeout_seconds: float = Field(gt=0.0, default=10.0)

    @property
    def collection_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.collection_path.strip('/')}"

    def item_url(self, product_id: str) -> str:
        return f"{self.collection_url}/{quote(str(product_id), safe='')}"


def load_products_api_config(config_path: Optional[Path] = None) -> ProductsApiConfig:
    """
    Load and validate the inventory API configuration

    Values come from the YAML file (under a ``products_api`` key) and are
    then overridden by INVENTORY_API_* environment variables.

    Args:
        config_path: Path to config file. Defaults to config/products_api.yml;
            a missing default file just means built-in defaults.

    Returns:
        Validated ProductsApiConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    config_data: Dict[str, Any] = {}

    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            file_data = yaml.safe_load(f) or {}
        config_data.update(file_data.get("products_api") or {})

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config_data[field_name] = value

    try:
        config = ProductsApiConfig(**config_data)
        logger.info(f"Inventory API configured at {config.collection_url}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
