"""
Utility modules for the inventory client
"""
from .config_loader import ProductsApiConfig, load_products_api_config

__all__ = [
    'ProductsApiConfig',
    'load_products_api_config',
]
