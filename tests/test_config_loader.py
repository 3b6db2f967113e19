import pytest
from pydantic import ValidationError

from inventory_client.utils.config_loader import ProductsApiConfig, load_products_api_config


def test_defaults_match_production_api():
    config = ProductsApiConfig()
    assert config.collection_url == "http://miapiunach.somee.com/api/Productos"
    assert config.item_url("42") == "http://miapiunach.somee.com/api/Productos/42"
    assert config.list_timeout_seconds == 15
    assert config.request_timeout_seconds == 10


def test_item_url_escapes_path_separators():
    assert ProductsApiConfig(base_url="http://h/api/").item_url("a/b") == "http://h/api/Productos/a%2Fb"


def test_load_from_yaml(tmp_path):
    path = tmp_path / "products_api.yml"
    path.write_text(
        "products_api:\n"
        "  base_url: http://localhost:5000/api\n"
        "  request_timeout_seconds: 3\n",
        encoding="utf-8",
    )

    config = load_products_api_config(path)

    assert config.collection_url == "http://localhost:5000/api/Productos"
    assert config.request_timeout_seconds == 3
    assert config.list_timeout_seconds == 15


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "products_api.yml"
    path.write_text("products_api:\n  base_url: http://from-file/api\n", encoding="utf-8")
    monkeypatch.setenv("INVENTORY_API_BASE_URL", "http://from-env/api")
    monkeypatch.setenv("INVENTORY_API_LIST_TIMEOUT", "30")

    config = load_products_api_config(path)

    assert config.base_url == "http://from-env/api"
    assert config.list_timeout_seconds == 30


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_products_api_config(tmp_path / "absent.yml")


def test_default_config_file_loads():
    config = load_products_api_config()
    assert config.collection_path == "/Productos"


def test_non_positive_timeout_rejected(tmp_path):
    path = tmp_path / "products_api.yml"
    path.write_text("products_api:\n  list_timeout_seconds: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_products_api_config(path)
