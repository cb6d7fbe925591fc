import json

import pytest
from fastapi.testclient import TestClient

from storefront.main import create_app
from storefront.settings import Settings

PRODUCTS = [
    {"id": 1, "name": "Ibuprofen", "price": 6.49, "category": "Pain Relief"},
    {"id": "vit-c", "name": "Vitamin C", "price": 9.5, "category": "Vitamins"},
    {"id": 3, "name": "Aspirin", "price": 3.99, "category": "Pain Relief"},
    {"id": 4, "name": "Cotton Pads", "price": 2.1},
]


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "products.json").write_text(json.dumps(PRODUCTS), encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_client(data_dir):
    def _make(**overrides):
        cfg = Settings(data_dir=str(data_dir), admin_dir=str(data_dir / "admin"), **overrides)
        app = create_app(cfg)
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def orders_on_disk(data_dir):
    def _read():
        path = data_dir / "orders.json"
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def products():
    return PRODUCTS
