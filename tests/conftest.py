"""
Pytest configuration and fixtures for inventory_tracker tests
"""

import json
from pathlib import Path

import pytest

from inventory_tracker.handlers import RequestHandlers
from inventory_tracker.repositories import InventoryStore
from inventory_tracker.services import ProductService, RentalService


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Location of the inventory document for a test"""
    return tmp_path / "data" / "inventory.json"


@pytest.fixture
def write_document(data_path: Path):
    """Write a raw JSON document to the inventory file"""

    def _write(document) -> Path:
        data_path.parent.mkdir(parents=True, exist_ok=True)
        data_path.write_text(json.dumps(document), encoding="utf-8")
        return data_path

    return _write


@pytest.fixture
def read_document(data_path: Path):
    """Read the inventory file back as raw JSON"""

    def _read():
        return json.loads(data_path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def store(data_path: Path) -> InventoryStore:
    return InventoryStore(data_path)


@pytest.fixture
def products(store: InventoryStore) -> ProductService:
    return ProductService(store)


@pytest.fixture
def rentals(store: InventoryStore) -> RentalService:
    return RentalService(store)


@pytest.fixture
def handlers(products: ProductService, rentals: RentalService) -> RequestHandlers:
    return RequestHandlers(products, rentals)


@pytest.fixture
def drill(products: ProductService):
    """Seed the store with a single product: Drill, 3 in stock"""
    result = products.add(1, "Drill", 49.99, 3)
    assert result.success
    return result.product
