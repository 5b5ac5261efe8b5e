import logging
import sys

import pytest

from inventory_tracker.app import build_services, load_config
from inventory_tracker.config import AppConfig, DATA_FILE_ENV_VAR, HOME_ENV_VAR
from inventory_tracker.paths import get_inventory_path


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    excepthook = sys.excepthook
    yield
    sys.excepthook = excepthook
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_inventory_path_from_home_env(monkeypatch, tmp_path):
    monkeypatch.delenv(DATA_FILE_ENV_VAR, raising=False)
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))
    assert get_inventory_path() == tmp_path / "InventoryTracker" / "inventory.json"


def test_inventory_path_override(monkeypatch, tmp_path):
    target = tmp_path / "elsewhere.json"
    monkeypatch.setenv(DATA_FILE_ENV_VAR, str(target))
    assert load_config().data_path == target


def test_build_services_shares_one_store(tmp_path, restore_root_logger):
    config = AppConfig(data_path=tmp_path / "inventory.json", log_dir=tmp_path / "logs")
    services = build_services(config)

    assert (tmp_path / "logs" / "app.log").exists()
    assert services.handlers.add_product(
        {"id": 1, "name": "Drill", "price": 49.99, "quantity": 3}
    ).success
    assert services.rental_service.create(1, "Alice", "2024-01-10", "555", "X", 10.0).success
    assert services.store.load().products[0].quantity == 2


def test_build_services_without_logging_setup(tmp_path):
    services = build_services(
        AppConfig(data_path=tmp_path / "inventory.json"), setup_logging=False
    )
    assert services.product_service.list_all().products == []
