"""Service wiring for InventoryTracker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from inventory_tracker.config import AppConfig
from inventory_tracker.handlers import RequestHandlers
from inventory_tracker.logging_config import configure_logging, get_logger
from inventory_tracker.paths import get_inventory_path
from inventory_tracker.repositories import InventoryStore
from inventory_tracker.services.product_service import ProductService
from inventory_tracker.services.rental_service import RentalService


@dataclass(frozen=True)
class AppServices:
    """Shared store, ledgers and handlers for dependency injection."""

    config: AppConfig
    store: InventoryStore
    product_service: ProductService
    rental_service: RentalService
    handlers: RequestHandlers


def load_config(data_path: Optional[Path | str] = None) -> AppConfig:
    """Build the runtime config, defaulting to the per-user inventory file."""
    path = Path(data_path) if data_path is not None else get_inventory_path()
    return AppConfig(data_path=path)


def build_services(
    config: Optional[AppConfig] = None, *, setup_logging: bool = True
) -> AppServices:
    """Create the store and ledgers for ``config``."""
    if config is None:
        config = load_config()
    if setup_logging:
        configure_logging(config.log_dir)
    logger = get_logger(__name__)
    logger.info("Starting %s with data file %s", config.app_name, config.data_path)

    store = InventoryStore(config.data_path)
    product_service = ProductService(store)
    rental_service = RentalService(store)
    return AppServices(
        config=config,
        store=store,
        product_service=product_service,
        rental_service=rental_service,
        handlers=RequestHandlers(product_service, rental_service),
    )
