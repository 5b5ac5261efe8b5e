"""Shared plumbing for the ledger services."""

from __future__ import annotations

from inventory_tracker.domain.models import Dataset
from inventory_tracker.logging_config import get_logger
from inventory_tracker.repositories.inventory_store import InventoryStore
from inventory_tracker.services.errors import PersistenceError, ServiceError
from inventory_tracker.services.results import OperationResult


class LedgerService:
    """Base class holding the store and a logger named after the service."""

    def __init__(self, store: InventoryStore) -> None:
        self._store = store
        self._logger = get_logger(self.__class__.__name__)

    def _commit(self, dataset: Dataset, failure_message: str) -> None:
        if not self._store.save(dataset):
            raise PersistenceError(failure_message)

    def _fail(self, operation: str, exc: ServiceError) -> OperationResult:
        self._logger.warning("%s failed (%s): %s", operation, exc.code.value, exc)
        return OperationResult.from_error(exc)
