"""Custom service layer errors."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    OUT_OF_STOCK = "out_of_stock"
    PERSISTENCE_FAILURE = "persistence_failure"
    MALFORMED_INPUT = "malformed_input"
    INTERNAL_ERROR = "internal_error"


class ServiceError(Exception):
    """Base error for service-layer failures."""

    code = ErrorCode.PERSISTENCE_FAILURE


class ValidationError(ServiceError):
    """Raised when caller input does not pass validation."""

    code = ErrorCode.MALFORMED_INPUT


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""

    code = ErrorCode.NOT_FOUND


class DuplicateKeyError(ServiceError):
    """Raised when a product id is already taken."""

    code = ErrorCode.DUPLICATE_KEY


class InsufficientStockError(ServiceError):
    """Raised when a sale asks for more units than are in stock."""

    code = ErrorCode.INSUFFICIENT_STOCK

    def __init__(self, message: str, available: int) -> None:
        super().__init__(message)
        self.available = available


class OutOfStockError(ServiceError):
    """Raised when a rental is requested for a product with no stock."""

    code = ErrorCode.OUT_OF_STOCK


class PersistenceError(ServiceError):
    """Raised when the dataset could not be written back."""

    code = ErrorCode.PERSISTENCE_FAILURE
