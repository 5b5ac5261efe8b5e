"""Transport-agnostic request handlers.

Each handler takes the decoded request body (or a path id), validates it into
a request record and calls the matching ledger operation. Any transport can
sit in front of these; mapping error codes to status codes is left to it.
Handlers always return an ``OperationResult``: validation errors and any
unexpected fault from the layers below come back as failure results.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

from inventory_tracker.logging_config import get_logger
from inventory_tracker.schemas import (
    ProductCreate,
    ProductRef,
    ProductSale,
    ProductUpdate,
    RentalCreate,
    RentalRef,
    parse_request,
)
from inventory_tracker.services.errors import ErrorCode, ServiceError, ValidationError
from inventory_tracker.services.product_service import ProductService
from inventory_tracker.services.rental_service import RentalService
from inventory_tracker.services.results import OperationResult

logger = get_logger(__name__)


def _as_result(
    handler: Callable[..., OperationResult],
) -> Callable[..., OperationResult]:
    @functools.wraps(handler)
    def wrapper(*args: Any, **kwargs: Any) -> OperationResult:
        try:
            return handler(*args, **kwargs)
        except ServiceError as exc:
            return OperationResult.from_error(exc)
        except Exception:
            logger.exception("Unhandled error in %s", handler.__name__)
            return OperationResult(
                success=False,
                error="Internal error",
                error_code=ErrorCode.INTERNAL_ERROR,
            )

    return wrapper


class RequestHandlers:
    def __init__(self, products: ProductService, rentals: RentalService) -> None:
        self._products = products
        self._rentals = rentals

    @_as_result
    def list_products(self) -> OperationResult:
        return self._products.list_all()

    @_as_result
    def add_product(self, payload: Any) -> OperationResult:
        request = parse_request(ProductCreate, payload)
        return self._products.add(
            request.id, request.name, request.price, request.quantity
        )

    @_as_result
    def update_product(self, payload: Any) -> OperationResult:
        request = parse_request(ProductUpdate, payload)
        return self._products.update(
            request.id,
            name=request.name,
            price=request.price,
            quantity=request.quantity,
        )

    @_as_result
    def delete_product(self, payload: Any) -> OperationResult:
        request = parse_request(ProductRef, payload)
        return self._products.delete(request.id)

    @_as_result
    def sell_product(self, payload: Any) -> OperationResult:
        request = parse_request(ProductSale, payload)
        return self._products.sell(request.product_id, request.quantity_sold)

    @_as_result
    def search_product(self, product_id: Any) -> OperationResult:
        request = parse_request(ProductRef, {"id": product_id})
        return self._products.search(request.id)

    @_as_result
    def sort_products(self, field: str) -> OperationResult:
        sorters = {
            "id": self._products.sort_by_id,
            "name": self._products.sort_by_name,
            "price": self._products.sort_by_price,
        }
        sorter = sorters.get(field)
        if sorter is None:
            raise ValidationError(f"Unknown sort field: {field}")
        return sorter()

    @_as_result
    def record_rental(self, payload: Any) -> OperationResult:
        request = parse_request(RentalCreate, payload)
        return self._rentals.create(
            request.product_id,
            request.renter_name,
            request.return_date,
            request.phone_number,
            request.address,
            request.amount_paid,
        )

    @_as_result
    def return_rental(self, payload: Any) -> OperationResult:
        request = parse_request(RentalRef, payload)
        return self._rentals.mark_returned(request.rental_id)

    @_as_result
    def list_rentals(self) -> OperationResult:
        return self._rentals.list_all()
