"""Product ledger: stock records, sales and ordering."""

from __future__ import annotations

import math
import unicodedata
from typing import Any, Callable, Optional

from inventory_tracker.domain.models import Dataset, Product
from inventory_tracker.services.base import LedgerService
from inventory_tracker.services.errors import (
    DuplicateKeyError,
    InsufficientStockError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from inventory_tracker.services.results import OperationResult


def _char_rank(char: str) -> int:
    if char.isdigit():
        return 1
    if char.isalpha():
        return 2
    return 0


def _name_collation_key(product: Product) -> tuple[tuple, str]:
    # Punctuation < digits < letters; accent- and case-insensitive first,
    # lowercase before uppercase on ties.
    decomposed = unicodedata.normalize("NFKD", product.name.casefold())
    base = tuple(
        (_char_rank(char), char)
        for char in decomposed
        if not unicodedata.combining(char)
    )
    return base, product.name.swapcase()


def _checked_price(price: float) -> float:
    price = float(price)
    if not math.isfinite(price) or price < 0:
        raise ValidationError(f"Price must be a non-negative number, got {price}")
    return price


def _checked_quantity(quantity: int) -> int:
    quantity = int(quantity)
    if quantity < 0:
        raise ValidationError(f"Quantity must not be negative, got {quantity}")
    return quantity


def _require_product(dataset: Dataset, product_id: int) -> Product:
    product = dataset.find_product(product_id)
    if product is None:
        raise NotFoundError(f"Product {product_id} not found")
    return product


class ProductService(LedgerService):
    """Business operations over the product collection.

    Each call is one load-mutate-save cycle against the store.
    """

    def add(
        self, product_id: int, name: str, price: float, quantity: int
    ) -> OperationResult:
        try:
            dataset = self._store.load()
            if dataset.find_product(product_id) is not None:
                raise DuplicateKeyError(f"Product ID {product_id} already exists")
            product = Product(
                id=int(product_id),
                name=name.strip(),
                price=_checked_price(price),
                quantity=_checked_quantity(quantity),
            )
            dataset.products.append(product)
            self._commit(dataset, "Failed to save product")
        except ServiceError as exc:
            return self._fail("add product", exc)
        self._logger.info("Added product id=%s", product.id)
        return OperationResult.ok("Product added", product=product)

    def update(
        self,
        product_id: int,
        name: Optional[str] = None,
        price: Optional[float] = None,
        quantity: Optional[int] = None,
    ) -> OperationResult:
        try:
            dataset = self._store.load()
            product = _require_product(dataset, product_id)
            if price is not None:
                price = _checked_price(price)
            if quantity is not None:
                quantity = _checked_quantity(quantity)
            if name is not None:
                product.name = name.strip()
            if price is not None:
                product.price = price
            if quantity is not None:
                product.quantity = quantity
            self._commit(dataset, "Failed to update product")
        except ServiceError as exc:
            return self._fail("update product", exc)
        self._logger.info("Updated product id=%s", product_id)
        return OperationResult.ok("Product updated", product=product)

    def delete(self, product_id: int) -> OperationResult:
        try:
            dataset = self._store.load()
            product = _require_product(dataset, product_id)
            # Rentals keep their productId; the reference is lookup-only.
            dataset.products.remove(product)
            self._commit(dataset, "Failed to delete product")
        except ServiceError as exc:
            return self._fail("delete product", exc)
        self._logger.info("Deleted product id=%s", product_id)
        return OperationResult.ok("Product deleted")

    def sell(self, product_id: int, qty: int) -> OperationResult:
        try:
            dataset = self._store.load()
            if qty <= 0:
                raise ValidationError("Quantity sold must be greater than zero")
            product = _require_product(dataset, product_id)
            if qty > product.quantity:
                raise InsufficientStockError(
                    "Insufficient quantity", available=product.quantity
                )
            product.quantity -= qty
            self._commit(dataset, "Failed to process sale")
        except ServiceError as exc:
            return self._fail("sell product", exc)
        self._logger.info(
            "Sold %s of product id=%s, %s remaining", qty, product_id, product.quantity
        )
        return OperationResult.ok(quantity_remaining=product.quantity)

    def search(self, product_id: int) -> OperationResult:
        try:
            product = _require_product(self._store.load(), product_id)
        except ServiceError as exc:
            return self._fail("search product", exc)
        return OperationResult.ok(product=product)

    def list_all(self) -> OperationResult:
        return OperationResult.ok(products=self._store.load().products)

    def sort_by_id(self) -> OperationResult:
        return self._sort("ID", lambda product: product.id)

    def sort_by_name(self) -> OperationResult:
        return self._sort("Name", _name_collation_key)

    def sort_by_price(self) -> OperationResult:
        return self._sort("Price", lambda product: product.price)

    def _sort(
        self, label: str, key: Callable[[Product], Any]
    ) -> OperationResult:
        try:
            dataset = self._store.load()
            # list.sort is stable, so equal keys keep their stored order.
            dataset.products.sort(key=key)
            self._commit(dataset, f"Failed to save products sorted by {label}")
        except ServiceError as exc:
            return self._fail(f"sort by {label}", exc)
        return OperationResult.ok(f"Sorted by {label}", products=dataset.products)
