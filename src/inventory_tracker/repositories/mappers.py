"""JSON record mappers for domain models."""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping

from inventory_tracker.domain.models import Product, Rental, RentalStatus


def _record_value(record: Mapping[str, Any], key: str) -> Any:
    return record[key] if key in record else None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _finite(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite number: {value!r}")
    return number


def product_from_record(record: Mapping[str, Any]) -> Product:
    quantity = int(record["quantity"])
    if quantity < 0:
        raise ValueError(f"negative quantity: {quantity}")
    return Product(
        id=int(record["id"]),
        name=str(record["name"]).strip(),
        price=_finite(record["price"]),
        quantity=quantity,
    )


def product_to_record(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "quantity": product.quantity,
    }


def rental_from_record(record: Mapping[str, Any]) -> Rental:
    raw_status = _record_value(record, "status") or RentalStatus.ACTIVE.value
    try:
        status = RentalStatus(raw_status)
    except ValueError:
        status = RentalStatus.ACTIVE
    returned_date = _record_value(record, "returnedDate")
    return Rental(
        rental_id=int(record["rentalId"]),
        product_id=int(record["productId"]),
        product_name=_text(_record_value(record, "productName")),
        renter_name=_text(_record_value(record, "renterName")),
        rent_date=_text(_record_value(record, "rentDate")),
        return_date=_text(_record_value(record, "returnDate")),
        phone_number=_text(_record_value(record, "phoneNumber")),
        address=_text(_record_value(record, "address")),
        amount_paid=_finite(_record_value(record, "amountPaid") or 0),
        status=status,
        returned_date=str(returned_date) if returned_date else None,
    )


def rental_to_record(rental: Rental) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "rentalId": rental.rental_id,
        "productId": rental.product_id,
        "productName": rental.product_name,
        "renterName": rental.renter_name,
        "rentDate": rental.rent_date,
        "returnDate": rental.return_date,
        "phoneNumber": rental.phone_number,
        "address": rental.address,
        "amountPaid": rental.amount_paid,
        "status": rental.status.value,
    }
    if rental.returned_date:
        record["returnedDate"] = rental.returned_date
    return record
