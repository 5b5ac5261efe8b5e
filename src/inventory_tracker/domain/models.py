"""Domain dataclasses and enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RentalStatus(str, Enum):
    ACTIVE = "active"
    RETURNED = "returned"


@dataclass(slots=True)
class Product:
    id: int
    name: str
    price: float
    quantity: int


@dataclass(slots=True)
class Rental:
    rental_id: int
    product_id: int
    product_name: str
    renter_name: str
    rent_date: str
    return_date: str
    phone_number: str
    address: str
    amount_paid: float
    status: RentalStatus = RentalStatus.ACTIVE
    returned_date: Optional[str] = None


@dataclass(slots=True)
class Dataset:
    """Complete persisted state: the product and rental collections."""

    products: list[Product] = field(default_factory=list)
    rentals: list[Rental] = field(default_factory=list)

    def find_product(self, product_id: int) -> Optional[Product]:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def find_rental(self, rental_id: int) -> Optional[Rental]:
        for rental in self.rentals:
            if rental.rental_id == rental_id:
                return rental
        return None
