"""
Request schemas

Pydantic models that turn raw request payloads into typed, validated records
before they reach the ledger services. Field aliases follow the JSON names
used by the browser frontend (camelCase), while Python code uses snake_case.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from dateutil import parser
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from inventory_tracker.services.errors import ValidationError


class RequestModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, str_strip_whitespace=True, allow_inf_nan=False
    )


RequestT = TypeVar("RequestT", bound=RequestModel)


class ProductCreate(RequestModel):
    id: int = Field(..., gt=0, description="Unique product id")
    name: str = Field(..., min_length=1, description="Display name")
    price: float = Field(..., ge=0, description="Unit price")
    quantity: int = Field(..., ge=0, description="Units in stock")


class ProductUpdate(RequestModel):
    """Partial update; omitted fields keep their stored value."""

    id: int = Field(..., gt=0)
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)


class ProductRef(RequestModel):
    id: int = Field(..., gt=0)


class ProductSale(RequestModel):
    product_id: int = Field(..., alias="productId", gt=0)
    quantity_sold: int = Field(..., alias="quantitySold", gt=0)


class RentalCreate(RequestModel):
    product_id: int = Field(..., alias="productId", gt=0)
    renter_name: str = Field(..., alias="renterName", min_length=1)
    return_date: str = Field(..., alias="returnDate", description="Expected return date")
    phone_number: str = Field(..., alias="phoneNumber", min_length=1)
    address: str = Field(..., min_length=1)
    amount_paid: float = Field(..., alias="amountPaid", ge=0)

    @field_validator("return_date")
    @classmethod
    def _normalize_return_date(cls, value: str) -> str:
        try:
            return parser.isoparse(value).date().isoformat()
        except (ValueError, OverflowError) as exc:
            raise ValueError("must be an ISO date (YYYY-MM-DD)") from exc


class RentalRef(RequestModel):
    rental_id: int = Field(..., alias="rentalId", gt=0)


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def parse_request(model: type[RequestT], payload: Any) -> RequestT:
    """Validate a raw payload into ``model`` or raise ``ValidationError``."""
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc)) from exc
