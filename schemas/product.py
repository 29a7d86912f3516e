"""Product create/update payloads."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, StrictBool, field_validator, model_validator

PRICE_CONSTRAINTS = {"ge": 0, "max_digits": 10, "decimal_places": 2}


class _ProductFields(BaseModel):
    """Normalization shared by the create and update payloads."""

    @field_validator("title", mode="before", check_fields=False)
    @classmethod
    def _strip_title(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("price", mode="before", check_fields=False)
    @classmethod
    def _price_is_a_number(cls, value):
        # Lax Decimal parsing would accept "12.50" and True.
        if isinstance(value, (str, bool)):
            raise ValueError("price must be a number")
        return value


class ProductCreate(_ProductFields):
    title: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., **PRICE_CONSTRAINTS)
    in_stock: StrictBool
    description: Optional[str] = None


class ProductUpdate(_ProductFields):
    """Partial update. Omitted fields are left untouched, ``description: null`` clears it."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(None, **PRICE_CONSTRAINTS)
    in_stock: Optional[StrictBool] = None
    description: Optional[str] = None

    @field_validator("title", "price", "in_stock")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

    @model_validator(mode="after")
    def _require_a_field(self):
        if not self.model_fields_set:
            raise ValueError(
                "At least one of title, price, in_stock or description is required"
            )
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
