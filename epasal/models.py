# epasal/models.py
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: str
    category: str
    price: Decimal = Field(ge=0)
    thumbnail: str

    @field_validator("price", mode="before")
    @classmethod
    def _price_from_text(cls, value: Any) -> Any:
        # 9.99 must stay 9.99, not the binary float expansion
        if isinstance(value, float):
            return str(value)
        return value


class CartLine(Product):
    quantity: int = Field(default=1, ge=1)

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartLine":
        return cls(**product.model_dump(), quantity=quantity)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity
