# epasal/cart.py
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import CartLine, Product

CENTS = Decimal("0.01")

# Cart lines are keyed by product id, so a product can only ever own one line.
# Positions (the `index` arguments) follow insertion order, which is also the
# order the cart panel displays.


class Cart(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines_by_id: Dict[int, CartLine] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _keys_match_lines(self) -> "Cart":
        for pid, line in self.lines_by_id.items():
            if pid != line.id:
                raise ValueError(f"cart key {pid} does not match line product id {line.id}")
        return self

    @property
    def lines(self) -> List[CartLine]:
        return list(self.lines_by_id.values())

    def _key_at(self, index: int) -> int:
        if index < 0 or index >= len(self.lines_by_id):
            raise IndexError(f"cart position {index} out of range (cart has {len(self.lines_by_id)} lines)")
        return list(self.lines_by_id)[index]

    def _replace(self, pid: int, line: CartLine) -> "Cart":
        lines = dict(self.lines_by_id)
        lines[pid] = line
        return Cart(lines_by_id=lines)

    # ---------------------------
    # Operations
    # ---------------------------
    def add_to_cart(self, product: Product) -> "Cart":
        existing = self.lines_by_id.get(product.id)
        if existing is not None:
            return self._replace(product.id, existing.model_copy(update={"quantity": existing.quantity + 1}))
        return self._replace(product.id, CartLine.from_product(product))

    def increase_quantity(self, index: int) -> "Cart":
        pid = self._key_at(index)
        line = self.lines_by_id[pid]
        return self._replace(pid, line.model_copy(update={"quantity": line.quantity + 1}))

    def decrease_quantity(self, index: int) -> "Cart":
        pid = self._key_at(index)
        line = self.lines_by_id[pid]
        if line.quantity <= 1:
            return self
        return self._replace(pid, line.model_copy(update={"quantity": line.quantity - 1}))

    def remove_item(self, index: int) -> "Cart":
        pid = self._key_at(index)
        return Cart(lines_by_id={k: v for k, v in self.lines_by_id.items() if k != pid})

    # ---------------------------
    # Totals
    # ---------------------------
    def total_price(self) -> Decimal:
        total = sum((line.line_total for line in self.lines_by_id.values()), Decimal("0"))
        return total.quantize(CENTS, rounding=ROUND_HALF_UP)

    def total_item_count(self) -> int:
        return sum(line.quantity for line in self.lines_by_id.values())
