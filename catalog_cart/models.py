from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

# Fixed pricing policies.
WARRANTY_MONTH_FEE = 10
CLOTHING_MARKUP = 1.10

FIELD_SEP = ","


def format_number(value: float) -> str:
    """Render a number the way records carry it: '620', '22', '1358.016'."""
    return f"{value:.15g}"


@dataclass(frozen=True)
class ElectronicItem:
    label: ClassVar[str] = "Electronics"

    name: str
    base_price: float
    warranty_months: int

    def price(self) -> float:
        return self.base_price + self.warranty_months * WARRANTY_MONTH_FEE

    def detail_text(self) -> str:
        return f"warranty: {self.warranty_months} months"

    def record_detail(self) -> str:
        return str(self.warranty_months)

    def display_line(self) -> str:
        return _display_line(self)

    def record(self) -> str:
        return _record(self)


@dataclass(frozen=True)
class ClothingItem:
    label: ClassVar[str] = "Clothing"

    name: str
    base_price: float
    # Free-form ("S", "M", "XL", "42"...), never validated.
    size: str

    def price(self) -> float:
        return self.base_price * CLOTHING_MARKUP

    def detail_text(self) -> str:
        return f"size: {self.size}"

    def record_detail(self) -> str:
        return self.size

    def display_line(self) -> str:
        return _display_line(self)

    def record(self) -> str:
        return _record(self)


@dataclass(frozen=True)
class GroceryItem:
    label: ClassVar[str] = "Grocery"

    name: str
    base_price: float  # per kg
    weight_kg: float

    def price(self) -> float:
        return self.base_price * self.weight_kg

    def detail_text(self) -> str:
        return f"weight: {self.weight_kg:.2f} kg"

    def record_detail(self) -> str:
        return format_number(self.weight_kg) + "kg"

    def display_line(self) -> str:
        return _display_line(self)

    def record(self) -> str:
        return _record(self)


Item = Union[ElectronicItem, ClothingItem, GroceryItem]


def _display_line(item: Item) -> str:
    return f"[{item.label}] {item.name} - ${item.price():.2f} ({item.detail_text()})"


def _record(item: Item) -> str:
    # Name and size go out unescaped; a comma inside either one shifts the fields.
    return FIELD_SEP.join(
        (item.label, item.name, format_number(item.price()), item.record_detail())
    )
