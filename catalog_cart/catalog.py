from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import ClothingItem, ElectronicItem, GroceryItem, Item


class UnknownItemKind(ValueError):
    pass


class ItemKind(Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    GROCERY = "Grocery"

    @property
    def info(self) -> KindInfo:
        return KINDS[self]

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class KindInfo:
    """Display metadata for one item kind."""

    item_class: type
    detail_prompt: str
    detail_type: type
    price_prompt: str = "Base price"


KINDS: dict[ItemKind, KindInfo] = {
    ItemKind.ELECTRONICS: KindInfo(
        item_class=ElectronicItem,
        detail_prompt="Warranty (months)",
        detail_type=int,
    ),
    ItemKind.CLOTHING: KindInfo(
        item_class=ClothingItem,
        detail_prompt="Size",
        detail_type=str,
    ),
    ItemKind.GROCERY: KindInfo(
        item_class=GroceryItem,
        detail_prompt="Weight (kg)",
        detail_type=float,
        price_prompt="Price per kg",
    ),
}


def kind_for(label: str) -> ItemKind:
    try:
        return ItemKind(label)
    except ValueError:
        raise UnknownItemKind(f"Unknown item kind: {label!r}") from None


def kind_of(item: Item) -> ItemKind:
    for kind, info in KINDS.items():
        if type(item) is info.item_class:
            return kind
    raise TypeError(f"Not a catalog item: {type(item).__name__}")


def make_item(kind: ItemKind, name: str, base_price: float, detail) -> Item:
    """Build the item for `kind`. Values are taken as given, no validation."""
    if kind is ItemKind.ELECTRONICS:
        return ElectronicItem(name=name, base_price=base_price, warranty_months=detail)
    if kind is ItemKind.CLOTHING:
        return ClothingItem(name=name, base_price=base_price, size=detail)
    if kind is ItemKind.GROCERY:
        return GroceryItem(name=name, base_price=base_price, weight_kg=detail)
    raise UnknownItemKind(f"Unknown item kind: {kind!r}")
