from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import Item

EMPTY_CART_LINE = "Cart is empty."


@dataclass(frozen=True)
class CartReport:
    entries: tuple[str, ...]
    total: float

    @property
    def empty(self) -> bool:
        return not self.entries

    def lines(self) -> list[str]:
        if self.empty:
            return [EMPTY_CART_LINE]
        return [*self.entries, f"Total: ${self.total:.2f}"]

    def summary_text(self) -> str:
        return "\n".join(self.lines())


def build_report(items: Iterable[Item]) -> CartReport:
    items = list(items)
    return CartReport(
        entries=tuple(it.display_line() for it in items),
        total=sum((it.price() for it in items), 0.0),
    )
