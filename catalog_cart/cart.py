from __future__ import annotations

import logging
from typing import Iterator

from .codec import encode_all
from .models import Item
from .report import build_report

logger = logging.getLogger(__name__)


class Cart:
    """Ordered collection of items, in the order they were appended.

    Items are never merged, removed or reordered. The total is computed
    from the items on every call.
    """

    def __init__(self) -> None:
        self._items: list[Item] = []

    def append(self, item: Item) -> None:
        self._items.append(item)
        logger.debug("Added %s %r (%d in cart)", item.label, item.name, len(self._items))

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def total(self) -> float:
        return sum((it.price() for it in self._items), 0.0)

    def report(self) -> list[str]:
        return build_report(self._items).lines()

    def persist(self) -> list[str]:
        """Record lines for every item, ready to be written one per line."""
        return encode_all(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"Cart(items={len(self._items)}, total={self.total():.2f})"
