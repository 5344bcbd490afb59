"""One-line text records for cart items.

A record is ``label,name,price,detail``::

    Electronics,Phone,620,12
    Clothing,Shirt,22,M
    Grocery,Rice,10,5kg

Fields are not escaped. Parsing anchors the label at the front and
price/detail at the back, so a comma inside a name survives; a comma
inside a clothing size does not. A newline inside a name or size splits
the record across two lines, and reading the file back breaks it apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .catalog import ItemKind, UnknownItemKind, kind_for, kind_of, make_item
from .models import CLOTHING_MARKUP, FIELD_SEP, WARRANTY_MONTH_FEE, Item

_WEIGHT_SUFFIX = "kg"


class RecordFormatError(ValueError):
    pass


@dataclass(frozen=True)
class Record:
    kind: ItemKind
    name: str
    price: float
    # warranty months (int), size (str) or weight in kg (float)
    detail: int | str | float

    def to_item(self) -> Item:
        """Rebuild the item, recovering its base price from the stored price.

        Prices are stored as rendered floats, so the recovered base price
        can differ from the original in the last digits.
        """
        if self.kind is ItemKind.ELECTRONICS:
            base = self.price - self.detail * WARRANTY_MONTH_FEE
        elif self.kind is ItemKind.CLOTHING:
            base = self.price / CLOTHING_MARKUP
        else:
            if not self.detail:
                raise RecordFormatError(
                    f"Cannot recover price per kg for zero-weight item {self.name!r}"
                )
            base = self.price / self.detail
        return make_item(self.kind, self.name, base, self.detail)


def encode(item: Item) -> str:
    # Raises TypeError for anything outside the catalog.
    kind_of(item)
    return item.record()


def encode_all(items: Iterable[Item]) -> list[str]:
    return [encode(it) for it in items]


def parse_record(line: str) -> Record:
    text = line[:-1] if line.endswith("\n") else line
    parts = text.split(FIELD_SEP)
    if len(parts) < 4:
        raise RecordFormatError(f"Expected at least 4 fields, got {len(parts)}: {text!r}")

    label, price_text, detail_text = parts[0], parts[-2], parts[-1]
    name = FIELD_SEP.join(parts[1:-2])

    try:
        kind = kind_for(label)
    except UnknownItemKind as e:
        raise RecordFormatError(f"{e} in record {text!r}") from e

    try:
        price = float(price_text)
    except ValueError:
        raise RecordFormatError(f"Bad price {price_text!r} in record {text!r}") from None

    return Record(kind=kind, name=name, price=price, detail=_parse_detail(kind, detail_text, text))


def parse_records(lines: Iterable[str]) -> list[Record]:
    return [parse_record(ln) for ln in lines]


def _parse_detail(kind: ItemKind, detail: str, text: str) -> int | str | float:
    if kind is ItemKind.CLOTHING:
        return detail

    if kind is ItemKind.ELECTRONICS:
        try:
            return int(detail)
        except ValueError:
            raise RecordFormatError(f"Bad warranty {detail!r} in record {text!r}") from None

    if not detail.endswith(_WEIGHT_SUFFIX):
        raise RecordFormatError(f"Weight {detail!r} is missing the kg suffix in record {text!r}")
    try:
        return float(detail[: -len(_WEIGHT_SUFFIX)])
    except ValueError:
        raise RecordFormatError(f"Bad weight {detail!r} in record {text!r}") from None
