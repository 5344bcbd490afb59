from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .cart import Cart
from .codec import parse_records

logger = logging.getLogger(__name__)


def write_records(path: str | Path, lines: Iterable[str]) -> Path:
    """Overwrite `path` with one record per line.

    Not atomic: a failure mid-write leaves a partial file behind.
    """
    out = Path(path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="utf-8", newline="\n") as f:
            count = 0
            for line in lines:
                f.write(line + "\n")
                count += 1
    except OSError as e:
        logger.error("Failed to write cart records to %s: %s", out, e)
        raise
    logger.info("Wrote %d records to %s", count, out)
    return out


def save_cart(cart: Cart, path: str | Path) -> Path:
    return write_records(path, cart.persist())


def read_records(path: str | Path) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [ln.rstrip("\n") for ln in f if ln.strip()]


def load_cart(path: str | Path) -> Cart:
    cart = Cart()
    for rec in parse_records(read_records(path)):
        cart.append(rec.to_item())
    return cart
