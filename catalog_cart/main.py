from __future__ import annotations

import argparse
from typing import Callable

from .cart import Cart
from .catalog import KINDS, ItemKind, make_item
from .codec import RecordFormatError
from .config import Config
from .log import setup_logger
from .storage import load_cart, write_records

__version__ = "0.1.0"

InputFn = Callable[[str], str]

MENU_KINDS: dict[str, ItemKind] = {
    "1": ItemKind.ELECTRONICS,
    "2": ItemKind.CLOTHING,
    "3": ItemKind.GROCERY,
}

MENU = """
1. Add electronics
2. Add clothing
3. Add grocery
4. View cart
5. Save cart
6. Exit"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="catalog-cart")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    sub = p.add_subparsers(dest="cmd", required=False)

    p_session = sub.add_parser("session", help="Interactive cart session")
    p_session.add_argument("--out", default=None, help="Record file written by 'Save cart'")

    p_show = sub.add_parser("show", help="Print the report for a saved cart")
    p_show.add_argument("file", nargs="?", default=None, help="Record file (defaults to the configured cart file)")

    sub.add_parser("kinds", help="List item kinds and their fields")

    return p


def main(argv: list[str] | None = None, *, input_fn: InputFn = input) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.cmd is None:
        p.print_help()
        return 0

    cfg = Config.load_from_env()
    setup_logger(cfg.log_level, cfg.log_dir)

    if args.cmd == "kinds":
        for kind, info in KINDS.items():
            print(f"{kind.label}: name, {info.price_prompt.lower()}, {info.detail_prompt.lower()}")
        return 0

    if args.cmd == "show":
        path = args.file or cfg.cart_file
        try:
            cart = load_cart(path)
        except (OSError, RecordFormatError) as exc:
            print(f"ERROR: {exc}")
            return 1
        for line in cart.report():
            print(line)
        return 0

    if args.cmd == "session":
        return run_session(args.out or cfg.cart_file, input_fn=input_fn)

    raise RuntimeError("unreachable")


def run_session(out_path: str, *, input_fn: InputFn = input) -> int:
    cart = Cart()

    while True:
        print(MENU)
        try:
            choice = input_fn("Choose an option: ").strip()
        except EOFError:
            return 0

        if choice in MENU_KINDS:
            try:
                item = _read_item(MENU_KINDS[choice], input_fn)
            except EOFError:
                return 0
            cart.append(item)
            print(f"Added: {item.display_line()}")
        elif choice == "4":
            for line in cart.report():
                print(line)
        elif choice == "5":
            try:
                out = write_records(out_path, cart.persist())
            except OSError as exc:
                print(f"ERROR: could not save cart: {exc}")
                continue
            print(f"OK: saved {len(cart)} items to {out}")
        elif choice == "6":
            return 0
        else:
            print("Invalid option, try again.")


def _read_item(kind: ItemKind, input_fn: InputFn):
    info = kind.info
    name = input_fn("Name: ").strip()
    price = _ask_number(input_fn, info.price_prompt, float)
    if info.detail_type is str:
        detail = input_fn(f"{info.detail_prompt}: ").strip()
    else:
        detail = _ask_number(input_fn, info.detail_prompt, info.detail_type)
    return make_item(kind, name, price, detail)


def _ask_number(input_fn: InputFn, prompt: str, conv: type):
    while True:
        raw = input_fn(f"{prompt}: ").strip()
        try:
            val = conv(raw)
        except ValueError:
            print(f"Not a valid number: {raw!r}")
            continue
        if val < 0:
            print("Value must not be negative.")
            continue
        return val


if __name__ == "__main__":
    raise SystemExit(main())
