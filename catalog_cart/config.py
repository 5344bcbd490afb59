from __future__ import annotations

import logging
import os
from dataclasses import dataclass

ENV_CART_FILE = "CATALOG_CART_FILE"
ENV_LOG_LEVEL = "CATALOG_CART_LOG_LEVEL"
ENV_LOG_DIR = "CATALOG_CART_LOG_DIR"

DEFAULT_CART_FILE = "cart.txt"


@dataclass(frozen=True)
class Config:
    cart_file: str = DEFAULT_CART_FILE
    log_level: int = logging.WARNING
    log_dir: str | None = None

    @staticmethod
    def load_from_env(environ: dict[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ

        level_name = env.get(ENV_LOG_LEVEL, "WARNING").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise RuntimeError(f"{ENV_LOG_LEVEL} is not a log level: {level_name!r}")

        return Config(
            cart_file=env.get(ENV_CART_FILE) or DEFAULT_CART_FILE,
            log_level=level,
            log_dir=env.get(ENV_LOG_DIR) or None,
        )
