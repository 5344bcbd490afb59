import logging

import pytest

from catalog_cart.config import Config
from catalog_cart.log import LOGGER_NAME, setup_logger


def test_defaults():
    cfg = Config.load_from_env({})
    assert cfg.cart_file == "cart.txt"
    assert cfg.log_level == logging.WARNING
    assert cfg.log_dir is None


def test_values_from_env():
    cfg = Config.load_from_env({
        "CATALOG_CART_FILE": "out/my_cart.txt",
        "CATALOG_CART_LOG_LEVEL": "debug",
        "CATALOG_CART_LOG_DIR": "logs",
    })
    assert cfg.cart_file == "out/my_cart.txt"
    assert cfg.log_level == logging.DEBUG
    assert cfg.log_dir == "logs"


def test_bad_log_level():
    with pytest.raises(RuntimeError):
        Config.load_from_env({"CATALOG_CART_LOG_LEVEL": "chatty"})


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = saved
    logger.setLevel(logging.NOTSET)


def test_setup_logger_writes_log_file(tmp_path, clean_logger):
    logger = setup_logger(logging.INFO, str(tmp_path / "logs"))
    assert logger is clean_logger
    assert len(logger.handlers) == 2

    logger.info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in (tmp_path / "logs" / "catalog_cart.log").read_text(encoding="utf-8")


def test_setup_logger_does_not_duplicate_handlers(clean_logger):
    setup_logger(logging.INFO)
    setup_logger(logging.DEBUG)
    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.DEBUG
