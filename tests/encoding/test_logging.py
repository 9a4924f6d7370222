from __future__ import annotations

import logging
from pathlib import Path

from mint.encoding.utils.logging import LOGGER_NAME, configure_logger, get_logger


def test_get_logger_returns_package_logger() -> None:
    assert get_logger().name == LOGGER_NAME


def test_configure_logger_replaces_handlers(tmp_path: Path) -> None:
    configure_logger(tmp_path / "first.log", console=True)
    logger = configure_logger(tmp_path / "second.log", console=False)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.FileHandler)
    assert logger.propagate is False


def test_configure_logger_without_outputs_is_silent() -> None:
    logger = configure_logger(console=False)

    assert [type(handler) for handler in logger.handlers] == [logging.NullHandler]


def test_file_handler_uses_package_format(tmp_path: Path) -> None:
    log_path = tmp_path / "mint.log"
    logger = configure_logger(log_path, console=False, level=logging.DEBUG)

    logger.info("hello %s", "world")

    assert "[INFO] hello world" in log_path.read_text(encoding="utf-8")
