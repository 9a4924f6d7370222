from __future__ import annotations

import logging

import pytest

from mint.encoding.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
