from __future__ import annotations

import logging
from typing import Iterator

import pytest

from tessera.console.console import get_console


@pytest.fixture(autouse=True)
def _reset_tessera_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("tessera")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    if hasattr(logger, "_initialized"):
        del logger._initialized
    get_console.cache_clear()
