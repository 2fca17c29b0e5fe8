import logging

import pytest

from traderfmt import logging_setup


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("traderfmt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging_setup._CONFIGURED = False
