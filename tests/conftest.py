import logging

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    yield

    # Drop handlers a test installed through setup_logging()
    logger = logging.getLogger("feedforward_net")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def rng():
    """Seeded generator so random weights are the same on every run."""
    return np.random.default_rng(1234)
