"""
Logging for the reference driver and the playground.

Library modules only call ``logging.getLogger(__name__)``; nothing is printed
until an entry point calls ``setup_logging``. At DEBUG every forward pass
traces its layers (weights and incoming activations).
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "feedforward_net"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package's records to stdout, and to ``log_file`` when given.

    ``level`` is a number or a name such as ``"DEBUG"``. Calling it again
    replaces the handlers, Streamlit re-executes the app script on every
    interaction.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown logging level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
