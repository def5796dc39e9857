"""Logging helpers shared across the decoder."""

import logging

LOGGER_NAME = "acblscore_gamefile"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return a logger under the package namespace.

    The package logger carries a NullHandler, so nothing is emitted unless
    the host application configures logging.
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = LOGGER_NAME + "." + name
    return logging.getLogger(name)


def _install_null_handler():
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


PACKAGE_LOGGER = _install_null_handler()


__all__ = ["get_logger", "LOGGER_NAME", "PACKAGE_LOGGER"]
