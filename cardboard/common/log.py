"""
Logging setup shared by the boards and front-ends.

Every module logs through a named logger under ``cardboard``. Nothing is
printed unless a front-end (or a board built with ``debug=True``) calls
:func:`configure_logging`.
"""

import logging
import os

ROOT_LOGGER = "cardboard"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Attach a console handler to the ``cardboard`` logger and set its level.

    Setting ``CARDBOARD_DISABLE_LOGGING`` to 1/true/yes forces ERROR, which
    keeps long simulations quiet even when ``debug`` is requested.

    :param debug: Log at DEBUG instead of WARNING.
    :return: The configured ``cardboard`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if os.environ.get("CARDBOARD_DISABLE_LOGGING", "").lower() in (
        "1",
        "true",
        "yes",
    ):
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
