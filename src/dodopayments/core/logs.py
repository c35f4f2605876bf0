"""Library logging setup.

Modules log through `logging.getLogger(__name__)`; nothing is printed unless
`setup_logging` runs (the client calls it when `DODO_PAYMENTS_LOG` is set).
"""

from __future__ import annotations

import logging

LOGGER_NAME = "dodopayments"
_HANDLER_NAME = "dodopayments"


def setup_logging(level: str | None) -> logging.Logger | None:
    """Attach one stream handler to the package logger at `level`.

    Calling it again only updates the level.
    """

    if not level:
        return None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s")
        )
        logger.addHandler(handler)
    return logger
