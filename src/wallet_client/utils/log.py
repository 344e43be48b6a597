"""Logging setup for the wallet client.

Modules log through ``logging.getLogger(__name__)``; this module only
installs the handler.  Rich is preferred for rendering but optional,
mirroring :mod:`wallet_client.cli.console`.
"""

from __future__ import annotations

import logging

_ROOT_LOGGER = "wallet_client"


def _build_handler() -> logging.Handler:
    """Return a ``RichHandler`` on stderr, or a plain ``StreamHandler``."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(name)s: %(levelname)s: %(message)s"),
        )
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a single handler to the package logger and set *level*.

    Calling this more than once replaces the handler instead of stacking
    duplicates, so repeated ``main()`` calls in one process stay quiet.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(level)
    logger.propagate = False
    return logger
