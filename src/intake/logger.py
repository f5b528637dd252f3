# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

from intake.configuration import APP_NAME


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a stderr RichHandler to the package logger.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
