# -*- coding: utf-8 -*-
"""Logging Service Implementation.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

This module configures the ``sriforge`` logger hierarchy. Records go to a
stream handler using either a plain text formatter or a JSON formatter, as
selected by the engine settings. The root logger is left untouched so the
host build tool keeps control of its own output.
"""

# Standard
import logging
from typing import Optional

# Third-Party
from pythonjsonlogger import jsonlogger

# First-Party
from sriforge.settings import get_settings, SriSettings

ROOT_LOGGER_NAME = "sriforge"

# Create a text formatter
text_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Create a JSON formatter
json_formatter = jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")


class LoggingService:
    """Attach a single handler to the engine's logger hierarchy.

    Examples:
        >>> service = LoggingService()
        >>> service.configured
        False
    """

    def __init__(self) -> None:
        """Initialize the logging service."""
        self._handler: Optional[logging.StreamHandler] = None

    @property
    def configured(self) -> bool:
        """Whether a handler is currently attached.

        Returns:
            True after configure() and before shutdown().
        """
        return self._handler is not None

    def configure(self, settings: Optional[SriSettings] = None) -> logging.Logger:
        """Configure the ``sriforge`` logger. Calling it again replaces the handler.

        Args:
            settings: Settings to use, defaults to the cached process settings.

        Returns:
            logging.Logger: The configured engine logger.
        """
        settings = settings or get_settings()
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        if self._handler is not None:
            logger.removeHandler(self._handler)

        handler = logging.StreamHandler()
        handler.setFormatter(json_formatter if settings.log_format == "json" else text_formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())
        logger.propagate = False
        self._handler = handler
        return logger

    def shutdown(self) -> None:
        """Detach the handler installed by configure()."""
        if self._handler is None:
            return
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.removeHandler(self._handler)
        logger.propagate = True
        self._handler.close()
        self._handler = None


logging_service = LoggingService()
