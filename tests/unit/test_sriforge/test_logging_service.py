#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Location: tests/unit/test_sriforge/test_logging_service.py
Copyright: 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti
"""

# Standard
import json
import logging

# Third-Party
import pytest

# First-Party
from sriforge.logging_service import json_formatter, LoggingService, ROOT_LOGGER_NAME, text_formatter
from sriforge.settings import SriSettings


@pytest.fixture
def service():
    svc = LoggingService()
    yield svc
    svc.shutdown()


def test_configure_attaches_one_handler(service: LoggingService) -> None:
    settings = SriSettings(_env_file=None, log_level="debug")

    logger = service.configure(settings)
    service.configure(settings)

    ours = [h for h in logger.handlers if h.formatter in (text_formatter, json_formatter)]
    assert service.configured is True
    assert logger.name == ROOT_LOGGER_NAME
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_configure_selects_json_formatter(service: LoggingService) -> None:
    logger = service.configure(SriSettings(_env_file=None, log_format="json"))

    handler = [h for h in logger.handlers if h.formatter is json_formatter]
    assert len(handler) == 1


def test_json_formatter_emits_json() -> None:
    record = logging.LogRecord("sriforge.test", logging.INFO, __file__, 1, "patched %d", (3,), None)

    payload = json.loads(json_formatter.format(record))

    assert payload["message"] == "patched 3"
    assert payload["levelname"] == "INFO"
    assert payload["name"] == "sriforge.test"


def test_shutdown_restores_propagation(service: LoggingService) -> None:
    service.configure(SriSettings(_env_file=None))

    service.shutdown()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert service.configured is False
    assert logger.propagate is True
    assert all(h.formatter not in (text_formatter, json_formatter) for h in logger.handlers)
