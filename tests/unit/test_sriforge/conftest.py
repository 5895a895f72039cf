#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Location: tests/unit/test_sriforge/conftest.py
Copyright: 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor
Shared pytest fixtures for the SRI engine tests."""

# Standard
import base64
import hashlib
from typing import Callable, Dict, Iterator, Optional, Union

# Third-Party
import httpx
import pytest

# First-Party
from sriforge.logging_service import logging_service
from sriforge.models import BundleEntry
from sriforge.settings import SriSettings


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach the engine handler so caplog sees engine records."""
    logging_service.shutdown()
    yield
    logging_service.shutdown()


@pytest.fixture
def sri_digest() -> Callable[[Union[bytes, str]], str]:
    """Reference sha384 integrity calculation."""

    def _digest(content: Union[bytes, str]) -> str:
        if isinstance(content, str):
            content = content.encode("utf-8")
        return "sha384-" + base64.b64encode(hashlib.sha384(content).digest()).decode("ascii")

    return _digest


@pytest.fixture
def settings() -> SriSettings:
    """Engine settings isolated from the environment's .env file."""
    return SriSettings(_env_file=None)


# ===== Bundle Fixtures =====


def _html_asset(path: str, text: str) -> BundleEntry:
    """Build an HTML asset entry."""
    return BundleEntry(kind="asset", file_name=path, source=text)


def _chunk(path: str, code: str) -> BundleEntry:
    """Build a chunk entry."""
    return BundleEntry(kind="chunk", file_name=path, code=code)


@pytest.fixture
def app_js() -> str:
    return "console.log('app');\n"


@pytest.fixture
def style_css() -> bytes:
    return b"body { color: red; }\n"


@pytest.fixture
def bundle(app_js: str, style_css: bytes) -> Dict[str, BundleEntry]:
    """A small build: one page, one chunk, one stylesheet."""
    return {
        "index.html": _html_asset(
            "index.html",
            '<html><head><link rel="stylesheet" href="/assets/style.css"></head>'
            '<body><script type="module" src="/assets/app.js"></script></body></html>',
        ),
        "assets/app.js": _chunk("assets/app.js", app_js),
        "assets/style.css": BundleEntry(kind="asset", file_name="assets/style.css", source=style_css),
    }


# ===== HTTP Fixtures =====


@pytest.fixture
def cdn_responses() -> Dict[str, bytes]:
    """Bodies served by the mock CDN, keyed by url."""
    return {
        "https://cdn.example.com/a.css": b".cdn { display: none; }\n",
        "https://cdn.example.com/lib.js": b"window.lib = {};\n",
    }


@pytest.fixture
def request_log() -> Dict[str, int]:
    """Number of requests the mock CDN received, keyed by url."""
    return {}


@pytest.fixture
def mock_client(cdn_responses: Dict[str, bytes], request_log: Dict[str, int]) -> httpx.AsyncClient:
    """AsyncClient answering from cdn_responses; unknown urls get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        request_log[url] = request_log.get(url, 0) + 1
        body: Optional[bytes] = cdn_responses.get(url)
        if body is None:
            return httpx.Response(404, request=request)
        return httpx.Response(200, content=body, request=request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
