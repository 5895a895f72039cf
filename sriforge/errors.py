# -*- coding: utf-8 -*-
"""Location: ./sriforge/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

Shared exception types for the SRI rewriting engine.
"""

# Future
from __future__ import annotations

# Standard
from typing import Optional


class SriError(Exception):
    """Base exception for the SRI rewriting engine."""


class ConfigurationError(SriError):
    """Invalid plugin options, or the host lacks the extension point the engine hooks into."""


class MissingAssetError(SriError):
    """A non-network reference has no matching entry in the build output.

    Attributes:
        url: The reference as written in the HTML document.
        document: Output path of the HTML document holding the reference.
        key: The bundle key the reference was resolved to.

    Examples:
        >>> err = MissingAssetError("/assets/app.js", document="index.html", key="assets/app.js")
        >>> str(err)
        'Asset /assets/app.js not found in bundle (document: index.html, key: assets/app.js)'
        >>> isinstance(err, SriError)
        True
    """

    def __init__(self, url: str, document: Optional[str] = None, key: Optional[str] = None) -> None:
        """Initialize a missing asset error.

        Args:
            url: The unresolved reference.
            document: The referencing document path, if known.
            key: The computed bundle key, if known.
        """
        self.url = url
        self.document = document
        self.key = key
        message = f"Asset {url} not found in bundle"
        if document is not None:
            message += f" (document: {document}, key: {key})"
        super().__init__(message)


class NetworkFetchError(SriError):
    """A network-absolute reference could not be retrieved.

    Attributes:
        url: The reference that failed.
        status_code: HTTP status of the response, when one was received.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        """Initialize a network fetch error.

        Args:
            url: The reference that failed.
            reason: Human readable failure reason.
            status_code: Optional HTTP status code.
        """
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")
