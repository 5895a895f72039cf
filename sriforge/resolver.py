# -*- coding: utf-8 -*-
"""Location: ./sriforge/resolver.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Keval Mahajan

Asset resolver.
Maps a reference url found in an HTML document to the bytes the browser will
receive: either an entry of the in-memory build output or the body of a
network fetch.
"""

# Standard
import asyncio
import logging
import posixpath
from typing import Dict, Mapping, Optional
from urllib.parse import urlsplit

# Third-Party
import httpx

# First-Party
from sriforge.constants import NETWORK_SCHEMES
from sriforge.errors import MissingAssetError, NetworkFetchError
from sriforge.models import BundleEntry

logger = logging.getLogger(__name__)

# Public base paths that mean "resolve relative to the document".
RELATIVE_BASES = ("", "./", "/")


def is_network_url(url: str) -> bool:
    """Check whether a reference points at an absolute network location.

    Args:
        url: The reference as written in HTML.

    Returns:
        True for http:// and https:// urls.

    Examples:
        >>> is_network_url("https://cdn.example.com/a.css")
        True
        >>> is_network_url("HTTP://cdn.example.com/a.css")
        True
        >>> is_network_url("/assets/app.js")
        False
    """
    return url.lower().startswith(NETWORK_SCHEMES)


def bundle_key(document_path: str, url: str, base: str = "/") -> str:
    """Compute the bundle key a local reference points to.

    With an empty or root base the url is resolved against the directory of
    the referencing document. Any other base is stripped from the front of
    the url; urls outside the base fall back to document-relative resolution.
    A protocol-relative url keeps its host in the key, so it never matches a
    local entry.

    Args:
        document_path: Output-relative path of the HTML document.
        url: The reference as written in HTML.
        base: The build's public base path.

    Returns:
        The output-relative path to look up.

    Examples:
        >>> bundle_key("index.html", "/assets/app.js")
        'assets/app.js'
        >>> bundle_key("nested/page/index.html", "../../assets/app.js", "./")
        'assets/app.js'
        >>> bundle_key("nested/index.html", "./app.js?v=1", "")
        'nested/app.js'
        >>> bundle_key("index.html", "/static/assets/app.js", "/static/")
        'assets/app.js'
        >>> bundle_key("index.html", "//cdn.example.com/assets/app.js?v=2")
        'cdn.example.com/assets/app.js'
    """
    parts = urlsplit(url)
    if parts.netloc:
        return posixpath.normpath(parts.netloc + parts.path)
    path = parts.path
    if base not in RELATIVE_BASES and path.startswith(base):
        return path[len(base) :]
    if path.startswith("/"):
        return posixpath.normpath(path.lstrip("/"))
    return posixpath.normpath(posixpath.join(posixpath.dirname(document_path), path))


class AssetResolver:
    """Resolve references for one build.

    Network bodies are fetched once per url; concurrent requests for the same
    url share a single fetch.
    """

    def __init__(
        self,
        bundle: Mapping[str, BundleEntry],
        client: httpx.AsyncClient,
        base: str = "/",
        ignore_missing_asset: bool = False,
    ) -> None:
        """Initialize the resolver.

        Args:
            bundle: The build output, keyed by output-relative path.
            client: HTTP client used for network references.
            base: The build's public base path.
            ignore_missing_asset: Return None instead of raising for missing entries.
        """
        self._bundle = bundle
        self._client = client
        self._base = base
        self._ignore_missing_asset = ignore_missing_asset
        self._fetches: Dict[str, "asyncio.Task[bytes]"] = {}

    async def resolve(self, document_path: str, url: str) -> Optional[bytes]:
        """Return the content a reference points to.

        Args:
            document_path: Output-relative path of the referencing document.
            url: The reference as written in HTML.

        Returns:
            The content bytes, or None for a missing asset when missing assets are ignored.

        Raises:
            MissingAssetError: If a local reference is not in the bundle.
            NetworkFetchError: If a network reference cannot be retrieved.
        """
        if is_network_url(url):
            return await self._fetch_once(url)

        key = bundle_key(document_path, url, self._base)
        entry = self._bundle.get(key)
        if entry is None:
            if self._ignore_missing_asset:
                logger.debug(f"Skipping {url} in {document_path}: no bundle entry {key}")
                return None
            raise MissingAssetError(url, document=document_path, key=key)
        return entry.content

    async def _fetch_once(self, url: str) -> bytes:
        """Share one fetch task per url across all documents.

        Args:
            url: Network-absolute url.

        Returns:
            The response body.
        """
        task = self._fetches.get(url)
        if task is None:
            task = asyncio.create_task(self.fetch(url))
            self._fetches[url] = task
        return await task

    def cancel_pending(self) -> None:
        """Cancel network fetches that have not completed yet."""
        for task in self._fetches.values():
            if not task.done():
                task.cancel()

    async def fetch(self, url: str) -> bytes:
        """Fetch a network reference.

        Args:
            url: Network-absolute url.

        Returns:
            The full response body.

        Raises:
            NetworkFetchError: On transport errors or non-success status codes.
        """
        logger.debug(f"Fetching {url}")
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkFetchError(url, f"HTTP {e.response.status_code}", status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise NetworkFetchError(url, str(e) or type(e).__name__) from e
        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return response.content
