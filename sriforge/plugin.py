# -*- coding: utf-8 -*-
"""Location: ./sriforge/plugin.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

SRI host plugin.
The object handed to the host build tool. Once the host has resolved its
configuration the plugin chains itself behind the finalize hook of the host's
import-analysis plugin and, whenever that hook runs, adds integrity
attributes to every HTML document of the build.

Examples:
    >>> plugin = sri({"crossorigin": False})
    >>> (plugin.name, plugin.enforce, plugin.apply)
    ('sri-forge', 'post', 'build')
    >>> plugin.config.crossorigin
    False
"""

# Standard
from contextlib import asynccontextmanager
import logging
from typing import Any, AsyncIterator, Dict, Mapping, MutableMapping, Optional, Union

# Third-Party
import httpx
from pydantic import ValidationError

# First-Party
from sriforge.config import SriConfig
from sriforge.constants import PLUGIN_APPLY, PLUGIN_ENFORCE, PLUGIN_NAME
from sriforge.errors import ConfigurationError
from sriforge.hooks import find_host_plugin, FinalizeHook, get_field, hijack_finalize
from sriforge.logging_service import logging_service
from sriforge.models import BundleEntry
from sriforge.policy import PolicyEngine
from sriforge.resolver import AssetResolver
from sriforge.settings import get_settings, SriSettings
from sriforge.transformer import SriTransformer

logger = logging.getLogger(__name__)


class SriPlugin:
    """Host plugin adding integrity attributes to a build's HTML output."""

    name = PLUGIN_NAME
    enforce = PLUGIN_ENFORCE
    apply = PLUGIN_APPLY

    def __init__(self, config: SriConfig, settings: Optional[SriSettings] = None, http_client: Optional[httpx.AsyncClient] = None) -> None:
        """Initialize the plugin.

        Args:
            config: The build's SRI policy.
            settings: Engine settings, defaults to the cached process settings.
            http_client: Client for network references. When omitted one is created per build and closed afterwards.
        """
        self._config = config
        self._settings = settings or get_settings()
        self._http_client = http_client
        self._policy = PolicyEngine(config)
        self._base = "/"
        self._hook: Optional[FinalizeHook] = None

    @property
    def config(self) -> SriConfig:
        """Return the build's SRI policy.

        Returns:
            The validated configuration.
        """
        return self._config

    @property
    def base(self) -> str:
        """Return the public base path captured from the host config.

        Returns:
            The base path, ``/`` until the host config is resolved.
        """
        return self._base

    def config_resolved(self, config: Any) -> None:
        """Capture the host config and chain the SRI pass behind the host's finalize hook.

        Args:
            config: The host's resolved config, exposing ``base`` and ``plugins``.

        Raises:
            ConfigurationError: If the required host plugin or its hook is missing.
        """
        base = get_field(config, "base")
        self._base = "/" if base is None else base
        host = find_host_plugin(get_field(config, "plugins") or [], self._settings.host_plugin)
        self._hook = hijack_finalize(host, self.generate_bundle)
        logger.info(f"{PLUGIN_NAME} attached to {self._settings.host_plugin} (base={self._base!r})")

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the HTTP client for one build.

        Yields:
            The injected client, or a client owned and closed by this build.
        """
        if self._http_client is not None:
            yield self._http_client
            return
        s = self._settings
        timeout = httpx.Timeout(s.http_read_timeout, connect=s.http_connect_timeout)
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=s.http_follow_redirects, verify=not s.skip_ssl_verify) as client:
            yield client

    async def generate_bundle(self, output_options: Any, bundle: MutableMapping[str, BundleEntry], *args: Any, **kwargs: Any) -> Dict[str, str]:
        """Add integrity attributes to every HTML document of the bundle.

        Invoked with the host's finalize arguments after the host's own handler.

        Args:
            output_options: The host's output options; unused.
            bundle: The build output; HTML entries are updated in place.
            *args: Further host arguments; unused.
            **kwargs: Further host keyword arguments; unused.

        Returns:
            Mapping of document path to rewritten text.

        Raises:
            MissingAssetError: If a local reference is missing and missing assets are not ignored.
            NetworkFetchError: If a network reference cannot be retrieved.
        """
        async with self._client() as client:
            resolver = AssetResolver(bundle, client, base=self._base, ignore_missing_asset=self._config.ignore_missing_asset)
            transformer = SriTransformer(self._policy, resolver)
            return await transformer.transform_bundle(bundle)


def sri(
    options: Optional[Union[SriConfig, Mapping[str, Any]]] = None,
    *,
    settings: Optional[SriSettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> SriPlugin:
    """Create the SRI host plugin.

    Args:
        options: The build's SRI policy, as a SriConfig or a mapping of its fields.
        settings: Engine settings, defaults to the cached process settings.
        http_client: Client for network references.

    Returns:
        SriPlugin: The plugin to register with the host.

    Raises:
        ConfigurationError: If the options are invalid.

    Examples:
        >>> sri({"unknownOption": 1})
        Traceback (most recent call last):
        ...
        sriforge.errors.ConfigurationError: invalid sri-forge options: unknownOption (Extra inputs are not permitted)
    """
    settings = settings or get_settings()
    if not logging_service.configured:
        logging_service.configure(settings)
    if isinstance(options, SriConfig):
        config = options
    else:
        try:
            config = SriConfig.model_validate(dict(options or {}))
        except ValidationError as e:
            details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])} ({err['msg']})" for err in e.errors())
            raise ConfigurationError(f"invalid sri-forge options: {details}") from e
    return SriPlugin(config, settings=settings, http_client=http_client)
