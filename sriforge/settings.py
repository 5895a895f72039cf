# -*- coding: utf-8 -*-
"""Location: ./sriforge/settings.py

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Fred Araujo

Engine process settings.

Settings that do not belong to a single build's policy: which host plugin to
hook into, HTTP client behaviour for network references and logging. All
fields can be overridden via environment variables with the SRI_ prefix,
for example SRI_LOG_FORMAT=json or SRI_HTTP_READ_TIMEOUT=60.
"""

# Standard
from functools import lru_cache
from typing import Literal

# Third-Party
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# First-Party
from sriforge.constants import DEFAULT_HOST_PLUGIN


class SriSettings(BaseSettings):
    """SRI engine configuration.

    Examples:
        >>> s = SriSettings(_env_file=None)
        >>> s.host_plugin
        'vite:build-import-analysis'
        >>> s.log_format
        'text'
    """

    host_plugin: str = Field(default=DEFAULT_HOST_PLUGIN, description="Name of the host plugin whose finalize hook is wrapped")

    # HTTP client settings
    http_connect_timeout: float = Field(default=5.0, description="Timeout in seconds for establishing connections to remote assets")
    http_read_timeout: float = Field(default=30.0, description="Timeout in seconds for reading a remote asset body")
    http_follow_redirects: bool = Field(default=True, description="Follow redirects when fetching remote assets")
    skip_ssl_verify: bool = Field(
        default=False,
        description="Skip TLS certificate verification for remote assets. WARNING: Only enable in dev environments with self-signed certificates.",
    )

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level for the sriforge logger")
    log_format: Literal["text", "json"] = Field(default="text", description="Log record format")

    model_config = SettingsConfigDict(env_prefix="SRI_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> SriSettings:
    """Get cached engine settings instance.

    Returns:
        SriSettings: A cached instance of the SriSettings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, SriSettings)
        True
        >>> settings is get_settings()
        True
    """
    return SriSettings()
