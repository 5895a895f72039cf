# -*- coding: utf-8 -*-
"""Location: ./sriforge/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

SRI Forge Package.
Adds Subresource Integrity attributes to the HTML documents of a build:
- External scripts, stylesheets and modulepreload links
- Digests over bundle entries or fetched network resources
- Crossorigin handling and include/exclude policies
"""

__version__ = "0.1.0"

# First-Party
from sriforge.config import AUTO, SriConfig
from sriforge.errors import ConfigurationError, MissingAssetError, NetworkFetchError, SriError
from sriforge.models import BundleEntry
from sriforge.plugin import sri, SriPlugin

__all__ = [
    "AUTO",
    "BundleEntry",
    "ConfigurationError",
    "MissingAssetError",
    "NetworkFetchError",
    "sri",
    "SriConfig",
    "SriError",
    "SriPlugin",
]
