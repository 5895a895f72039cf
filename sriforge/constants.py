# -*- coding: utf-8 -*-
"""Location: ./sriforge/constants.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

SRI engine constants.
This module stores a collection of constants used throughout the engine.
"""

# Plugin identity, as reported to the host.
PLUGIN_NAME = "sri-forge"
PLUGIN_ENFORCE = "post"
PLUGIN_APPLY = "build"

# Host plugin whose finalize hook is wrapped by default.
DEFAULT_HOST_PLUGIN = "vite:build-import-analysis"
GENERATE_BUNDLE = "generate_bundle"
HANDLER = "handler"

# Bundle entry kinds.
CHUNK = "chunk"
ASSET = "asset"

HTML_SUFFIXES = (".html", ".htm")

# Integrity attribute.
SRI_ALGORITHM = "sha384"
INTEGRITY_ATTR = "integrity"
CROSSORIGIN_ATTR = "crossorigin"
CROSSORIGIN_ANONYMOUS = "anonymous"

# Network references.
NETWORK_SCHEMES = ("http://", "https://")

# Insertion points, counted back from the end of a full tag match.
SCRIPT_END_OFFSET = len("></script>")
LINK_END_OFFSET = len(">")
