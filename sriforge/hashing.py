# -*- coding: utf-8 -*-
"""Location: ./sriforge/hashing.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Integrity digest calculation.
Produces the ``<algorithm>-<base64 digest>`` strings used in HTML
``integrity`` attributes.
"""

# Standard
import base64
import hashlib
from typing import Union

# First-Party
from sriforge.constants import SRI_ALGORITHM


def compute_integrity(content: Union[bytes, str], algorithm: str = SRI_ALGORITHM) -> str:
    """Compute the SRI digest of a fully resolved buffer.

    Args:
        content: The resource content; text is UTF-8 encoded first.
        algorithm: Hash algorithm (default: sha384, recommended by W3C).

    Returns:
        SRI hash string in format "algorithm-base64hash".

    Examples:
        >>> digest = compute_integrity(b"alert(1)")
        >>> digest.startswith("sha384-")
        True
        >>> len(digest) == len("sha384-") + 64
        True
        >>> compute_integrity("alert(1)") == digest
        True
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    hasher = hashlib.new(algorithm)
    hasher.update(content)
    hash_b64 = base64.b64encode(hasher.digest()).decode("ascii")
    return f"{algorithm}-{hash_b64}"
