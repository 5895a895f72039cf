#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Location: tests/unit/test_sriforge/test_hashing.py
Copyright: 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti
"""

# Standard
import base64
import hashlib

# First-Party
from sriforge.hashing import compute_integrity


def test_compute_integrity_matches_sha384(sri_digest) -> None:
    assert compute_integrity(b"alert('hi')") == sri_digest(b"alert('hi')")


def test_compute_integrity_of_empty_content(sri_digest) -> None:
    assert compute_integrity(b"") == sri_digest(b"")


def test_compute_integrity_encodes_text_as_utf8(sri_digest) -> None:
    assert compute_integrity("é") == sri_digest("é".encode("utf-8"))


def test_compute_integrity_other_algorithm() -> None:
    expected = "sha256-" + base64.b64encode(hashlib.sha256(b"x").digest()).decode("ascii")

    assert compute_integrity(b"x", algorithm="sha256") == expected
