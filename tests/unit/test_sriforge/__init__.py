#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Location: tests/unit/test_sriforge/__init__.py
Copyright: 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor
Unit tests for the SRI rewriting engine.

This package covers:
- Reference scanning (test_scanner.py)
- Bundle key and network resolution (test_resolver.py)
- Policy evaluation (test_policy.py)
- Batched text insertion (test_patcher.py)
- Host hook adapters (test_hooks.py)
- Document and bundle rewriting (test_transformer.py)
- Host plugin wiring (test_plugin.py)

Running Tests locally:
    pytest tests/unit/test_sriforge/ -v
    pytest tests/unit/test_sriforge/ --cov=sriforge
"""
