#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Location: ./sriforge/policy.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Xinyi, Ayo

Policy evaluation for resource references.
Decides whether a reference gets an integrity attribute and which
crossorigin attribute, if any, goes with it.
"""

# Standard
import re
from typing import Any, Iterable

# First-Party
from sriforge.config import Auto, CrossoriginDecision, SriConfig
from sriforge.constants import CROSSORIGIN_ANONYMOUS, CROSSORIGIN_ATTR
from sriforge.resolver import is_network_url


def matches_pattern(url: str, pattern: Any) -> bool:
    """Match a url against one configured pattern.

    Args:
        url: Reference url.
        pattern: A literal substring or a compiled regular expression.

    Returns:
        True if the url matches.

    Examples:
        >>> matches_pattern("https://cdn.unwanted.com/a.js", "cdn.unwanted.com")
        True
        >>> matches_pattern("/assets/vendor.js", re.compile(r"vendor\\.js$"))
        True
        >>> matches_pattern("/assets/app.js", re.compile(r"vendor"))
        False
    """
    if isinstance(pattern, re.Pattern):
        return pattern.search(url) is not None
    return pattern in url


def _matches_any(url: str, patterns: Iterable[Any]) -> bool:
    return any(matches_pattern(url, pattern) for pattern in patterns)


def _render_crossorigin(value: CrossoriginDecision) -> str:
    """Turn a crossorigin decision into attribute text.

    Args:
        value: ``None``/``False`` for no attribute, ``True`` for anonymous, or a literal value.

    Returns:
        The attribute text with a leading space, or an empty string.
    """
    if value is None or value is False:
        return ""
    if value is True:
        value = CROSSORIGIN_ANONYMOUS
    return f' {CROSSORIGIN_ATTR}="{value}"'


class PolicyEngine:
    """Evaluates references against a build's policy.

    Examples:
        >>> engine = PolicyEngine(SriConfig(exclude_patterns=["legacy"], include_patterns=["/assets/"]))
        >>> engine.should_process("/assets/app.js")
        True
        >>> engine.should_process("/assets/legacy.js")
        False
        >>> engine.should_process("/other/app.js")
        False
        >>> engine.crossorigin_attr("/assets/app.js")
        ' crossorigin="anonymous"'
    """

    def __init__(self, config: SriConfig) -> None:
        """Initialize the policy engine.

        Args:
            config: The build's SRI policy.
        """
        self._config = config

    @property
    def config(self) -> SriConfig:
        """Return the evaluated policy.

        Returns:
            The build's SRI policy.
        """
        return self._config

    def should_process(self, url: str) -> bool:
        """Decide whether a reference gets an integrity attribute.

        Exclusion always wins over inclusion.

        Args:
            url: Reference url.

        Returns:
            True if the reference should be resolved and patched.
        """
        cfg = self._config
        if cfg.exclude_external and is_network_url(url):
            return False
        if _matches_any(url, cfg.exclude_patterns):
            return False
        if cfg.include_patterns:
            return _matches_any(url, cfg.include_patterns)
        return True

    def crossorigin_attr(self, url: str) -> str:
        """Compute the crossorigin attribute text for a reference.

        A custom function, when configured, decides alone, including when it
        suppresses the attribute.

        Args:
            url: Reference url.

        Returns:
            ``' crossorigin="<value>"'`` or an empty string.

        Examples:
            >>> PolicyEngine(SriConfig(crossorigin=False, custom_crossorigin=lambda u: True)).crossorigin_attr("/a.js")
            ' crossorigin="anonymous"'
            >>> PolicyEngine(SriConfig(custom_crossorigin=lambda u: None)).crossorigin_attr("https://x/a.js")
            ''
            >>> from sriforge.config import AUTO
            >>> PolicyEngine(SriConfig(crossorigin=AUTO)).crossorigin_attr("/a.js")
            ''
        """
        cfg = self._config
        if cfg.custom_crossorigin is not None:
            return _render_crossorigin(cfg.custom_crossorigin(url))
        if isinstance(cfg.crossorigin, Auto):
            return _render_crossorigin(True if is_network_url(url) else None)
        return _render_crossorigin(cfg.crossorigin)
