#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Location: ./sriforge/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

Configuration models for the SRI plugin.
A build's policy is validated once when the plugin is created and is
immutable afterwards.
"""

# Future
from __future__ import annotations

# Standard
import re
from typing import Any, Callable, List, Optional, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

CrossoriginDecision = Union[str, bool, None]


class Auto:
    """Marker for an unset ``crossorigin`` option.

    With ``AUTO`` the attribute is only emitted for network-absolute urls.

    Examples:
        >>> AUTO
        AUTO
        >>> Auto() is AUTO
        True
    """

    _instance: Optional["Auto"] = None

    def __new__(cls) -> "Auto":
        """Return the singleton marker.

        Returns:
            The shared Auto instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        """Return the marker name.

        Returns:
            The string ``AUTO``.
        """
        return "AUTO"


AUTO = Auto()


class SriConfig(BaseModel):
    """Per-build SRI policy.

    Keys may be given in snake_case or in the camelCase spelling used by
    JavaScript build tool configs.

    Attributes:
        ignore_missing_asset: Skip references that are not in the bundle instead of failing the build.
        crossorigin: ``True`` emits ``anonymous``, a string is emitted verbatim,
            ``False``/``None`` suppress the attribute and ``AUTO`` emits ``anonymous``
            only for network-absolute urls.
        custom_crossorigin: Callable deciding the attribute per url; overrides ``crossorigin``.
        exclude_external: Leave network-absolute references untouched.
        exclude_patterns: Substrings or compiled patterns; matching urls are skipped.
        include_patterns: When set and non-empty, only matching urls are processed.

    Examples:
        >>> cfg = SriConfig()
        >>> (cfg.ignore_missing_asset, cfg.crossorigin, cfg.include_patterns)
        (False, True, None)
        >>> SriConfig.model_validate({"ignoreMissingAsset": True}).ignore_missing_asset
        True
        >>> SriConfig(crossorigin="use-credentials").crossorigin
        'use-credentials'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True, arbitrary_types_allowed=True, alias_generator=to_camel)

    ignore_missing_asset: bool = False
    crossorigin: Union[bool, str, Auto, None] = True
    custom_crossorigin: Optional[Callable[[str], CrossoriginDecision]] = None
    exclude_external: bool = False
    exclude_patterns: List[Any] = []
    include_patterns: Optional[List[Any]] = None

    @field_validator("exclude_patterns", "include_patterns")
    @classmethod
    def check_patterns(cls, value: Optional[List[Any]]) -> Optional[List[Any]]:
        """Only literal strings and compiled regular expressions are accepted.

        Args:
            value: The configured pattern list.

        Returns:
            The pattern list, unchanged.

        Raises:
            ValueError: If an entry is neither a str nor an re.Pattern.
        """
        if value is None:
            return value
        for entry in value:
            if not isinstance(entry, (str, re.Pattern)):
                raise ValueError(f"pattern entries must be strings or compiled regular expressions, got {type(entry).__name__}")
        return value
