# -*- coding: utf-8 -*-
"""Location: ./sriforge/patcher.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

HTML patcher.
Applies a batch of insertions computed against the original text. The text
is walked once: gaps between insertion points are copied and each insertion
is appended in turn, so the i-th insertion lands at its original position
plus the length of everything inserted before it.
"""

# Standard
from typing import List, Sequence

# First-Party
from sriforge.models import Change


def apply_changes(html: str, changes: Sequence[Change]) -> str:
    """Apply insertions to the original text.

    Args:
        html: The original, unmodified text.
        changes: Insertions ordered by ascending ``insert_pos`` in original coordinates.

    Returns:
        The patched text.

    Raises:
        ValueError: If the changes are out of order or fall outside the text.

    Examples:
        >>> apply_changes("<a><b>", [Change(2, " x"), Change(5, " y")])
        '<a x><b y>'
        >>> apply_changes("abc", [])
        'abc'
        >>> apply_changes("abc", [Change(2, "1"), Change(1, "2")])
        Traceback (most recent call last):
        ...
        ValueError: change at 1 is before previous change at 2
    """
    spans: List[str] = []
    cursor = 0
    for change in changes:
        if change.insert_pos < cursor:
            raise ValueError(f"change at {change.insert_pos} is before previous change at {cursor}")
        if change.insert_pos > len(html):
            raise ValueError(f"change at {change.insert_pos} is outside the text ({len(html)} characters)")
        spans.append(html[cursor : change.insert_pos])
        spans.append(change.inserted_text)
        cursor = change.insert_pos
    spans.append(html[cursor:])
    return "".join(spans)
