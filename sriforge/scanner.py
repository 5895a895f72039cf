# -*- coding: utf-8 -*-
"""Location: ./sriforge/scanner.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

Reference scanner.
Finds external script, stylesheet and modulepreload references in generated
HTML using tag-shape regular expressions. No DOM is built; a tag is only
recognized when its reference attribute is present.

Examples:
    >>> html = '<script type="module" src="/assets/app.js"></script>'
    >>> [ref.url for ref in iter_references(SCRIPT_SHAPE, html)]
    ['/assets/app.js']
    >>> html[scan_references(SCRIPT_SHAPE, html)[0].insert_pos:]
    '></script>'
"""

# Standard
import re
from typing import Iterator, List

# First-Party
from sriforge.constants import LINK_END_OFFSET, SCRIPT_END_OFFSET
from sriforge.models import ResourceReference, TagShape

# Attribute value after the attribute name, group 1 is the url.
_URL_VALUE = r"""\s*=\s*["']?([^\s"'<>]+)["']?"""

# Attribute names must not be the tail of another name (data-src, hreflang).
_ATTR_START = r"(?<![\w-])"


def _link_pattern(rel: str) -> "re.Pattern[str]":
    """Build the pattern for a ``<link>`` with the given ``rel`` value.

    ``rel`` may appear before or after ``href``.

    Args:
        rel: The rel keyword to match.

    Returns:
        The compiled pattern.

    Examples:
        >>> bool(_link_pattern("stylesheet").search('<link href="/a.css" rel="stylesheet">'))
        True
        >>> bool(_link_pattern("stylesheet").search('<link rel="icon" href="/a.ico">'))
        False
    """
    rel_lookahead = rf"""(?=[^<>]*{_ATTR_START}rel\s*=\s*["']?{rel}(?=[\s"'/>]))"""
    return re.compile(rf"<link\b{rel_lookahead}[^<>]*?{_ATTR_START}href{_URL_VALUE}[^<>]*>", re.IGNORECASE)


EXTERNAL_SCRIPT_RE = re.compile(rf"<script\b[^<>]*?{_ATTR_START}src{_URL_VALUE}[^<>]*></script>", re.IGNORECASE)
EXTERNAL_CSS_RE = _link_pattern("stylesheet")
MODULE_PRELOAD_RE = _link_pattern("modulepreload")

SCRIPT_SHAPE = TagShape(kind="script", pattern=EXTERNAL_SCRIPT_RE, end_offset=SCRIPT_END_OFFSET)
STYLESHEET_SHAPE = TagShape(kind="stylesheet", pattern=EXTERNAL_CSS_RE, end_offset=LINK_END_OFFSET)
MODULE_PRELOAD_SHAPE = TagShape(kind="modulepreload", pattern=MODULE_PRELOAD_RE, end_offset=LINK_END_OFFSET)

# Pass order for every document.
TAG_SHAPES = (SCRIPT_SHAPE, STYLESHEET_SHAPE, MODULE_PRELOAD_SHAPE)


def iter_references(shape: TagShape, html: str) -> Iterator[ResourceReference]:
    """Lazily yield the references of one tag shape, left to right.

    Every call starts a fresh matcher, so the sequence can be restarted by
    calling the function again.

    Args:
        shape: The tag shape to look for.
        html: Full HTML text.

    Yields:
        ResourceReference: One per matched tag, in original text order.
    """
    for match in shape.pattern.finditer(html):
        yield ResourceReference(
            tag_kind=shape.kind,
            url=match.group(1),
            match_start=match.start(),
            match_end=match.end(),
            end_offset=shape.end_offset,
        )


def scan_references(shape: TagShape, html: str) -> List[ResourceReference]:
    """Collect the references of one tag shape.

    Args:
        shape: The tag shape to look for.
        html: Full HTML text.

    Returns:
        References ordered by position.

    Examples:
        >>> html = '<link rel="stylesheet" href="a.css"><link rel="stylesheet" href="b.css">'
        >>> [(r.url, r.insert_pos) for r in scan_references(STYLESHEET_SHAPE, html)]
        [('a.css', 35), ('b.css', 71)]
    """
    return list(iter_references(shape, html))


def scan_document(html: str) -> List[ResourceReference]:
    """Collect the references of every shape, grouped by shape in pass order.

    Positions are comparable only within one shape.

    Args:
        html: Full HTML text.

    Returns:
        Script references, then stylesheet references, then modulepreload references.

    Examples:
        >>> html = '<link rel="modulepreload" href="/m.js"><script src="/a.js"></script>'
        >>> [r.tag_kind for r in scan_document(html)]
        ['script', 'modulepreload']
    """
    references: List[ResourceReference] = []
    for shape in TAG_SHAPES:
        references.extend(iter_references(shape, html))
    return references
