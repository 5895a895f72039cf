# -*- coding: utf-8 -*-
"""Location: ./sriforge/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

Data models for the SRI engine.
This module implements the build output entries handed over by the host and
the intermediate records produced while rewriting one HTML document.
"""

# Standard
from dataclasses import dataclass
import re
from typing import Literal, Optional, Union

# Third-Party
from pydantic import BaseModel, ConfigDict

# First-Party
from sriforge.constants import CHUNK


class BundleEntry(BaseModel):
    """One entry of the host's build output.

    Chunks carry compiled code in ``code``; assets carry raw content in
    ``source``. Only HTML assets are mutated by the engine.

    Attributes:
        kind: Either ``chunk`` or ``asset``.
        file_name: Output-relative path of the entry.
        code: Compiled code text of a chunk.
        source: Raw content of an asset.

    Examples:
        >>> entry = BundleEntry(kind="asset", file_name="index.html", source="<html></html>")
        >>> entry.content
        b'<html></html>'
        >>> BundleEntry(kind="chunk", file_name="assets/app.js", code="let a = 1").content
        b'let a = 1'
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal["chunk", "asset"]
    file_name: str
    code: Optional[str] = None
    source: Optional[Union[bytes, str]] = None

    @property
    def content(self) -> bytes:
        """Bytes the integrity digest is computed over.

        Returns:
            Compiled code for chunks, raw source for assets.
        """
        data = self.code if self.kind == CHUNK else self.source
        if data is None:
            return b""
        if isinstance(data, str):
            return data.encode("utf-8")
        return data

    @property
    def text(self) -> str:
        """Source decoded as UTF-8 text.

        Returns:
            The entry's source as a str.
        """
        if isinstance(self.source, bytes):
            return self.source.decode("utf-8")
        return self.source or ""


@dataclass(frozen=True)
class TagShape:
    """A recognized resource-reference tag shape.

    Attributes:
        kind: Short name of the shape (script, stylesheet, modulepreload).
        pattern: Compiled expression; group 1 captures the reference url.
        end_offset: Characters before the match end where attributes are inserted.
    """

    kind: str
    pattern: "re.Pattern[str]"
    end_offset: int


@dataclass(frozen=True)
class ResourceReference:
    """One matched tag occurrence, in original text coordinates.

    Examples:
        >>> ref = ResourceReference("script", "/a.js", 0, 30, 10)
        >>> ref.insert_pos
        20
    """

    tag_kind: str
    url: str
    match_start: int
    match_end: int
    end_offset: int

    @property
    def insert_pos(self) -> int:
        """Position where the new attributes go.

        Returns:
            The match end minus the shape's end offset.
        """
        return self.match_end - self.end_offset


@dataclass(frozen=True)
class IntegrityRecord:
    """Computed digest for a reference url."""

    url: str
    digest: str


@dataclass(frozen=True)
class Change:
    """A pending text insertion.

    Examples:
        >>> Change(5, ' integrity="x"').length
        14
    """

    insert_pos: int
    inserted_text: str

    @property
    def length(self) -> int:
        """Number of characters inserted.

        Returns:
            Length of the inserted text.
        """
        return len(self.inserted_text)
