# -*- coding: utf-8 -*-
"""Location: ./sriforge/transformer.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor, Mihai Criveti

SRI transformer.
Runs the rewriting pipeline for every HTML document of a build:
scan -> filter -> resolve -> digest -> patch, one pass per tag shape.

A pass computes every change before any text is modified, so insertion
positions always refer to the text the pass scanned. Documents are processed
concurrently and written back to the bundle only once all of them succeeded.
"""

# Standard
import asyncio
import logging
from typing import Dict, List, Mapping, MutableMapping, Optional, Sequence

# First-Party
from sriforge.constants import ASSET, HTML_SUFFIXES, INTEGRITY_ATTR
from sriforge.hashing import compute_integrity
from sriforge.models import BundleEntry, Change, IntegrityRecord, ResourceReference, TagShape
from sriforge.patcher import apply_changes
from sriforge.policy import PolicyEngine
from sriforge.resolver import AssetResolver
from sriforge.scanner import scan_references, TAG_SHAPES

logger = logging.getLogger(__name__)


class SriTransformer:
    """Adds integrity attributes to the HTML documents of one build."""

    def __init__(self, policy: PolicyEngine, resolver: AssetResolver, shapes: Sequence[TagShape] = TAG_SHAPES) -> None:
        """Initialize the transformer.

        Args:
            policy: Policy deciding which references are processed.
            resolver: Resolver for reference content.
            shapes: Tag shapes, in pass order.
        """
        self._policy = policy
        self._resolver = resolver
        self._shapes = shapes

    async def _integrity_for(self, document_path: str, ref: ResourceReference) -> Optional[IntegrityRecord]:
        """Resolve and digest one reference.

        Args:
            document_path: Output path of the referencing document.
            ref: The reference.

        Returns:
            The integrity record, or None if the asset is missing and ignored.
        """
        content = await self._resolver.resolve(document_path, ref.url)
        if content is None:
            return None
        return IntegrityRecord(url=ref.url, digest=compute_integrity(content))

    def _change_for(self, ref: ResourceReference, record: IntegrityRecord) -> Change:
        """Build the insertion for a resolved reference.

        Args:
            ref: The reference.
            record: Its integrity record.

        Returns:
            Change: integrity attribute, then the crossorigin attribute if any.
        """
        text = f' {INTEGRITY_ATTR}="{record.digest}"' + self._policy.crossorigin_attr(ref.url)
        return Change(insert_pos=ref.insert_pos, inserted_text=text)

    async def compute_changes(self, document_path: str, html: str, shape: TagShape) -> List[Change]:
        """Compute every change of one pass, in scan order.

        Resolutions run concurrently; results keep the order of the references.

        Args:
            document_path: Output path of the document.
            html: Document text the pass scans.
            shape: Tag shape of the pass.

        Returns:
            Changes ordered by insertion position.
        """
        refs = [ref for ref in scan_references(shape, html) if self._policy.should_process(ref.url)]
        records = await asyncio.gather(*(self._integrity_for(document_path, ref) for ref in refs))
        return [self._change_for(ref, record) for ref, record in zip(refs, records) if record is not None]

    async def transform_html(self, document_path: str, html: str) -> str:
        """Rewrite one document, running one pass per tag shape.

        Args:
            document_path: Output path of the document.
            html: Original document text.

        Returns:
            The rewritten text.
        """
        for shape in self._shapes:
            changes = await self.compute_changes(document_path, html, shape)
            html = apply_changes(html, changes)
            logger.debug(f"{document_path}: {len(changes)} {shape.kind} reference(s) patched")
        return html

    async def transform_bundle(self, bundle: MutableMapping[str, BundleEntry]) -> Dict[str, str]:
        """Rewrite every HTML document of a build.

        The bundle is only modified when every document succeeded. On the
        first failure the other documents are cancelled and the error propagates.

        Args:
            bundle: The build output; HTML entries are updated in place.

        Returns:
            Mapping of document path to rewritten text.
        """
        documents = _html_documents(bundle)
        tasks = [asyncio.create_task(self.transform_html(path, entry.text)) for path, entry in documents.items()]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            self._resolver.cancel_pending()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        rewritten = dict(zip(documents, results))
        for path, html in rewritten.items():
            bundle[path].source = html
        logger.info(f"Added integrity attributes to {len(rewritten)} HTML document(s)")
        return rewritten


def _html_documents(bundle: Mapping[str, BundleEntry]) -> Dict[str, BundleEntry]:
    """Select the HTML documents of a build.

    Args:
        bundle: The build output.

    Returns:
        Assets whose path ends in .html or .htm, keyed by output path.
    """
    return {path: entry for path, entry in bundle.items() if entry.kind == ASSET and path.lower().endswith(HTML_SUFFIXES)}
