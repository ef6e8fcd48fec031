#!/usr/bin/env python3
"""
Builds the per-section diff model for a pair of bill versions.

Policy per aligned section:
- present on one side only: bounded content shown verbatim
- either side HTML: no diff, raw contents handed to the renderer
- bounded plain text over the size threshold: one informational span
- otherwise: word (or char/line) spans, or Unchanged for identical text
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence

from billdiff.config import DiffConfig
from billdiff.diff.aligner import align
from billdiff.diff.text_differ import get_differ
from billdiff.models.bill_version import BillSection, BillVersion
from billdiff.models.section_diff import (
    AlignedSection,
    ContentKind,
    Relation,
    SectionDiff,
    Span,
    SpanTag,
)
from billdiff.utils.content import bound, is_html_content

logger = logging.getLogger(__name__)

TOO_LARGE_MESSAGE = "Content too large for visual diff, please use side-by-side view"


def _single_side_diff(aligned: AlignedSection, config: DiffConfig) -> SectionDiff:
    section: BillSection = aligned.left if aligned.in_left else aligned.right
    kind = ContentKind.HTML if is_html_content(section.content) else ContentKind.PLAIN_TEXT
    return SectionDiff(
        id=aligned.id,
        left_title=aligned.left.title if aligned.in_left else None,
        right_title=aligned.right.title if aligned.in_right else None,
        relation=aligned.relation,
        content_kind=kind,
        single_content=bound(section.content, config.section_max_length),
    )


def _pair_diff(aligned: AlignedSection, granularity: str, config: DiffConfig) -> SectionDiff:
    left, right = aligned.left, aligned.right
    identical = left.content == right.content

    if is_html_content(left.content) or is_html_content(right.content):
        logger.debug("Section %s: HTML content, skipping text diff", aligned.id)
        return SectionDiff(
            id=aligned.id,
            left_title=left.title,
            right_title=right.title,
            relation=Relation.UNCHANGED if identical else Relation.MODIFIED,
            content_kind=ContentKind.HTML,
            single_content=right.content,
            left_content=left.content,
            right_content=right.content,
        )

    left_content = bound(left.content, config.section_max_length)
    right_content = bound(right.content, config.section_max_length)
    too_large = len(left_content) + len(right_content) > config.too_large_threshold
    kind = ContentKind.TOO_LARGE if too_large else ContentKind.PLAIN_TEXT

    if identical:
        return SectionDiff(
            id=aligned.id,
            left_title=left.title,
            right_title=right.title,
            relation=Relation.UNCHANGED,
            content_kind=kind,
            single_content=left_content,
        )

    if too_large:
        logger.debug("Section %s: %d chars combined, skipping diff", aligned.id, len(left_content) + len(right_content))
        spans = [Span(text=TOO_LARGE_MESSAGE, tag=SpanTag.EQUAL)]
    else:
        spans = get_differ(granularity)(left_content, right_content)

    return SectionDiff(
        id=aligned.id,
        left_title=left.title,
        right_title=right.title,
        relation=Relation.MODIFIED,
        content_kind=kind,
        spans=tuple(spans),
    )


def diff_aligned_section(aligned: AlignedSection, granularity: str = "word",
                         config: Optional[DiffConfig] = None) -> SectionDiff:
    """Compute the diff record for one aligned section."""
    config = config or DiffConfig()
    if aligned.is_pair:
        return _pair_diff(aligned, granularity, config)
    return _single_side_diff(aligned, config)


def build_section_diffs(left: BillVersion, right: BillVersion, granularity: Optional[str] = None,
                        config: Optional[DiffConfig] = None) -> List[SectionDiff]:
    """
    Compare two bill versions section by section.

    Args:
        left: Older version
        right: Newer version
        granularity: "word" (default), "char" or "line"
        config: Size limits; defaults to ``DiffConfig()``

    Returns:
        One SectionDiff per section id found in either version, in
        alignment order. Empty when neither version has sections.

    Raises:
        ValueError: for an unknown granularity name
    """
    config = config or DiffConfig()
    granularity = granularity or config.default_granularity
    # Fail on a bad granularity even when no section reaches the differ
    get_differ(granularity)

    diffs = [
        diff_aligned_section(aligned, granularity, config)
        for aligned in align(left.sections, right.sections)
    ]
    logger.debug("Compared versions %s and %s: %d sections", left.id, right.id, len(diffs))
    return diffs


def has_changes(diffs: Sequence[SectionDiff]) -> bool:
    """True if any section differs between the two versions."""
    return any(diff.relation is not Relation.UNCHANGED for diff in diffs)


def summarize_diffs(diffs: Sequence[SectionDiff]) -> Dict[str, int]:
    """
    Count sections by relation, plus how many were degraded (HTML or too large).
    """
    counts = Counter(diff.relation.value for diff in diffs)
    summary = {relation.value: counts.get(relation.value, 0) for relation in Relation}
    summary["degraded"] = sum(1 for diff in diffs if diff.is_degraded)
    summary["total"] = len(diffs)
    return summary
