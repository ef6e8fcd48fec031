"""
billdiff - compare versions of a bill section by section.

Given two versions of a bill, each an ordered list of titled sections,
billdiff aligns the sections by id and produces a renderer-agnostic diff
per section, degrading to a plain message for HTML or oversized content.
"""

from billdiff.errors import BillDiffError, DiffTooExpensive, MalformedInput
from billdiff.models import (
    AlignedSection,
    BillSection,
    BillVersion,
    ContentKind,
    Relation,
    SectionDiff,
    Span,
    SpanTag,
)
from billdiff.utils.content import bound, classify, has_valid_content, is_html_content
from billdiff.diff import (
    align,
    build_section_diffs,
    build_section_diffs_within_budget,
    compare_sections,
    diff_chars,
    diff_lines,
    diff_words,
    has_changes,
    highlight_differences,
    summarize_diffs,
)
from billdiff.comparer import VersionComparer

__all__ = [
    # Errors
    "BillDiffError",
    "DiffTooExpensive",
    "MalformedInput",
    # Models
    "AlignedSection",
    "BillSection",
    "BillVersion",
    "ContentKind",
    "Relation",
    "SectionDiff",
    "Span",
    "SpanTag",
    # Content utilities
    "bound",
    "classify",
    "has_valid_content",
    "is_html_content",
    # Diffing
    "align",
    "build_section_diffs",
    "build_section_diffs_within_budget",
    "compare_sections",
    "diff_chars",
    "diff_lines",
    "diff_words",
    "has_changes",
    "highlight_differences",
    "summarize_diffs",
    # Service
    "VersionComparer",
]
