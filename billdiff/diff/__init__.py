"""
Diff package - section alignment, text diffing and the section diff model.

Entry points:
- align: pair sections of two versions by id
- diff_words / diff_chars / diff_lines: standalone text diffs
- build_section_diffs: full per-section diff model for two versions
- compare_sections: same/different check for the side-by-side view
"""

from billdiff.diff.aligner import align, get_all_section_ids
from billdiff.diff.text_differ import (
    diff_chars,
    diff_lines,
    diff_words,
    left_text,
    right_text,
)
from billdiff.diff.builder import (
    TOO_LARGE_MESSAGE,
    build_section_diffs,
    diff_aligned_section,
    has_changes,
    summarize_diffs,
)
from billdiff.diff.side_by_side import (
    Highlight,
    SideBySideSection,
    compare_sections,
    highlight_differences,
)
from billdiff.diff.budget import build_section_diffs_within_budget

__all__ = [
    # Alignment
    "align",
    "get_all_section_ids",
    # Text diff
    "diff_chars",
    "diff_lines",
    "diff_words",
    "left_text",
    "right_text",
    # Section diff model
    "TOO_LARGE_MESSAGE",
    "build_section_diffs",
    "diff_aligned_section",
    "has_changes",
    "summarize_diffs",
    "build_section_diffs_within_budget",
    # Side by side
    "Highlight",
    "SideBySideSection",
    "compare_sections",
    "highlight_differences",
]
