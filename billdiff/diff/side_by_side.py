"""
Same/different comparison for the two-column view.

Unlike ``builder``, this works on the raw section lists and only decides
whether each matched pair differs, optionally highlighting the changed
characters on each side.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from billdiff.config import DiffConfig
from billdiff.diff.aligner import align
from billdiff.diff.text_differ import diff_chars
from billdiff.models.bill_version import BillSection
from billdiff.models.section_diff import Relation, Span, SpanTag
from billdiff.utils.content import DISPLAY_MAX_LENGTH, NO_CONTENT_MESSAGE, bound, is_html_content

logger = logging.getLogger(__name__)

SECTION_REMOVED_NOTE = "Section removed in newer version"
SECTION_ADDED_NOTE = "New section added in newer version"
SECTION_MODIFIED_NOTE = "Content has been modified between versions"


@dataclass(frozen=True)
class Highlight:
    """Per-side spans for two texts shown next to each other."""
    left_spans: Tuple[Span, ...]
    right_spans: Tuple[Span, ...]
    has_differences: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left_spans": [span.to_dict() for span in self.left_spans],
            "right_spans": [span.to_dict() for span in self.right_spans],
            "has_differences": self.has_differences,
        }


@dataclass(frozen=True)
class SideBySideSection:
    id: str
    relation: Relation
    left_title: Optional[str] = None
    right_title: Optional[str] = None
    left_content: Optional[str] = None
    right_content: Optional[str] = None
    left_is_html: bool = False
    right_is_html: bool = False
    highlight: Optional[Highlight] = field(default=None)

    @property
    def is_same_content(self) -> bool:
        return self.relation is Relation.UNCHANGED

    @property
    def change_note(self) -> Optional[str]:
        return {
            Relation.ONLY_IN_LEFT: SECTION_REMOVED_NOTE,
            Relation.ONLY_IN_RIGHT: SECTION_ADDED_NOTE,
            Relation.MODIFIED: SECTION_MODIFIED_NOTE,
        }.get(self.relation)


def highlight_differences(left_content: Optional[str], right_content: Optional[str],
                          max_length: int = DISPLAY_MAX_LENGTH) -> Highlight:
    """
    Character-level highlighting for two texts shown side by side.

    The left side gets EQUAL and REMOVED spans, the right side EQUAL and
    ADDED spans. If either text is longer than ``max_length`` the diff is
    skipped and each side comes back as a single EQUAL span.
    """
    left_content = left_content or NO_CONTENT_MESSAGE
    right_content = right_content or NO_CONTENT_MESSAGE

    if len(left_content) > max_length or len(right_content) > max_length:
        logger.warning("Content too large for diff, skipping highlighting")
        return Highlight(
            left_spans=(Span(text=left_content, tag=SpanTag.EQUAL),),
            right_spans=(Span(text=right_content, tag=SpanTag.EQUAL),),
            has_differences=left_content != right_content,
        )

    spans = diff_chars(left_content, right_content)
    return Highlight(
        left_spans=tuple(span for span in spans if span.tag is not SpanTag.ADDED),
        right_spans=tuple(span for span in spans if span.tag is not SpanTag.REMOVED),
        has_differences=any(span.tag is not SpanTag.EQUAL for span in spans),
    )


def compare_sections(left_sections: Sequence[BillSection], right_sections: Sequence[BillSection],
                     config: Optional[DiffConfig] = None) -> List[SideBySideSection]:
    """
    Compare two section lists for the side-by-side view.

    Matched pairs are compared after bounding to the display limit.
    Differing plain-text pairs also get character highlighting; HTML pairs
    are only marked same/different.
    """
    config = config or DiffConfig()
    results: List[SideBySideSection] = []

    for aligned in align(left_sections, right_sections):
        left, right = aligned.left, aligned.right
        left_content = bound(left.content, config.display_max_length) if left is not None else None
        right_content = bound(right.content, config.display_max_length) if right is not None else None
        left_is_html = left is not None and is_html_content(left.content)
        right_is_html = right is not None and is_html_content(right.content)

        relation = aligned.relation
        highlight = None
        if aligned.is_pair:
            relation = Relation.UNCHANGED if left_content == right_content else Relation.MODIFIED
            if relation is Relation.MODIFIED and not (left_is_html or right_is_html):
                highlight = highlight_differences(left_content, right_content, config.display_max_length)

        results.append(SideBySideSection(
            id=aligned.id,
            relation=relation,
            left_title=left.title if left is not None else None,
            right_title=right.title if right is not None else None,
            left_content=left_content,
            right_content=right_content,
            left_is_html=left_is_html,
            right_is_html=right_is_html,
            highlight=highlight,
        ))

    return results
