"""
Output model of the diff engine.

A list of ``SectionDiff`` records is the stable contract between the diff
engine and every renderer (two-column view, inline highlighted view).
Each record carries either ``spans`` or ``single_content``, never both.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from billdiff.models.bill_version import BillSection


class Relation(str, Enum):
    """How a section relates across the two versions."""
    UNCHANGED = "unchanged"
    MODIFIED = "modified"
    ONLY_IN_LEFT = "only_in_left"
    ONLY_IN_RIGHT = "only_in_right"


class ContentKind(str, Enum):
    """What kind of content a section diff holds."""
    PLAIN_TEXT = "plain_text"
    HTML = "html"
    TOO_LARGE = "too_large"


class SpanTag(str, Enum):
    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Span:
    """A run of text tagged as shared, added (right only) or removed (left only)."""
    text: str
    tag: SpanTag

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "tag": self.tag.value}


@dataclass(frozen=True)
class AlignedSection:
    """
    One entry of the structural alignment between two section lists.

    Either side may be missing. For a matched pair, ``relation`` compares
    the raw contents, which is all the side-by-side view needs.
    """
    id: str
    left: Optional[BillSection] = None
    right: Optional[BillSection] = None

    @property
    def in_left(self) -> bool:
        return self.left is not None

    @property
    def in_right(self) -> bool:
        return self.right is not None

    @property
    def is_pair(self) -> bool:
        return self.left is not None and self.right is not None

    @property
    def relation(self) -> Relation:
        if self.left is not None and self.right is not None:
            if self.left.content == self.right.content:
                return Relation.UNCHANGED
            return Relation.MODIFIED
        if self.left is not None:
            return Relation.ONLY_IN_LEFT
        return Relation.ONLY_IN_RIGHT


@dataclass(frozen=True)
class SectionDiff:
    """
    Diff result for one section id.

    ``left_title``/``right_title`` are None when the section is absent on
    that side. ``left_content``/``right_content`` are only set when either
    side of a matched pair is HTML; renderers show those individually.
    """
    id: str
    left_title: Optional[str]
    right_title: Optional[str]
    relation: Relation
    content_kind: ContentKind
    spans: Optional[Tuple[Span, ...]] = None
    single_content: Optional[str] = None
    left_content: Optional[str] = None
    right_content: Optional[str] = None

    def __post_init__(self):
        if (self.spans is None) == (self.single_content is None):
            raise ValueError(f"Section diff {self.id} must carry exactly one of spans or single_content")
        if self.spans is not None:
            object.__setattr__(self, "spans", tuple(self.spans))

    @property
    def is_degraded(self) -> bool:
        return self.content_kind is not ContentKind.PLAIN_TEXT

    @property
    def title(self) -> Optional[str]:
        """The title to display, preferring the newer version's."""
        return self.right_title if self.right_title is not None else self.left_title

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serializable form of this diff."""
        data: Dict[str, Any] = {
            "id": self.id,
            "left_title": self.left_title,
            "right_title": self.right_title,
            "relation": self.relation.value,
            "content_kind": self.content_kind.value,
        }
        if self.spans is not None:
            data["spans"] = [span.to_dict() for span in self.spans]
        else:
            data["single_content"] = self.single_content
        if self.left_content is not None or self.right_content is not None:
            data["left_content"] = self.left_content
            data["right_content"] = self.right_content
        return data
