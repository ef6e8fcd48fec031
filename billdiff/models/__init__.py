"""
Data model for bill versions and the diff results computed from them.
"""

from billdiff.models.bill_version import BillSection, BillVersion
from billdiff.models.section_diff import (
    AlignedSection,
    ContentKind,
    Relation,
    SectionDiff,
    Span,
    SpanTag,
)

__all__ = [
    "BillSection",
    "BillVersion",
    "AlignedSection",
    "ContentKind",
    "Relation",
    "SectionDiff",
    "Span",
    "SpanTag",
]
