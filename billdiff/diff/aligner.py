"""
Structural alignment of two section lists by section id.

This is the shared primitive under both comparison views: the full diff
model (``builder``) and the simpler same/different check used by the
side-by-side view.
"""

from typing import Dict, List, Sequence

from billdiff.models.bill_version import BillSection
from billdiff.models.section_diff import AlignedSection


def _index_sections(sections: Sequence[BillSection]) -> Dict[str, BillSection]:
    # First occurrence wins if a caller passes duplicate ids
    index: Dict[str, BillSection] = {}
    for section in sections or ():
        index.setdefault(section.id, section)
    return index


def get_all_section_ids(left_sections: Sequence[BillSection], right_sections: Sequence[BillSection]) -> List[str]:
    """
    Union of section ids in display order: left ids in their order, then
    right-only ids in theirs.
    """
    ordered = dict.fromkeys(section.id for section in left_sections or ())
    for section in right_sections or ():
        ordered.setdefault(section.id)
    return list(ordered)


def align(left_sections: Sequence[BillSection], right_sections: Sequence[BillSection]) -> List[AlignedSection]:
    """
    Pair up sections of two versions by id.

    Args:
        left_sections: Sections of the older version
        right_sections: Sections of the newer version

    Returns:
        One AlignedSection per id in either list, ordered as
        ``get_all_section_ids``. Matched pairs hold both sections, the rest
        hold the side they came from.
    """
    left_index = _index_sections(left_sections)
    right_index = _index_sections(right_sections)

    return [
        AlignedSection(id=section_id, left=left_index.get(section_id), right=right_index.get(section_id))
        for section_id in get_all_section_ids(left_sections, right_sections)
    ]
