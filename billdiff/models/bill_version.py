"""
Bill versions and their sections, as handed to the diff engine by the
document-fetching layer.

Versions are immutable snapshots. Upstream bill data is loosely typed
(missing titles, null content, numeric ids), so the ``from_dict`` loaders
normalize it into these records before any comparison runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from billdiff.errors import MalformedInput

logger = logging.getLogger(__name__)


def _coerce_text(value: Any) -> str:
    """None becomes an empty string, anything else its string form."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _coerce_id(record: Mapping[str, Any], kind: str) -> str:
    raw_id = record.get("id")
    if raw_id is None or (isinstance(raw_id, str) and not raw_id.strip()):
        raise MalformedInput(f"{kind} record is missing an id", record)
    return str(raw_id)


@dataclass(frozen=True)
class BillSection:
    """One titled section of a bill version."""
    id: str
    title: str = ""
    content: str = ""

    def __post_init__(self):
        # Document store rows sometimes carry null title/content
        object.__setattr__(self, "title", _coerce_text(self.title))
        object.__setattr__(self, "content", _coerce_text(self.content))

    @classmethod
    def from_dict(cls, record: Any) -> "BillSection":
        """
        Build a section from a document-store record.

        Args:
            record: Mapping with ``id``, ``title`` and ``content`` keys

        Returns:
            BillSection with null fields coerced to empty strings

        Raises:
            MalformedInput: if the record is not a mapping or has no id
        """
        if not isinstance(record, Mapping):
            raise MalformedInput(f"Section record must be a mapping, got {type(record).__name__}", record)
        return cls(
            id=_coerce_id(record, "Section"),
            title=_coerce_text(record.get("title")),
            content=_coerce_text(record.get("content")),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title, "content": self.content}


@dataclass(frozen=True)
class BillVersion:
    """
    A named snapshot of a bill ("Introduced", "Amended", ...).

    ``sections`` keeps document order, which is also the display order.
    ``date`` is whatever string the source supplied and is never parsed.
    """
    id: str
    name: str = ""
    sections: Tuple[BillSection, ...] = field(default_factory=tuple)
    date: Optional[str] = None
    status: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "name", _coerce_text(self.name))
        object.__setattr__(self, "sections", tuple(self.sections or ()))

    @property
    def section_ids(self) -> Tuple[str, ...]:
        return tuple(section.id for section in self.sections)

    @classmethod
    def from_dict(cls, record: Any) -> "BillVersion":
        """
        Build a version from a document-store record.

        Sections with a duplicate id keep their first occurrence; later
        duplicates are dropped with a warning since ids must be unique
        within a version.

        Raises:
            MalformedInput: if the record or any section record is unusable
        """
        if not isinstance(record, Mapping):
            raise MalformedInput(f"Version record must be a mapping, got {type(record).__name__}", record)

        version_id = _coerce_id(record, "Version")
        raw_sections = record.get("sections") or []
        if isinstance(raw_sections, (str, bytes)) or not isinstance(raw_sections, Iterable):
            raise MalformedInput(f"Version {version_id} sections must be a list", record)

        sections = []
        seen = set()
        for raw in raw_sections:
            section = BillSection.from_dict(raw)
            if section.id in seen:
                logger.warning("Version %s has duplicate section id %s, keeping the first", version_id, section.id)
                continue
            seen.add(section.id)
            sections.append(section)

        date = record.get("date")
        status = record.get("status")
        return cls(
            id=version_id,
            name=_coerce_text(record.get("name")),
            sections=tuple(sections),
            date=str(date) if date is not None else None,
            status=str(status) if status is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date,
            "status": self.status,
            "sections": [section.to_dict() for section in self.sections],
        }
