"""
Version comparison service for the application layer.

Bundles configuration, an optional per-comparison time budget, and a
caller-owned TTL cache around the pure diff functions. Create one per
application (or per request scope); nothing here is module state.
"""

import logging
from typing import Any, Hashable, List, Mapping, Optional, Tuple

from billdiff.config import DiffConfig, get_config
from billdiff.diff.budget import build_section_diffs_within_budget
from billdiff.diff.builder import build_section_diffs, summarize_diffs
from billdiff.diff.side_by_side import SideBySideSection, compare_sections
from billdiff.models.bill_version import BillVersion
from billdiff.models.section_diff import SectionDiff
from billdiff.utils.cache import TTLCache

logger = logging.getLogger(__name__)


class VersionComparer:
    """
    Compares bill versions for the visual diff and side-by-side views.

    Results are cached by the full contents of both versions plus the
    granularity, so two bills that reuse version ids never share an entry.
    Versions are immutable snapshots, so a cached diff stays valid until it
    expires.
    """

    def __init__(self, config: Optional[DiffConfig] = None, cache: Optional[TTLCache] = None,
                 use_cache: bool = True):
        self.config = config or get_config().diff
        if cache is None and use_cache:
            cache = TTLCache(self.config.cache_ttl_seconds)
        self.cache = cache

    def _cache_key(self, left: BillVersion, right: BillVersion, granularity: str) -> Hashable:
        # Frozen versions hash by value, sections and content included
        return (left, right, granularity)

    def compare(self, left: BillVersion, right: BillVersion, granularity: Optional[str] = None) -> List[SectionDiff]:
        """
        Build the section diffs for two versions.

        Raises:
            DiffTooExpensive: if a time budget is configured and runs out
        """
        granularity = granularity or self.config.default_granularity
        key = self._cache_key(left, right, granularity)

        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.info(f"Using cached diff for {left.id} -> {right.id}")
                return list(cached)

        if self.config.time_budget_seconds:
            diffs = build_section_diffs_within_budget(
                left, right, self.config.time_budget_seconds, granularity, self.config
            )
        else:
            diffs = build_section_diffs(left, right, granularity, self.config)

        summary = summarize_diffs(diffs)
        logger.info(
            f"Compared {left.id} -> {right.id}: {summary['total']} sections, "
            f"{summary['modified']} modified, {summary['only_in_left']} removed, "
            f"{summary['only_in_right']} added, {summary['degraded']} degraded"
        )

        if self.cache is not None:
            self.cache.set(key, tuple(diffs))
        return diffs

    def compare_dicts(self, left: Mapping[str, Any], right: Mapping[str, Any],
                      granularity: Optional[str] = None) -> List[SectionDiff]:
        """
        Compare two loosely-typed version records from the document store.

        Raises:
            MalformedInput: if either record cannot be read as a version
        """
        return self.compare(BillVersion.from_dict(left), BillVersion.from_dict(right), granularity)

    def compare_side_by_side(self, left: BillVersion, right: BillVersion) -> List[SideBySideSection]:
        """Same/different comparison for the two-column view."""
        return compare_sections(left.sections, right.sections, self.config)

    def pick_default_pair(self, versions: List[BillVersion]) -> Optional[Tuple[BillVersion, BillVersion]]:
        """
        The pair a comparison view opens with: the first version against the
        second. A single version is paired with itself; no versions gives None.
        """
        if not versions:
            return None
        if len(versions) == 1:
            return versions[0], versions[0]
        return versions[0], versions[1]

    def versions_missing_content(self, versions: List[BillVersion]) -> Optional[str]:
        """
        Check the versions a comparison opens with for usable text.

        Only the first two versions are checked, since those are the default
        pair. A version counts as missing content when none of its sections
        has non-blank text.

        Returns:
            A message naming the versions without content, or None if both
            have some
        """
        if not versions:
            return "No versions available"

        missing = [
            version for version in versions[:2]
            if not any(section.content.strip() for section in version.sections)
        ]
        if missing:
            return f"Missing content in versions: {', '.join(version.name for version in missing)}"
        return None
