"""
Wall-clock budget around a full version comparison.

The diff itself is bounded by the size guards; this is an extra limit a
caller can impose when it must answer within a fixed time. The work runs
on a worker thread and the caller gets either the complete result or
``DiffTooExpensive``, never a partial list.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import List, Optional

from billdiff.config import DiffConfig
from billdiff.diff.builder import build_section_diffs
from billdiff.errors import DiffTooExpensive
from billdiff.models.bill_version import BillVersion
from billdiff.models.section_diff import SectionDiff

logger = logging.getLogger(__name__)


def build_section_diffs_within_budget(left: BillVersion, right: BillVersion, budget_seconds: float,
                                      granularity: Optional[str] = None,
                                      config: Optional[DiffConfig] = None) -> List[SectionDiff]:
    """
    Run ``build_section_diffs`` but give up after ``budget_seconds``.

    A timed-out comparison keeps running on its worker thread until it
    finishes; its result is discarded. The worker is not a daemon thread,
    and concurrent.futures joins it at interpreter exit, so a runaway
    comparison also delays process shutdown until it completes.

    Raises:
        DiffTooExpensive: if the budget elapses first
        ValueError: for a non-positive budget or unknown granularity
    """
    if budget_seconds <= 0:
        raise ValueError("budget_seconds must be positive")

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="billdiff")
    try:
        future = executor.submit(build_section_diffs, left, right, granularity, config)
        try:
            return future.result(timeout=budget_seconds)
        except FutureTimeoutError:
            future.cancel()
            logger.warning("Diff of %s -> %s exceeded %.2fs budget", left.id, right.id, budget_seconds)
            raise DiffTooExpensive(budget_seconds, left.id, right.id) from None
    finally:
        executor.shutdown(wait=False)
