"""
Exceptions raised by the bill diff engine.

The diff functions themselves degrade instead of raising (truncation,
"too large" and HTML fallbacks). These are the only error conditions
that reach a caller.
"""

from typing import Optional


class BillDiffError(Exception):
    """Base class for all bill diff errors."""
    pass


class MalformedInput(BillDiffError, ValueError):
    """A bill version or section record from the document store could not be read."""

    def __init__(self, message: str, record: Optional[object] = None):
        super().__init__(message)
        self.record = record


class DiffTooExpensive(BillDiffError):
    """
    The caller-imposed wall-clock budget ran out before the diff finished.

    Renderers should show a "use the side-by-side view" message rather than
    an empty diff when they see this.
    """

    def __init__(self, budget_seconds: float, left_id: Optional[str] = None, right_id: Optional[str] = None):
        self.budget_seconds = budget_seconds
        self.left_id = left_id
        self.right_id = right_id
        versions = f" ({left_id} -> {right_id})" if left_id or right_id else ""
        super().__init__(f"Diff exceeded time budget of {budget_seconds:g}s{versions}")
