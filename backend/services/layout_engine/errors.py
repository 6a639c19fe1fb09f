"""
Layout errors and per-call diagnostics.

Malformed input raises :class:`InvalidInputError` before any placement is
attempted.  Everything else is recoverable and is recorded as a warning on
a :class:`Diagnostics` accumulator that is created for a single layout call
and threaded through the pipeline.
"""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


# Warning codes
CAPACITY_EXCEEDED = "CapacityExceeded"
OVERLAP_DETECTED = "OverlapDetected"
CONTAINMENT_CLAMPED = "ContainmentClamped"
MISSING_STANDARD = "MissingStandard"
ADJACENCY_UNSATISFIED = "AdjacencyUnsatisfied"


class LayoutError(Exception):
    """Base class for layout engine errors."""


class InvalidInputError(LayoutError):
    """Plan data that cannot be laid out (non-positive sizes, no rooms)."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class Diagnostics:
    """Accumulates warnings for one layout computation."""

    def __init__(self, scope: Optional[str] = None):
        self.scope = scope
        self.warnings: List[str] = []

    def warn(self, code: str, message: str) -> None:
        text = f"{code}: {message}"
        if self.scope:
            text = f"[{self.scope}] {text}"
        logger.warning(text)
        self.warnings.append(text)

    def child(self, scope: str) -> "Diagnostics":
        """Return a view that prefixes messages with *scope* but shares the warning list."""
        view = Diagnostics(scope)
        view.warnings = self.warnings
        return view

    def codes(self) -> List[str]:
        """Warning codes in the order they were recorded."""
        out = []
        for w in self.warnings:
            body = w.split("] ", 1)[-1]
            out.append(body.split(":", 1)[0])
        return out
