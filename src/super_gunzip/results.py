"""
Per-file outcomes and their thread-safe aggregation into a run summary.
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class OutcomeStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    """Result of processing one job."""

    source_path: str
    status: OutcomeStatus
    error: Optional[Exception] = None
    output_path: Optional[str] = None
    skipped_reason: Optional[str] = None
    bytes_in: int = 0
    bytes_out: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


@dataclass
class Summary:
    """Counts for a finished run plus the list of failed paths."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    failures: List[Tuple[str, Exception]] = field(default_factory=list)
    bytes_in: int = 0
    bytes_out: int = 0
    elapsed_seconds: float = 0.0

    @property
    def exit_code(self) -> int:
        return 0 if self.failed == 0 else 1


class ResultAggregator:
    """
    Collects outcomes reported by concurrent workers.

    Every call to record() takes the same lock, so workers may report in any
    order without corrupting the counts. Recording the same path twice is an
    error.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._outcomes: Dict[str, Outcome] = {}

    def record(self, outcome: Outcome) -> int:
        """
        Add one outcome.

        Args:
            outcome: Outcome reported by a worker

        Returns:
            Number of outcomes recorded so far

        Raises:
            ValueError: If an outcome for this path was already recorded
        """
        with self._lock:
            if outcome.source_path in self._outcomes:
                raise ValueError(f"Outcome for '{outcome.source_path}' already recorded")
            self._outcomes[outcome.source_path] = outcome
            return len(self._outcomes)

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)

    def outcomes(self) -> List[Outcome]:
        """Return a snapshot of recorded outcomes ordered by path."""
        with self._lock:
            return [self._outcomes[path] for path in sorted(self._outcomes)]

    def finalize(self, elapsed_seconds: float = 0.0) -> Summary:
        """Build the Summary from everything recorded so far."""
        summary = Summary(elapsed_seconds=elapsed_seconds)
        for outcome in self.outcomes():
            summary.total += 1
            summary.bytes_in += outcome.bytes_in
            summary.bytes_out += outcome.bytes_out
            if outcome.succeeded:
                summary.succeeded += 1
                if outcome.skipped_reason:
                    summary.skipped += 1
            else:
                summary.failed += 1
                summary.failures.append((outcome.source_path, outcome.error))
        return summary
