"""Aggregation of per-file purge outcomes.

Collects the outcomes of a run into counts, the summary line shown
at the end of a run, and the process exit status.
"""

from collections import Counter
from dataclasses import dataclass, field

from mlcp.library.models import OperationOutcome, OutcomeStatus

# Exit codes
EXIT_SUCCESS = 0
EXIT_PATH_NOT_FOUND = 255
# Failure counts above this are clamped, keeping them apart from EXIT_PATH_NOT_FOUND
MAX_FAILURE_EXIT = 254


def operation_label(purge: bool, backup_enabled: bool) -> str:
    """Operation tag describing a whole run."""
    if purge and backup_enabled:
        return OutcomeStatus.BACKED_UP.value
    if purge:
        return OutcomeStatus.PURGED.value
    return OutcomeStatus.SIMULATED.value


@dataclass(slots=True)
class PurgeReport:
    """Running totals for a purge run.

    Attributes:
        operation: Operation tag of the run (see operation_label).
        processed: Number of candidates processed so far.
        counts: Outcomes seen per status.
        failures: Failed outcomes, in processing order.
    """

    operation: str = OutcomeStatus.SIMULATED.value
    processed: int = 0
    counts: Counter[OutcomeStatus] = field(default_factory=Counter)
    failures: list[OperationOutcome] = field(default_factory=list)

    def record(self, outcome: OperationOutcome) -> None:
        """Add a single outcome to the totals."""
        self.processed += 1
        self.counts[outcome.status] += 1
        if outcome.failed:
            self.failures.append(outcome)

    @property
    def error_count(self) -> int:
        return len(self.failures)

    @property
    def success_count(self) -> int:
        return self.processed - self.error_count

    @property
    def exit_code(self) -> int:
        """Process exit status: 0, or the number of failed files (clamped)."""
        return min(self.error_count, MAX_FAILURE_EXIT)

    def summary(self) -> str:
        """One-line summary of the run."""
        if self.error_count == 0:
            return f"{self.processed} files successfully {self.operation}."
        return f"{self.error_count} errors out of {self.processed} files."
