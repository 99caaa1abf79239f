"""Rich display functions for purge runs.

Provides the file type listing, per-file outcome lines, the progress
bar used in non-verbose mode, and the end-of-run summary.
"""

from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn

from mlcp.library.catalog import ALBUM_ART_EXTENSIONS, ALBUM_ART_FILENAMES, catalog_groups
from mlcp.library.models import OperationOutcome, OutcomeStatus
from mlcp.library.report import PurgeReport
from mlcp.utils.formatting import console, print_success

_STATUS_STYLES: dict[OutcomeStatus, str] = {
    OutcomeStatus.SIMULATED: "simulated",
    OutcomeStatus.PURGED: "purge",
    OutcomeStatus.BACKED_UP: "backed_up",
    OutcomeStatus.FAILED: "error",
}


def print_types() -> None:
    """Print the file type catalogs.

    Types kept by default are shown in the keep color, types purged by
    default in the purge color.
    """
    for label, extensions, kept in catalog_groups():
        style = "keep" if kept else "purge"
        console.print(f"[{style}]{label}:[/] {', '.join(extensions)}", soft_wrap=True)

    console.print(
        f"[keep]Album art files:[/] {', '.join(ALBUM_ART_FILENAMES)} "
        f"[muted]({', '.join(ALBUM_ART_EXTENSIONS)})[/]",
        soft_wrap=True,
    )


def format_outcome(outcome: OperationOutcome) -> str:
    """Format an outcome as a single Rich markup line.

    Args:
        outcome: Outcome of processing one purge candidate.

    Returns:
        Markup of the form "[TAG] path", with the target for backups and
        the error message for failures.
    """
    style = _STATUS_STYLES[outcome.status]
    line = f"[{style}]{escape(f'[{outcome.tag}]')}[/] {escape(str(outcome.path))}"

    if outcome.status == OutcomeStatus.BACKED_UP and outcome.target is not None:
        line += f" [muted]->[/] {escape(str(outcome.target))}"
    elif outcome.failed and outcome.error:
        line += f" [muted]({escape(outcome.error)})[/]"

    return line


def print_outcome(outcome: OperationOutcome) -> None:
    """Print a single outcome line."""
    console.print(format_outcome(outcome), soft_wrap=True, highlight=False)


def create_progress() -> Progress:
    """Create the progress bar shown while files are processed."""
    return Progress(
        SpinnerColumn(),
        BarColumn(bar_width=20),
        MofNCompleteColumn(),
        TextColumn("{task.fields[filename]}", markup=False),
        console=console,
    )


def print_summary(report: PurgeReport) -> None:
    """Print the end-of-run summary line."""
    if report.error_count == 0:
        print_success(report.summary())
    else:
        console.print(f"[error]{report.summary()}[/]")
