"""Main CLI application entry point.

Defines the Typer application: validates the library and backup roots,
classifies the library, and purges, backs up or simulates the crud files.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from mlcp import __version__
from mlcp.cli import display
from mlcp.core.settings import SettingsError, get_settings, save_settings
from mlcp.library.classifier import classify
from mlcp.library.operator import PurgeOperator
from mlcp.library.report import EXIT_PATH_NOT_FOUND, PurgeReport, operation_label
from mlcp.library.scanner import (
    EnumerationError,
    LibraryScanner,
    PathNotFoundError,
    require_directory,
)
from mlcp.utils.formatting import err_console, print_error, print_success

app = typer.Typer(
    name="mlcp",
    help="Music Library Crud Purge - purge, or back up, crud files from a music library.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mlcp version {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    """Route mlcp log records to stderr through Rich."""
    logger = logging.getLogger("mlcp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


@app.command()
def main(
    library_path: Annotated[
        Path | None,
        typer.Argument(
            help="Root folder of the music library to purge. Sub-folders are processed "
            "recursively, so an artist or album folder works too.",
            show_default=False,
        ),
    ] = None,
    backup_path: Annotated[
        Path | None,
        typer.Argument(
            help="Root folder for backing up purged files. The library's folder structure "
            "is preserved, so files can be merged back by copying the backup root over "
            "the library root.",
            show_default=False,
        ),
    ] = None,
    purge: Annotated[
        bool,
        typer.Option(
            "--purge",
            "-p",
            help="Perform the actual purge. Without it nothing changes and the run is "
            "only simulated.",
        ),
    ] = False,
    art: Annotated[
        bool,
        typer.Option("--art", "-a", help="Purge folder-level album art."),
    ] = False,
    other_audio: Annotated[
        bool,
        typer.Option("--other-audio", "-o", help="Keep other (non-music) audio files."),
    ] = False,
    documents: Annotated[
        bool,
        typer.Option("--documents", "-d", help="Keep document/booklet files (e.g. .txt, .pdf)."),
    ] = False,
    list_types: Annotated[
        bool,
        typer.Option("--list-types", "-l", help="List music, audio and document file types."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print every file processed instead of a progress bar.",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show debug logging."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file (default: ~/.config/mlcp/settings.toml)."),
    ] = None,
    save_defaults: Annotated[
        bool,
        typer.Option(
            "--save-defaults",
            help="Store --art, --other-audio, --documents and --verbose as defaults and exit.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Purge, or back up, "crud" files from a music library.

    Crud files are files that aren't one of the types designated to keep.
    By default all non-music files are removed, including document/booklet
    files, but folder-level album art is preserved.

    Unless [bold]--purge[/bold] is given NO changes are made to the library.
    """
    if list_types:
        display.print_types()
        raise typer.Exit()

    try:
        settings = get_settings(config_path, missing_ok=save_defaults).merged(
            keep_other_audio=other_audio,
            keep_documents=documents,
            delete_art=art,
            verbose=verbose,
        )
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if save_defaults:
        try:
            saved = save_settings(settings, config_path)
        except SettingsError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_success(f"Defaults saved to {saved}")
        raise typer.Exit()

    if library_path is None:
        raise typer.BadParameter("Library path is required.", param_hint="LIBRARY_PATH")

    try:
        library_root = require_directory(library_path, "Library path")
        backup_root = (
            require_directory(backup_path, "Backup path") if backup_path is not None else None
        )
    except PathNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_PATH_NOT_FOUND) from e

    _configure_logging(debug)

    try:
        entries = LibraryScanner(library_root).scan()
    except EnumerationError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_PATH_NOT_FOUND) from e

    candidates = classify(entries, settings.to_policy())

    operator = PurgeOperator(library_root, backup_root, purge=purge)
    report = PurgeReport(operation=operation_label(purge, backup_root is not None))

    if settings.verbose:
        for outcome in operator.process_all(candidates):
            report.record(outcome)
            display.print_outcome(outcome)
    else:
        with display.create_progress() as progress:
            task = progress.add_task("purge", total=len(candidates), filename="")
            for candidate in candidates:
                report.record(operator.process(candidate))
                progress.update(task, advance=1, filename=candidate.name)

    display.print_summary(report)
    raise typer.Exit(code=report.exit_code)


if __name__ == "__main__":
    app()
