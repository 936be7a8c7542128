"""
CLI for unstable book generation.

Usage:
    unstable-book-gen SRC DEST
    unstable-book-gen SRC DEST --config bookgen.yaml
    unstable-book-gen SRC DEST --log-level DEBUG --log-format json
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unstable_book_gen import __version__
from unstable_book_gen.config import BookGenSettings, get_settings
from unstable_book_gen.errors import BookGenError
from unstable_book_gen.logging import configure_logging, get_logger
from unstable_book_gen.orchestrator import GenerationReport, UnstableBookGenerator

console = Console()
err_console = Console(stderr=True)

log = get_logger(__name__)


def _print_report(report: GenerationReport) -> None:
    table = Table(title="Generated stubs")
    table.add_column("Section", style="cyan")
    table.add_column("Stubs", justify="right")

    for section, paths in report.stubs.items():
        table.add_row(section, str(len(paths)))

    console.print(table)
    console.print(f"[bold]Mirrored files:[/bold] {report.mirrored_files}")
    console.print(f"[bold]Summary:[/bold] {report.summary_path}")


@click.command()
@click.version_option(version=__version__)
@click.argument("src", type=click.Path(path_type=Path))
@click.argument("dest", type=click.Path(path_type=Path))
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML settings file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: BOOKGEN_LOG_LEVEL or INFO).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    help="Log output format.",
)
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors.")
def cli(
    src: Path,
    dest: Path,
    config_path: Path | None,
    log_level: str | None,
    log_format: str | None,
    quiet: bool,
):
    """Generate stub pages and SUMMARY.md for the unstable book.

    SRC is the compiler source tree, DEST the output directory; the book is
    written to DEST/src.
    """
    try:
        settings = BookGenSettings.from_yaml(config_path) if config_path else get_settings()
    except BookGenError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    if quiet:
        log_level = "WARNING"
    configure_logging(
        level=log_level or settings.log_level,
        format=log_format or settings.log_format,
        force=True,
    )

    try:
        report = UnstableBookGenerator(src, dest, settings).run()
    except BookGenError as e:
        log.error("generation.failed", **e.to_dict())
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    if not quiet:
        _print_report(report)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
