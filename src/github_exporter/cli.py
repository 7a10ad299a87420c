"""CLI interface for GitHub Exporter."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from github_exporter import __version__
from github_exporter.config import get_config
from github_exporter.exceptions import ConfigurationError
from github_exporter.models.records import Export
from github_exporter.output.console import Console as OutputConsole
from github_exporter.output.csv_writer import write_csv
from github_exporter.output.json_writer import write_json
from github_exporter.output.paths import OutputFormat, resolve_output_path
from github_exporter.sdk import FetchMode, GitHubExporter

app = typer.Typer(
    name="github-exporter",
    help="Export your GitHub activity to a file",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-exporter version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def export(
    output: str = typer.Option(
        "github-export.json",
        "--output",
        "-o",
        help="Output file path; the export is written to its directory",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        "-t",
        envvar="GITHUB_TOKEN",
        help="GitHub API access token",
        show_default=False,
    ),
    fmt: str = typer.Option(
        "",
        "--format",
        "-f",
        help="Output format (json, csv); anything else prints a table",
    ),
    kind: str = typer.Option(
        "commits",
        "--kind",
        "-k",
        help="Kind of data to export (commits, pull_requests, issues, releases, watch)",
    ),
    mode: str = typer.Option(
        "",
        "--mode",
        "-m",
        help='Set to "events" to use the GitHub events API',
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Export your GitHub activity.

    Examples:
        github-exporter --token $GITHUB_TOKEN --kind releases --format csv
        github-exporter -t $GITHUB_TOKEN -m events -k watch
    """
    configure_logging(verbose)
    output_console = OutputConsole(console)

    try:
        target = asyncio.run(
            _run_export(
                token=token,
                output=output,
                output_format=OutputFormat.parse(fmt),
                kind=kind,
                mode=FetchMode.parse(mode),
                output_console=output_console,
            )
        )
    except KeyboardInterrupt:
        output_console.print_error("Export cancelled")
        raise typer.Exit(1)
    except Exception as e:
        output_console.print_error(str(e))
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    output_console.print_success(
        f"Export completed successfully. Output written to {target or 'stdout'}"
    )


async def _run_export(
    token: Optional[str],
    output: str,
    output_format: OutputFormat,
    kind: str,
    mode: FetchMode,
    output_console: OutputConsole,
) -> Optional[Path]:
    """Fetch the export and write it. Returns the file written, or None for stdout."""
    config = get_config().with_token(token)
    if not config.is_authenticated:
        raise ConfigurationError(
            "A GitHub token is required. Pass --token or set GITHUB_TOKEN."
        )

    async with GitHubExporter(config=config) as exporter:
        data = await exporter.fetch(kind, mode)

    target = resolve_output_path(output, kind, output_format)
    write_output(data, kind, output_format, target, output_console)
    return target


def write_output(
    data: Export,
    kind: str,
    output_format: OutputFormat,
    target: Optional[Path],
    output_console: OutputConsole,
) -> None:
    """Hand the export to the writer for ``output_format``."""
    if output_format is OutputFormat.JSON:
        write_json(data, target)
    elif output_format is OutputFormat.CSV:
        write_csv(data, target, kind)
    else:
        output_console.print_records(data, kind)


if __name__ == "__main__":
    app()
