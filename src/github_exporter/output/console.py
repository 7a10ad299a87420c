"""Rich console output: the terminal table and status lines."""

from typing import Callable, Optional

from rich import box
from rich.console import Console as RichConsole
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from github_exporter.models.records import (
    Commit,
    Export,
    ExportKind,
    Issue,
    PullRequest,
    Record,
    Release,
    Watch,
)

# Per-kind column headers and the row builder for each record
TableLayout = tuple[list[str], Callable[[Record], list[str]]]


def _commit_row(c: Commit) -> list[str]:
    return [str(c.date), c.repo, c.sha, c.author, c.message]


def _numbered_row(r: PullRequest | Issue) -> list[str]:
    return [str(r.date), r.repo, str(r.number), r.title, r.state, r.author]


def _release_row(r: Release) -> list[str]:
    return [str(r.date), r.repo, r.tag_name, r.name, r.author]


def _watch_row(w: Watch) -> list[str]:
    return [str(w.date), w.repo, w.action]


# Layout width used to measure a table at its unwrapped size
UNBOUNDED_WIDTH = 10_000

TABLE_LAYOUTS: dict[ExportKind, TableLayout] = {
    ExportKind.COMMITS: (["Date", "Repo", "SHA", "Author", "Message"], _commit_row),
    ExportKind.PULL_REQUESTS: (
        ["Date", "Repo", "Number", "Title", "State", "Author"],
        _numbered_row,
    ),
    ExportKind.ISSUES: (
        ["Date", "Repo", "Number", "Title", "State", "Author"],
        _numbered_row,
    ),
    ExportKind.RELEASES: (["Date", "Repo", "Tag", "Name", "Author"], _release_row),
    ExportKind.WATCH: (["Date", "Repo", "Action"], _watch_row),
}


class Console:
    """Wrapper for rich console output."""

    def __init__(self, console: Optional[RichConsole] = None):
        self.console = console or RichConsole()

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(Text.assemble(("Error:", "red"), f" {message}"), soft_wrap=True)

    def print_success(self, message: str):
        """Print success message."""
        self.console.print(Text(message, style="green"), soft_wrap=True)

    def build_table(self, export: Export, kind: str) -> Optional[Table]:
        """Build the table for ``kind``, or None for an unknown kind."""
        export_kind = ExportKind.parse(kind)
        if export_kind is None:
            return None

        columns, to_row = TABLE_LAYOUTS[export_kind]
        table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
        for column in columns:
            table.add_column(column, no_wrap=True, overflow="ignore")

        for record in export.records(kind):
            table.add_row(*(Text(value) for value in to_row(record)))

        return table

    def _console_for(self, table: Table) -> RichConsole:
        """Console wide enough to print every row of ``table`` on one line."""
        natural = Measurement.get(
            self.console,
            self.console.options.update_width(UNBOUNDED_WIDTH),
            table,
        ).maximum
        if natural <= self.console.width:
            return self.console
        return RichConsole(
            file=self.console.file,
            width=natural,
            color_system=self.console.color_system,
            force_terminal=self.console.is_terminal,
        )

    def print_records(self, export: Export, kind: str) -> None:
        """Print the collection matching ``kind`` as an aligned table.

        Each record takes exactly one line, however narrow the terminal.
        Nothing is printed for an unknown kind.
        """
        table = self.build_table(export, kind)
        if table is not None:
            self._console_for(table).print(table, crop=False)
