"""Tests for the command line interface."""

import json
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from github_exporter.cli import app
from github_exporter.config import Config, set_config
from github_exporter.exceptions import GitHubNotFoundError
from github_exporter.models.records import Commit, Export, Watch
from github_exporter.sdk import FetchMode

runner = CliRunner()

DATE = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

EXPORT = Export(
    commits=[
        Commit(repo="hello", sha="sha1", message="First", author="Octo", date=DATE),
        Commit(repo="hello", sha="sha2", message="Second", author="Octo", date=DATE),
    ],
    watch=[Watch(repo="octo/hello", action="started", date=DATE)],
)


@pytest.fixture(autouse=True)
def no_env_token(monkeypatch):
    """Keep tokens from the developer's environment out of the tests."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_EXPORTER_TOKEN", raising=False)
    set_config(Config(github_token=None))


@pytest.fixture
def mock_exporter():
    """Patch GitHubExporter so the CLI never touches the network."""
    with patch("github_exporter.cli.GitHubExporter") as MockExporter:
        instance = MockExporter.return_value
        instance.__aenter__.return_value = instance
        instance.fetch = AsyncMock(return_value=EXPORT)
        yield MockExporter


def export_name(kind: str, ext: str) -> str:
    return f"github-{kind}-export-{date.today().strftime('%Y%m%d')}.{ext}"


class TestCliErrors:
    def test_missing_token(self, mock_exporter):
        """Test that a missing token fails before any request."""
        result = runner.invoke(app, ["--format", "json"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "token" in result.output
        mock_exporter.assert_not_called()

    def test_unsupported_kind_fails_before_writing(self, tmp_path):
        """Test kind=bogus in repository mode: error, no output."""
        result = runner.invoke(
            app,
            ["--token", "ghp_test", "--kind", "bogus", "--output", str(tmp_path / "x.json")],
        )

        assert result.exit_code == 1
        assert "Error: unsupported kind: bogus" in result.output
        assert "Export completed" not in result.output
        assert list(tmp_path.iterdir()) == []

    def test_api_error(self, mock_exporter, tmp_path):
        mock_exporter.return_value.fetch.side_effect = GitHubNotFoundError("Resource not found: /user")

        result = runner.invoke(
            app,
            ["-t", "ghp_test", "-f", "json", "-o", str(tmp_path / "x.json")],
        )

        assert result.exit_code == 1
        assert "Error: Resource not found: /user" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_missing_output_directory(self, mock_exporter, tmp_path):
        result = runner.invoke(
            app,
            ["-t", "ghp_test", "-f", "json", "-o", str(tmp_path / "missing" / "x.json")],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (tmp_path / "missing").exists()


class TestCliOutput:
    def test_json_export(self, mock_exporter, tmp_path):
        result = runner.invoke(
            app,
            ["--token", "ghp_test", "--format", "json", "--output", str(tmp_path / "github-export.json")],
        )

        assert result.exit_code == 0, result.output
        target = tmp_path / export_name("commits", "json")
        data = json.loads(target.read_text(encoding="utf-8"))
        assert [c["sha"] for c in data["commits"]] == ["sha1", "sha2"]
        assert data["pull_requests"] == []
        assert f"Output written to {target}" in result.output
        mock_exporter.return_value.fetch.assert_awaited_once_with("commits", FetchMode.REPOS)

    def test_csv_export_events_mode(self, mock_exporter, tmp_path):
        result = runner.invoke(
            app,
            ["-t", "ghp_test", "-f", "csv", "-k", "watch", "-m", "events", "-o", f"{tmp_path}/"],
        )

        assert result.exit_code == 0, result.output
        lines = (tmp_path / export_name("watch", "csv")).read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Type,Repo,ID,Title,State,Author,Date"
        assert lines[1].startswith("Watch,octo/hello,,,,started,")
        mock_exporter.return_value.fetch.assert_awaited_once_with("watch", FetchMode.EVENTS)

    def test_stdout_table(self, mock_exporter):
        result = runner.invoke(app, ["--token", "ghp_test"])

        assert result.exit_code == 0, result.output
        assert "sha1" in result.output
        assert "Output written to stdout" in result.output

    def test_token_from_environment(self, mock_exporter, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_from_env")

        result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        config = mock_exporter.call_args.kwargs["config"]
        assert config.github_token == "ghp_from_env"

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "github-exporter version" in result.output
