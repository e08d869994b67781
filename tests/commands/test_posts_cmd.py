"""Tests for the posts CLI commands (create, list, show)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from postrail.cli import cli
from postrail.services.result import Err, PersistenceFailed, Unexpected


@pytest.mark.usefixtures("_isolated_project")
class TestCreateCommand:
    def test_create(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["posts", "create", "Cool post", "Good"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "title: Cool post" in result.output

    def test_create_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "posts", "create", "Title", "Good"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["title"] == "Title"
        assert data["rating"] == "Good"
        assert "id" in data

    def test_create_uses_default_database(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["posts", "create", "Title", "Good"])
        assert (tmp_path / ".postrail" / "postrail.db").exists()

    def test_empty_title_is_unprocessable(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "posts", "create", "", "Good"])
        assert result.exit_code == 1
        assert json.loads(result.stderr) == {
            "message": "Unprocessable entity",
            "errors": {"title": ["must be a string"]},
        }

    def test_store_fault_exits_nonzero(self, cli_runner: CliRunner) -> None:
        with patch(
            "postrail.services.posts.PostsRepository.create",
            return_value=Err(PersistenceFailed()),
        ):
            result = cli_runner.invoke(cli, ["--json", "posts", "create", "Title", "Good"])
        assert result.exit_code == 1
        # 5xx responses are also logged to stderr, so match the body rather than parse it.
        assert '"code": "002"' in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["posts", "create", "--examples"])
        assert result.exit_code == 0
        assert "postrail posts create" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestListCommand:
    def test_list_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "posts", "list"])
        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_list_after_create(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["posts", "create", "First", "Good"])
        cli_runner.invoke(cli, ["posts", "create", "Second", "Bad"])
        result = cli_runner.invoke(cli, ["--json", "posts", "list"])
        titles = [post["title"] for post in json.loads(result.output)]
        assert titles == ["First", "Second"]

    def test_list_human(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["posts", "create", "First", "Good"])
        result = cli_runner.invoke(cli, ["posts", "list"])
        assert result.exit_code == 0
        assert "First" in result.output

    def test_unexpected_fault(self, cli_runner: CliRunner) -> None:
        with patch(
            "postrail.services.posts.PostsRepository.find_all",
            return_value=Err(Unexpected(RuntimeError())),
        ):
            result = cli_runner.invoke(cli, ["--json", "posts", "list"])
        assert result.exit_code == 1
        assert '"code": "001"' in result.stderr


@pytest.mark.usefixtures("_isolated_project")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner) -> None:
        created = json.loads(
            cli_runner.invoke(cli, ["--json", "posts", "create", "Title", "Good"]).output
        )
        result = cli_runner.invoke(cli, ["--json", "posts", "show", str(created["id"])])
        assert result.exit_code == 0
        assert json.loads(result.output) == created

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "posts", "show", "99"])
        assert result.exit_code == 1
        assert json.loads(result.stderr) == {"message": "Not found"}

    def test_show_missing_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["posts", "show", "99"])
        assert result.exit_code == 1
        assert "404 Not found" in result.stderr


@pytest.mark.usefixtures("_isolated_project")
class TestDatabaseOverride:
    def test_database_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        db = tmp_path / "custom.db"
        result = cli_runner.invoke(cli, ["--database", str(db), "posts", "create", "T", "R"])
        assert result.exit_code == 0
        assert db.exists()
