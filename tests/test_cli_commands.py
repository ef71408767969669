from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from breach_registry.cli.app import app
from breach_registry.cli.deps import reset_container


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    db_url = f"sqlite+aiosqlite:///{tmp_path/'cli.db'}"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BREACH_DATABASE_URL", db_url)
    monkeypatch.setenv("BREACH_ENV", "test")
    monkeypatch.setenv("BREACH_LOG_LEVEL", "ERROR")
    reset_container()
    yield
    reset_container()


def test_cli_add_and_show_account() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["add-accounts", "BigLeak", "alice@example.com", "bob@example.org"])
    assert result.exit_code == 0
    assert "Successfully added/updated 2 accounts to the BigLeak breach." in result.stdout

    runner.invoke(app, ["add-accounts", "OtherLeak", "alice@example.com"])
    show = runner.invoke(app, ["show-account", "alice@example.com"])
    assert show.exit_code == 0
    assert "Breaches: BigLeak, OtherLeak" in show.stdout


def test_cli_add_accounts_from_file(tmp_path: Path) -> None:
    accounts_file = tmp_path / "accounts.txt"
    accounts_file.write_text("alice@example.com\n\n  carol@example.com  \n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["add-accounts", "LeakA", "--file", str(accounts_file)])

    assert result.exit_code == 0
    assert "added/updated 2 accounts" in result.stdout


def test_cli_add_accounts_rejects_invalid_email() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["add-accounts", "BigLeak", "alice@example.com", "not-an-email"])
    assert result.exit_code == 1
    assert "Invalid email: not a valid email address: not-an-email" in result.stdout

    show = runner.invoke(app, ["show-account", "alice@example.com"])
    assert show.exit_code == 1
    assert "not found" in show.stdout


def test_cli_add_accounts_requires_accounts() -> None:
    result = CliRunner().invoke(app, ["add-accounts", "BigLeak"])
    assert result.exit_code == 1
    assert "No accounts given" in result.stdout


def test_cli_invoke_event(tmp_path: Path) -> None:
    event_file = tmp_path / "event.json"
    event_file.write_text(
        json.dumps({"accounts": ["alice@example.com"], "pathParameters": {"breachName": "LeakA"}}),
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["invoke", str(event_file)])

    assert result.exit_code == 0
    response = json.loads(result.stdout)
    assert response["statusCode"] == 200
    assert json.loads(response["body"])["updated"] == 1


def test_cli_invoke_reports_failure(tmp_path: Path) -> None:
    event_file = tmp_path / "event.json"
    event_file.write_text(
        json.dumps({"accounts": ["bad"], "pathParameters": {"breachName": "LeakA"}}),
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, ["invoke", str(event_file)])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["statusCode"] == 400


def test_cli_list_domain() -> None:
    runner = CliRunner()
    runner.invoke(app, ["add-accounts", "LeakA", "zed@example.com", "amy@example.com"])
    runner.invoke(app, ["add-accounts", "LeakB", "amy@example.com", "bob@other.org"])

    result = runner.invoke(app, ["list-domain", "example.com"])

    assert result.exit_code == 0
    assert "amy@example.com" in result.stdout
    assert "zed@example.com" in result.stdout
    assert "bob@other.org" not in result.stdout

    empty = runner.invoke(app, ["list-domain", "missing.net"])
    assert "No accounts found for missing.net" in empty.stdout


def test_cli_show_settings() -> None:
    result = CliRunner().invoke(app, ["show-settings"])
    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout
    assert "Conditional writes:\tFalse" in result.stdout


def test_cli_reads_dotenv_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BREACH_ENV")
    (tmp_path / ".env").write_text("BREACH_ENV=from-dotenv\n", encoding="utf-8")
    reset_container()

    result = CliRunner().invoke(app, ["show-settings"])

    assert "Environment:\tfrom-dotenv" in result.stdout


@pytest.mark.parametrize(
    ("args", "target"),
    [
        (["show-account", "alice@example.com"], "alice@example.com"),
        (["list-domain", "example.com"], "example.com"),
    ],
)
def test_cli_reports_unreadable_database(tmp_path: Path, args: list[str], target: str) -> None:
    (tmp_path / "cli.db").write_bytes(b"this is not a sqlite database file " * 8)

    result = CliRunner().invoke(app, args)

    assert result.exit_code == 1
    assert f"Error reading {target}:" in result.stdout
    assert result.exception is None or isinstance(result.exception, SystemExit)
