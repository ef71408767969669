"""Typer CLI wiring breach registry services."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from breach_registry.api import GatewayResponse
from breach_registry.domain import (
    KEY_PREFIX,
    AccountRecord,
    EmailIdentity,
    InvalidEmailError,
    PartitionKey,
)
from breach_registry.persistence import RepositoryError
from breach_registry.services import describe_update

from .deps import get_container

app = typer.Typer(help="Breach registry command-line interface")

T = TypeVar("T")


def _read_accounts_file(path: Path) -> list[str]:
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc
    return [line.strip() for line in lines if line.strip()]


def _read_store(call: Coroutine[Any, Any, T], target: str) -> T:
    try:
        return asyncio.run(call)
    except (RepositoryError, SQLAlchemyError, OSError) as exc:
        typer.echo(f"Error reading {target}: {exc}")
        raise typer.Exit(code=1) from exc


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    container = get_container()
    settings = container.settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo(f"Conditional writes:\t{settings.conditional_writes}")


@app.command("add-accounts")
def add_accounts(
    breach_name: str,
    emails: list[str] | None = typer.Argument(None, help="Email addresses to add"),
    file: Path | None = typer.Option(None, "--file", "-f", help="File with one email per line"),
) -> None:
    """Associate accounts with a breach."""

    accounts = list(emails or [])
    if file is not None:
        accounts.extend(_read_accounts_file(file))
    if not accounts:
        typer.echo("No accounts given")
        raise typer.Exit(code=1)

    container = get_container()
    try:
        count = asyncio.run(container.merger.apply(accounts, breach_name))
    except InvalidEmailError as exc:
        typer.echo(f"Invalid email: {exc}")
        raise typer.Exit(code=1) from exc
    except RepositoryError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(describe_update(count, breach_name))


@app.command("invoke")
def invoke(event_file: Path) -> None:
    """Run a JSON add-accounts event through the request handler."""

    try:
        event = json.loads(event_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        typer.echo(f"Cannot load event from {event_file}: {exc}")
        raise typer.Exit(code=1) from exc

    container = get_container()
    response: GatewayResponse = asyncio.run(container.add_accounts_handler.handle(event))
    typer.echo(json.dumps(response.to_dict(), indent=2))
    if not response.ok:
        raise typer.Exit(code=1)


@app.command("show-account")
def show_account(email: str) -> None:
    """Show the breaches recorded for one account."""

    try:
        identity = EmailIdentity.parse(email)
    except InvalidEmailError as exc:
        typer.echo(f"Invalid email: {exc}")
        raise typer.Exit(code=1) from exc

    container = get_container()
    record = _read_store(container.account_store.get(*identity.key), identity.account)
    if record is None:
        typer.echo(f"Account {identity.account} not found")
        raise typer.Exit(code=1)

    typer.echo(f"Account: {record.account}")
    typer.echo("Breaches: " + (", ".join(record.breaches) if record.breaches else "(none)"))


@app.command("list-domain")
def list_domain(domain: str) -> None:
    """List every recorded account for a domain."""

    container = get_container()
    partition_key = PartitionKey(f"{KEY_PREFIX}{domain}")
    records: list[AccountRecord] = list(
        _read_store(container.account_store.list_partition(partition_key), domain)
    )
    if not records:
        typer.echo(f"No accounts found for {domain}")
        return

    table = Table(title=f"Accounts in {domain}")
    table.add_column("Account")
    table.add_column("Breaches", justify="right")
    table.add_column("Names")
    for record in records:
        table.add_row(record.account, str(len(record.breaches)), ", ".join(record.breaches))
    Console(width=120).print(table)


__all__ = ["app"]
