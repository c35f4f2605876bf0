"""`dodopayments` command line interface."""

from __future__ import annotations

import sys
from enum import Enum

import typer
from rich.console import Console

from dodopayments.client import DodoPayments
from dodopayments.cli import doctor as doctor_cmd
from dodopayments.cli.ui_components import build_list_table, print_banner
from dodopayments.core.config import ClientSettings
from dodopayments.core.errors import APIError

app = typer.Typer(
    no_args_is_help=True,
    help="DodoPayments command line: diagnostics, setup and quick listings.",
)

_console = Console()


class ListableResource(str, Enum):
    PRODUCTS = "products"
    PAYMENTS = "payments"
    SUBSCRIPTIONS = "subscriptions"
    CUSTOMERS = "customers"
    DISCOUNTS = "discounts"
    PAYOUTS = "payouts"


def make_client() -> DodoPayments:
    """Client configured from the environment and the user .env."""

    return DodoPayments(settings=ClientSettings())


@app.command()
def doctor() -> None:
    """Check configuration and connectivity."""

    with make_client() as client:
        print_banner(_console, client.environment.label())
        healthy = doctor_cmd.run_doctor(client, _console)
    if not healthy:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Store API key, environment and webhook key in the user config .env."""

    doctor_cmd.run_setup(_console)


@app.command(name="list")
def list_resource(
    resource: ListableResource = typer.Argument(..., help="What to list."),
    page_size: int = typer.Option(10, "--page-size", min=1, max=100, help="Items to fetch."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
) -> None:
    """Show the first page of a resource."""

    with make_client() as client:
        service = getattr(client, resource.value)
        try:
            page = service.list(page_size=page_size)
        except APIError as exc:
            _console.print(f"[red]Request failed:[/red] {exc}")
            raise typer.Exit(code=1) from exc

    items = page.items
    if as_json:
        _console.print_json(data=[item.to_wire() for item in items])
        return
    if not items:
        _console.print(f"[yellow]No {resource.value} found.[/yellow]")
        return
    _console.print(build_list_table(resource.value, items))


@app.command()
def countries() -> None:
    """Print the country codes checkout supports."""

    with make_client() as client:
        try:
            codes = client.misc.list_supported_countries()
        except APIError as exc:
            _console.print(f"[red]Request failed:[/red] {exc}")
            raise typer.Exit(code=1) from exc
    _console.print(" ".join(code.value for code in codes))


def run() -> None:
    # UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
