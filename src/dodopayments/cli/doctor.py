"""Doctor and setup commands: configuration diagnostics and first-run setup."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from dodopayments.client import DodoPayments
from dodopayments.cli.ui_components import build_checks_table
from dodopayments.core.config import write_user_env_vars
from dodopayments.core.domain.environment import Environment
from dodopayments.core.errors import APIError

CheckRow = tuple[str, str, str]


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}...{secret[-4:]}"


def collect_checks(client: DodoPayments) -> list[CheckRow]:
    """Configuration checks plus one live request against the API."""

    rows: list[CheckRow] = []

    if client.bearer_token:
        rows.append(("API key", "OK", _mask(client.bearer_token)))
    else:
        rows.append(("API key", "MISSING", "Set DODO_PAYMENTS_API_KEY or run `dodopayments setup`"))
    rows.append(("Environment", "OK", client.environment.label()))
    rows.append(("Base URL", "OK", client.base_url))
    if client.webhook_key:
        rows.append(("Webhook key", "OK", _mask(client.webhook_key)))
    else:
        rows.append(("Webhook key", "OPTIONAL", "Needed only for webhooks.unwrap"))

    try:
        countries = client.misc.list_supported_countries()
    except APIError as exc:
        rows.append(("API connectivity", "FAIL", str(exc)))
    else:
        rows.append(("API connectivity", "OK", f"{len(countries)} supported countries"))
    return rows


def run_doctor(client: DodoPayments, console: Console) -> bool:
    """Print the checks table. Returns False when a check failed."""

    rows = collect_checks(client)
    console.print(build_checks_table(rows))
    return all(status != "FAIL" for _, status, _ in rows)


def run_setup(console: Console) -> Path:
    """Prompt for credentials and store them in the user config .env."""

    environment = typer.prompt(
        "Environment (live_mode/test_mode)",
        default=Environment.TEST_MODE.value,
        show_default=True,
    ).strip().lower()
    try:
        Environment(environment)
    except ValueError as exc:
        raise typer.BadParameter("environment must be live_mode or test_mode") from exc

    api_key = typer.prompt("API key", hide_input=True).strip()
    if not api_key:
        raise typer.BadParameter("an API key is required")
    webhook_key = typer.prompt("Webhook key (optional)", default="", show_default=False).strip()

    env_path = write_user_env_vars(
        {
            "DODO_PAYMENTS_API_KEY": api_key,
            "DODO_PAYMENTS_ENVIRONMENT": environment,
            "DODO_PAYMENTS_WEBHOOK_KEY": webhook_key or None,
        }
    )
    console.print(f"[green]Saved configuration to:[/green] {env_path}")
    return env_path
