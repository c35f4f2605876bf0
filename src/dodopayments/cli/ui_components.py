"""Rich building blocks for the CLI.

Commands assemble data; the tables and panels live here so the commands stay
free of presentation details.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from enum import Enum
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dodopayments.core.domain.base import SdkModel
from dodopayments.version import __version__

# Resource name -> (column header, dotted attribute path) pairs.
LIST_COLUMNS: dict[str, list[tuple[str, str]]] = {
    "products": [
        ("ID", "product_id"),
        ("Name", "name"),
        ("Price", "price"),
        ("Currency", "currency"),
        ("Recurring", "is_recurring"),
    ],
    "payments": [
        ("ID", "payment_id"),
        ("Status", "status"),
        ("Amount", "total_amount"),
        ("Currency", "currency"),
        ("Customer", "customer.email"),
        ("Created", "created_at"),
    ],
    "subscriptions": [
        ("ID", "subscription_id"),
        ("Status", "status"),
        ("Product", "product_id"),
        ("Customer", "customer.email"),
        ("Next billing", "next_billing_date"),
    ],
    "customers": [
        ("ID", "customer_id"),
        ("Name", "name"),
        ("Email", "email"),
        ("Created", "created_at"),
    ],
    "discounts": [
        ("ID", "discount_id"),
        ("Code", "code"),
        ("Type", "type"),
        ("Amount", "amount"),
        ("Used", "times_used"),
    ],
    "payouts": [
        ("ID", "payout_id"),
        ("Status", "status"),
        ("Amount", "amount"),
        ("Currency", "currency"),
        ("Created", "created_at"),
    ],
}


def print_banner(console: Console, environment_label: str) -> None:
    title = Text(f"DodoPayments CLI {__version__}", style="bold cyan")
    subtitle = Text(environment_label, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _resolve(item: Any, path: str) -> Any:
    value = item
    for part in path.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def build_list_table(resource: str, items: Iterable[SdkModel]) -> Table:
    """Table of one page of `resource` items using the columns in `LIST_COLUMNS`."""

    columns = LIST_COLUMNS[resource]
    table = Table(title=resource.capitalize())
    for index, (header, _) in enumerate(columns):
        table.add_column(header, style="cyan" if index == 0 else "white", no_wrap=index == 0)
    for item in items:
        table.add_row(*(format_cell(_resolve(item, path)) for _, path in columns))
    return table


def build_checks_table(rows: Sequence[tuple[str, str, str]]) -> Table:
    table = Table(title="DodoPayments Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for check, status, details in rows:
        style = {"OK": "green", "FAIL": "red"}.get(status, "yellow")
        table.add_row(check, f"[{style}]{status}[/{style}]", details)
    return table
