"""CLI commands for inventory analytics."""

from __future__ import annotations

from datetime import datetime

import click

from freshtrack.application.analytics_report import AnalyticsHandler
from freshtrack.domain.exceptions import DomainException
from freshtrack.infrastructure.bootstrap import registry_context
from freshtrack.infrastructure.cli.options import (
    at_option,
    optional_timestamp,
    parse_int_list,
)


@click.command("average-price")
@at_option
def analytics_average_price(at: datetime | None) -> None:
    """Mean price of unexpired products."""
    try:
        value = AnalyticsHandler(registry_context()).average_price(optional_timestamp(at))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Average price: {value}")


@click.command("inventory-value")
@at_option
def analytics_inventory_value(at: datetime | None) -> None:
    """Total price x quantity of unexpired products."""
    try:
        value = AnalyticsHandler(registry_context()).total_inventory_value(
            optional_timestamp(at)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total inventory value: {value}")


@click.command("shelf-life")
def analytics_shelf_life() -> None:
    """Mean shelf life in days across all products."""
    try:
        days = AnalyticsHandler(registry_context()).average_shelf_life_days()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Average shelf life: {days} days")


@click.command("turnover")
@click.option("--initial", required=True, help="Initial quantities, comma-separated, in product order.")
@click.option("--final", "final_", required=True, help="Final quantities, comma-separated, in product order.")
@at_option
def analytics_turnover(initial: str, final_: str, at: datetime | None) -> None:
    """Percentage of valued initial stock sold over a window."""
    try:
        ratio = AnalyticsHandler(registry_context()).inventory_turnover(
            parse_int_list(initial, "initial quantity"),
            parse_int_list(final_, "final quantity"),
            optional_timestamp(at),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory turnover: {ratio:.4f}")
