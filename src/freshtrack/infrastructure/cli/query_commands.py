"""CLI commands for index lookups."""

from __future__ import annotations

from datetime import datetime

import click

from freshtrack.application.query_products import ProductQueryHandler
from freshtrack.domain.exceptions import DomainException
from freshtrack.infrastructure.bootstrap import registry_context
from freshtrack.infrastructure.cli.options import (
    at_option,
    category_choice,
    location_choice,
    optional_timestamp,
)


def _echo_ids(ids: list[int]) -> None:
    if not ids:
        click.echo("No matching products.")
        return
    for product_id in ids:
        click.echo(product_id)


@click.command("by-category")
@click.argument("category", type=category_choice)
def query_by_category(category: str) -> None:
    """List products in a category."""
    _echo_ids(ProductQueryHandler(registry_context()).by_category(category))


@click.command("by-manufacturer")
@click.argument("manufacturer")
def query_by_manufacturer(manufacturer: str) -> None:
    """List products from a manufacturer (exact name)."""
    _echo_ids(ProductQueryHandler(registry_context()).by_manufacturer(manufacturer))


@click.command("by-location")
@click.argument("location", type=location_choice)
def query_by_location(location: str) -> None:
    """List products currently at a supply-chain stage."""
    _echo_ids(ProductQueryHandler(registry_context()).by_location(location))


@click.command("expiring")
@click.option("--days", required=True, type=int, help="Window size in whole days.")
@at_option
def query_expiring(days: int, at: datetime | None) -> None:
    """List unexpired products expiring within a number of days."""
    try:
        ids = ProductQueryHandler(registry_context()).expiring_within(
            days, optional_timestamp(at)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_ids(ids)


@click.command("expired")
@at_option
def query_expired(at: datetime | None) -> None:
    """List products that have already expired."""
    _echo_ids(ProductQueryHandler(registry_context()).expired(optional_timestamp(at)))


@click.command("is-expired")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@at_option
def query_is_expired(product_id: int, at: datetime | None) -> None:
    """Report whether a product has expired."""
    try:
        expired = ProductQueryHandler(registry_context()).is_expired(
            product_id, optional_timestamp(at)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("expired" if expired else "not expired")
