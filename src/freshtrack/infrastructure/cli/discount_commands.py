"""CLI commands for the registry-wide discount."""

from __future__ import annotations

import click

from freshtrack.application.discount import (
    CancelDiscountHandler,
    SetDiscountHandler,
    ShowDiscountHandler,
)
from freshtrack.domain.exceptions import DomainException
from freshtrack.infrastructure.bootstrap import registry_context
from freshtrack.infrastructure.cli.options import caller_option


@click.command("set")
@caller_option
@click.option("--percentage", required=True, type=int, help="Discount between 1 and 99.")
def discount_set(caller: str, percentage: int) -> None:
    """Activate a discount (admin only). Applies on the next reprice."""
    handler = SetDiscountHandler(registry_context())

    try:
        discount = handler.handle(caller, percentage)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount set: {discount}")


@click.command("cancel")
@caller_option
def discount_cancel(caller: str) -> None:
    """Deactivate the discount (admin only)."""
    handler = CancelDiscountHandler(registry_context())

    try:
        handler.handle(caller)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Discount cancelled.")


@click.command("show")
def discount_show() -> None:
    """Show the current discount."""
    click.echo(f"Current discount: {ShowDiscountHandler(registry_context()).handle()}")
