import logging

import click

from freshtrack.infrastructure.cli.analytics_commands import (
    analytics_average_price,
    analytics_inventory_value,
    analytics_shelf_life,
    analytics_turnover,
)
from freshtrack.infrastructure.cli.discount_commands import (
    discount_cancel,
    discount_set,
    discount_show,
)
from freshtrack.infrastructure.cli.product_commands import (
    product_create,
    product_import,
    product_list,
    product_move,
    product_reprice,
    product_reprice_all,
    product_set_quantity,
    product_show,
)
from freshtrack.infrastructure.cli.query_commands import (
    query_by_category,
    query_by_location,
    query_by_manufacturer,
    query_expired,
    query_expiring,
    query_is_expired,
)
from freshtrack.infrastructure.cli.registry_commands import (
    registry_grant,
    registry_init,
    registry_revoke,
    registry_roles,
)


@click.group()
@click.option("-v", "--verbose", count=True, help="Log registry activity (-vv for debug).")
def cli(verbose: int) -> None:
    """FreshTrack: perishable goods registry"""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.group()
def registry() -> None:
    """Initialize the registry and manage roles."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def discount() -> None:
    """Manage the registry-wide discount."""


@cli.group()
def query() -> None:
    """Look up products by category, manufacturer or expiry."""


@cli.group()
def analytics() -> None:
    """Inventory aggregates."""


# Register subcommands
registry.add_command(registry_init)
registry.add_command(registry_grant)
registry.add_command(registry_revoke)
registry.add_command(registry_roles)
product.add_command(product_create)
product.add_command(product_import)
product.add_command(product_show)
product.add_command(product_list)
product.add_command(product_move)
product.add_command(product_set_quantity)
product.add_command(product_reprice)
product.add_command(product_reprice_all)
discount.add_command(discount_set)
discount.add_command(discount_cancel)
discount.add_command(discount_show)
query.add_command(query_by_category)
query.add_command(query_by_manufacturer)
query.add_command(query_by_location)
query.add_command(query_expiring)
query.add_command(query_expired)
query.add_command(query_is_expired)
analytics.add_command(analytics_average_price)
analytics.add_command(analytics_inventory_value)
analytics.add_command(analytics_shelf_life)
analytics.add_command(analytics_turnover)
