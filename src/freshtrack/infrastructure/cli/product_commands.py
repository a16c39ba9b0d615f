"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json
from datetime import datetime

import click

from freshtrack.application.create_product import (
    CreateProductHandler,
    CreateProductsBatchHandler,
)
from freshtrack.application.dto import ProductDTO, ProductSpec
from freshtrack.application.show_product import ListProductsHandler, ShowProductHandler
from freshtrack.application.update_location import UpdateLocationHandler
from freshtrack.application.update_price import (
    UpdatePriceHandler,
    UpdatePricesBatchHandler,
)
from freshtrack.application.update_quantity import UpdateQuantityHandler
from freshtrack.domain.exceptions import DomainException
from freshtrack.domain.model.product import Category
from freshtrack.infrastructure.bootstrap import registry_context
from freshtrack.infrastructure.cli.options import (
    DATE_FORMATS,
    caller_option,
    category_choice,
    format_date,
    location_choice,
    parse_int_list,
    to_timestamp,
)


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}  (location={dto.location})")
    click.echo(f"Manufacturer: {dto.manufacturer}")
    click.echo(f"Category:     {dto.category}")
    click.echo(f"Made:         {format_date(dto.manufacture_date)}")
    expiry = format_date(dto.expiry_date)
    click.echo(f"Expires:      {expiry}{'  (EXPIRED)' if dto.is_expired else ''}")
    click.echo(f"Quantity:     {dto.quantity}")
    click.echo(f"Price:        {dto.price}")
    click.echo(f"Quality:      {'yes' if dto.is_quality_product else 'no'}")


def _parse_date(raw: str | int, field: str) -> int:
    """Accept Unix seconds as-is, or a date string in one of DATE_FORMATS."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str):
        raise click.BadParameter(f"Invalid {field} {raw!r}. Expected YYYY-MM-DD or Unix seconds.")
    for fmt in DATE_FORMATS:
        try:
            return to_timestamp(datetime.strptime(raw, fmt))
        except ValueError:
            continue
    raise click.BadParameter(f"Invalid {field} '{raw}'. Expected YYYY-MM-DD.")


def _spec_from_record(record: dict) -> ProductSpec:
    """Build a ProductSpec from one entry of an import file."""
    if not isinstance(record, dict):
        raise click.BadParameter(f"Product record must be a JSON object, got {record!r}.")
    try:
        return ProductSpec(
            id=record.get("id"),
            manufacturer=record["manufacturer"],
            name=record["name"],
            manufacture_date=_parse_date(record["manufacture_date"], "manufacture_date"),
            expiry_date=_parse_date(record["expiry_date"], "expiry_date"),
            category=Category(str(record["category"]).upper()),
            quantity=record["quantity"],
            price=record["price"],
            is_quality_product=record.get("is_quality_product", False),
        )
    except KeyError as exc:
        raise click.BadParameter(f"Missing field {exc} in product record.")
    except ValueError:
        raise click.BadParameter(f"Unknown category '{record.get('category')}'.")


@click.command("create")
@caller_option
@click.option("--id", "product_id", type=int, default=None, help="Token ID (default: next free).")
@click.option("--manufacturer", required=True, help="Manufacturer name.")
@click.option("--name", required=True, help="Product name.")
@click.option("--made", required=True, type=click.DateTime(formats=DATE_FORMATS), help="Manufacture date.")
@click.option("--expires", required=True, type=click.DateTime(formats=DATE_FORMATS), help="Expiry date.")
@click.option("--category", required=True, type=category_choice, help="Product category.")
@click.option("--quantity", required=True, type=int, help="Units produced.")
@click.option("--price", required=True, type=int, help="Initial price.")
@click.option("--quality/--no-quality", default=False, help="Mark as quality product.")
def product_create(
    caller: str,
    product_id: int | None,
    manufacturer: str,
    name: str,
    made: datetime,
    expires: datetime,
    category: str,
    quantity: int,
    price: int,
    quality: bool,
) -> None:
    """Register a new product at the manufacturer."""
    spec = ProductSpec(
        id=product_id,
        manufacturer=manufacturer,
        name=name,
        manufacture_date=to_timestamp(made),
        expiry_date=to_timestamp(expires),
        category=Category(category.upper()),
        quantity=quantity,
        price=price,
        is_quality_product=quality,
    )
    handler = CreateProductHandler(registry_context())

    try:
        dto = handler.handle(caller, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' created at {dto.location}")


@click.command("import")
@caller_option
@click.option("--file", "path", required=True, type=click.Path(exists=True, dir_okay=False), help="JSON list of products.")
def product_import(caller: str, path: str) -> None:
    """Register every product in a JSON file, or none of them."""
    with open(path, encoding="utf-8") as fh:
        try:
            records = json.load(fh)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"Invalid JSON in {path}: {exc}")
    if not isinstance(records, list):
        raise click.ClickException("Import file must contain a JSON list")

    specs = [_spec_from_record(record) for record in records]
    handler = CreateProductsBatchHandler(registry_context())

    try:
        dtos = handler.handle(caller, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Imported {len(dtos)} products: {', '.join(f'#{d.id}' for d in dtos)}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
def product_show(product_id: int) -> None:
    """Show details of a product."""
    handler = ShowProductHandler(registry_context())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("list")
def product_list() -> None:
    """List all products in creation order."""
    dtos = ListProductsHandler(registry_context()).handle()

    if not dtos:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Category':<15} {'Location':<13} "
        f"{'Qty':>6} {'Price':>7} {'Expires':>11}"
    )
    click.echo("-" * 84)
    for d in dtos:
        expiry = format_date(d.expiry_date) + ("*" if d.is_expired else "")
        click.echo(
            f"{d.id:<6} {d.name:<20} {d.category:<15} {d.location:<13} "
            f"{d.quantity:>6} {d.price:>7} {expiry:>11}"
        )


@click.command("move")
@caller_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--to", "location", required=True, type=location_choice, help="Next supply-chain stage.")
def product_move(caller: str, product_id: int, location: str) -> None:
    """Move a product forward along the supply chain."""
    handler = UpdateLocationHandler(registry_context())

    try:
        dto = handler.handle(caller, product_id, location)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} is now at {dto.location}")


@click.command("set-quantity")
@caller_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_set_quantity(caller: str, product_id: int, quantity: int) -> None:
    """Set a product's stock level (admin only)."""
    handler = UpdateQuantityHandler(registry_context())

    try:
        handler.handle(caller, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} quantity set to {quantity}")


@click.command("reprice")
@caller_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_reprice(caller: str, product_id: int) -> None:
    """Recompute a product's price from its remaining shelf life."""
    handler = UpdatePriceHandler(registry_context())

    try:
        price = handler.handle(caller, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {price}")


@click.command("reprice-all")
@caller_option
@click.option("--ids", default=None, help="Comma-separated IDs (default: every unexpired product).")
def product_reprice_all(caller: str, ids: str | None) -> None:
    """Reprice several products at once; any failure aborts the whole batch."""
    context = registry_context()
    if ids:
        product_ids = parse_int_list(ids, "product ID")
    else:
        product_ids = [
            d.id for d in ListProductsHandler(context).handle() if not d.is_expired
        ]

    if not product_ids:
        click.echo("No products to reprice.")
        return

    try:
        prices = UpdatePricesBatchHandler(context).handle(caller, product_ids)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for product_id, price in prices.items():
        click.echo(f"Product #{product_id} price updated to {price}")
