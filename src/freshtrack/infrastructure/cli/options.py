"""Options and converters shared by the CLI command modules."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from freshtrack.domain.model.product import Category, Location
from freshtrack.infrastructure.bootstrap import PRINCIPAL_ENV

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]

caller_option = click.option(
    "--caller",
    required=True,
    envvar=PRINCIPAL_ENV,
    help=f"Principal performing the change (or set {PRINCIPAL_ENV}).",
)

at_option = click.option(
    "--at",
    "at",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Evaluate at this UTC time instead of now.",
)

category_choice = click.Choice([c.value for c in Category], case_sensitive=False)
location_choice = click.Choice([loc.value for loc in Location], case_sensitive=False)


def to_timestamp(value: datetime) -> int:
    """Interpret a naive datetime as UTC and return Unix seconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def optional_timestamp(value: datetime | None) -> int | None:
    return None if value is None else to_timestamp(value)


def format_date(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, timezone.utc).strftime("%Y-%m-%d")


def parse_int_list(raw: str, label: str) -> list[int]:
    """Parse '10,20,5' into a list of integers."""
    values: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid {label} value '{part}'.")
    return values
