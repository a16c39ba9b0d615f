"""CLI commands for registry setup and role management."""

from __future__ import annotations

import click

from freshtrack.application.manage_roles import (
    GrantRoleHandler,
    InitializeRegistryHandler,
    RevokeRoleHandler,
    ShowRolesHandler,
)
from freshtrack.domain.exceptions import DomainException
from freshtrack.domain.model.access_control import Role
from freshtrack.infrastructure.bootstrap import registry_context
from freshtrack.infrastructure.cli.options import caller_option

role_choice = click.Choice([r.value for r in Role], case_sensitive=False)


@click.command("init")
@click.option("--owner", required=True, help="Principal that owns the registry.")
def registry_init(owner: str) -> None:
    """Initialize the registry with its owner (once only)."""
    handler = InitializeRegistryHandler(registry_context())

    try:
        handler.handle(owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Registry initialized, owner is '{owner}'")


@click.command("grant")
@caller_option
@click.option("--principal", required=True, help="Principal receiving the role.")
@click.option("--role", required=True, type=role_choice, help="Role to grant.")
def registry_grant(caller: str, principal: str, role: str) -> None:
    """Grant a role to a principal (admin only)."""
    handler = GrantRoleHandler(registry_context())

    try:
        handler.handle(caller, principal, role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Granted {role.upper()} to '{principal}'")


@click.command("revoke")
@caller_option
@click.option("--principal", required=True, help="Principal losing the role.")
@click.option("--role", required=True, type=role_choice, help="Role to revoke.")
def registry_revoke(caller: str, principal: str, role: str) -> None:
    """Revoke a role from a principal (admin only)."""
    handler = RevokeRoleHandler(registry_context())

    try:
        handler.handle(caller, principal, role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Revoked {role.upper()} from '{principal}'")


@click.command("roles")
def registry_roles() -> None:
    """Show the owner and every role assignment."""
    table = ShowRolesHandler(registry_context()).handle()

    if table.owner is None:
        click.echo("Registry is not initialized.")
        return

    click.echo(f"Owner: {table.owner}")
    for role_name, principals in table.members.items():
        click.echo(f"  {role_name:<13} {', '.join(principals) or '-'}")
