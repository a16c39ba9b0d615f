"""Application service: registry initialization and role management.

Only admins grant or revoke roles. The owner named at initialization
is an admin for the lifetime of the registry.
"""

from __future__ import annotations

import logging

from freshtrack.application.context import RegistryContext
from freshtrack.application.dto import RoleTableDTO
from freshtrack.domain.model.access_control import Role

logger = logging.getLogger(__name__)


class InitializeRegistryHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, owner: str) -> None:
        with self._ctx.lock:
            access = self._ctx.roles.get()
            access.initialize(owner)
            self._ctx.roles.save(access)

        logger.info("Registry initialized with owner %s", access.owner)


class GrantRoleHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str, principal: str, role: Role | str) -> None:
        with self._ctx.lock:
            access = self._ctx.authorize(caller, Role.ADMIN)
            role = Role.parse(role)
            access.grant(principal, role)
            self._ctx.roles.save(access)

        logger.info("Granted %s to %s by %s", role.value, principal, caller)


class RevokeRoleHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str, principal: str, role: Role | str) -> None:
        with self._ctx.lock:
            access = self._ctx.authorize(caller, Role.ADMIN)
            role = Role.parse(role)
            access.remove_role(principal, role)
            self._ctx.roles.save(access)

        logger.info("Revoked %s from %s by %s", role.value, principal, caller)


class ShowRolesHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self) -> RoleTableDTO:
        with self._ctx.lock:
            access = self._ctx.roles.get()
            return RoleTableDTO(
                owner=access.owner,
                members={
                    role.value: sorted(access.members[role]) for role in Role
                },
            )
