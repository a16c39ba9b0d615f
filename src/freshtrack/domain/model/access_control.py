"""AccessControl aggregate: who may do what in the registry.

The owner is fixed once at initialization and is always an admin.
Admin is a superset capability: every operational role check passes
for an admin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from freshtrack.domain.exceptions import (
    AlreadyInitializedError,
    InvalidArgumentError,
    UnauthorizedError,
)


class Role(Enum):
    ADMIN = "ADMIN"
    MANUFACTURER = "MANUFACTURER"
    DISTRIBUTOR = "DISTRIBUTOR"
    RETAILER = "RETAILER"

    @classmethod
    def parse(cls, value: Role | str) -> Role:
        """Resolve a role selector, rejecting anything outside the four kinds."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Unknown role: {value!r}")
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown role: {value!r}") from None


def _empty_memberships() -> dict[Role, set[str]]:
    return {role: set() for role in Role}


@dataclass
class AccessControl:
    """Role assignments for one registry.

    ``members`` maps each role kind to the principals explicitly holding it.
    """

    owner: str | None = None
    members: dict[Role, set[str]] = field(default_factory=_empty_memberships)

    # --- Lifecycle ------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self.owner is not None

    def initialize(self, owner: str) -> None:
        if self.owner is not None:
            raise AlreadyInitializedError(
                f"Registry already initialized with owner '{self.owner}'"
            )
        self.owner = self._require_principal(owner)

    # --- Capability checks ----------------------------------------------------

    def is_admin(self, principal: str | None) -> bool:
        principal = self._normalize(principal)
        if not principal:
            return False
        return principal == self.owner or principal in self.members[Role.ADMIN]

    def has_role(self, principal: str | None, role: Role) -> bool:
        if self.is_admin(principal):
            return True
        principal = self._normalize(principal)
        return bool(principal) and role is not Role.ADMIN and principal in self.members[role]

    def is_manufacturer(self, principal: str | None) -> bool:
        return self.has_role(principal, Role.MANUFACTURER)

    def is_distributor(self, principal: str | None) -> bool:
        return self.has_role(principal, Role.DISTRIBUTOR)

    def is_retailer(self, principal: str | None) -> bool:
        return self.has_role(principal, Role.RETAILER)

    def is_participant(self, principal: str | None) -> bool:
        """True if the principal holds any role at all."""
        return any(self.has_role(principal, role) for role in Role)

    def require(self, principal: str | None, role: Role) -> None:
        if not self.has_role(principal, role):
            raise UnauthorizedError(
                f"Principal '{principal}' lacks the {role.value} role"
            )

    def require_participant(self, principal: str | None) -> None:
        if not self.is_participant(principal):
            raise UnauthorizedError(
                f"Principal '{principal}' holds no registry role"
            )

    def roles_of(self, principal: str) -> list[Role]:
        """Roles the principal holds explicitly (or implicitly, for the owner)."""
        principal = self._normalize(principal)
        held = [role for role in Role if principal in self.members[role]]
        if principal == self.owner and Role.ADMIN not in held:
            held.insert(0, Role.ADMIN)
        return held

    # --- Mutations ------------------------------------------------------------

    def grant(self, principal: str, role: Role | str) -> None:
        role = Role.parse(role)
        self.members[role].add(self._require_principal(principal))

    def add_admin(self, principal: str) -> None:
        self.grant(principal, Role.ADMIN)

    def add_manufacturer(self, principal: str) -> None:
        self.grant(principal, Role.MANUFACTURER)

    def add_distributor(self, principal: str) -> None:
        self.grant(principal, Role.DISTRIBUTOR)

    def add_retailer(self, principal: str) -> None:
        self.grant(principal, Role.RETAILER)

    def remove_role(self, principal: str, role: Role | str) -> None:
        """Revoke an explicit membership.

        The owner's implicit admin status is not a membership and
        survives this call.
        """
        role = Role.parse(role)
        self.members[role].discard(self._require_principal(principal))

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _require_principal(principal: str | None) -> str:
        if not isinstance(principal, str) or not principal.strip():
            raise InvalidArgumentError("Principal identity is required")
        return principal.strip()

    @staticmethod
    def _normalize(principal: str | None) -> str | None:
        # Stored identities are stripped.
        return principal.strip() if isinstance(principal, str) else None
