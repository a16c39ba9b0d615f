"""Abstract repository for the AccessControl aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from freshtrack.domain.model.access_control import AccessControl


class RoleRepository(ABC):

    @abstractmethod
    def get(self) -> AccessControl:
        """Return the role table, uninitialized if nothing was saved yet."""

    @abstractmethod
    def save(self, access: AccessControl) -> None:
        """Persist the role table."""
