"""JSON-file-backed implementation of RoleRepository."""

from __future__ import annotations

import json
from pathlib import Path

from freshtrack.domain.model.access_control import AccessControl, Role
from freshtrack.domain.repository.role_repository import RoleRepository


class JsonRoleRepository(RoleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- RoleRepository interface ---------------------------------------------

    def get(self) -> AccessControl:
        return self._to_domain(self._load_raw())

    def save(self, access: AccessControl) -> None:
        self._persist_raw(self._to_raw(access))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(access: AccessControl) -> dict:
        return {
            "owner": access.owner,
            "members": {
                role.value: sorted(access.members[role]) for role in Role
            },
        }

    @staticmethod
    def _to_domain(raw: dict) -> AccessControl:
        access = AccessControl(owner=raw.get("owner"))
        for role_name, principals in raw.get("members", {}).items():
            access.members[Role(role_name)].update(principals)
        return access

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, record: dict) -> None:
        self._file_path.write_text(
            json.dumps(record, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw(self._to_raw(AccessControl()))
