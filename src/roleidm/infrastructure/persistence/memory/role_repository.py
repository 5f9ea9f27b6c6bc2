"""In-memory role repository implementation."""

from collections.abc import Iterable

from roleidm.application.dto import StoredRole
from roleidm.domain.exceptions import DuplicateEntity, EntityNotFound


class MemoryRoleStore:
    """Committed role records, keyed by name.

    Records are immutable, so units of work can stage changes on a shallow
    copy of the mapping.
    """

    def __init__(self, seed_roles: Iterable[str] = ()) -> None:
        self.roles: dict[str, StoredRole] = {
            name: StoredRole(name=name) for name in seed_roles
        }

    def apply(self, staged: dict[str, StoredRole], touched: set[str]) -> None:
        """Publish staged records for the touched names only."""
        roles = dict(self.roles)
        for name in touched:
            if name in staged:
                roles[name] = staged[name]
            else:
                roles.pop(name, None)
        self.roles = roles


class MemoryRoleRepository:
    """Role repository over a unit of work's staged mapping."""

    def __init__(self, staged: dict[str, StoredRole], touched: set[str]) -> None:
        self._roles = staged
        self._touched = touched

    async def exists_by_name(self, name: str) -> bool:
        return name in self._roles

    async def get_by_name(self, name: str) -> StoredRole | None:
        return self._roles.get(name)

    async def list_all(self) -> list[StoredRole]:
        return list(self._roles.values())

    async def insert(self, role: StoredRole) -> None:
        if role.name in self._roles:
            raise DuplicateEntity("Role", role.name)
        self._roles[role.name] = role
        self._touched.add(role.name)

    async def replace(self, role: StoredRole) -> None:
        if role.name not in self._roles:
            raise EntityNotFound("Role", role.name)
        self._roles[role.name] = role
        self._touched.add(role.name)

    async def delete_by_name(self, name: str) -> bool:
        if self._roles.pop(name, None) is None:
            return False
        self._touched.add(name)
        return True
