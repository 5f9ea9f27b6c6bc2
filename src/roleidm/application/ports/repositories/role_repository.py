"""Role repository port."""

from typing import Protocol

from roleidm.application.dto import StoredRole


class RoleRepository(Protocol):
    """Port for role persistence, keyed by role name."""

    async def exists_by_name(self, name: str) -> bool: ...

    async def get_by_name(self, name: str) -> StoredRole | None: ...

    async def list_all(self) -> list[StoredRole]: ...

    async def insert(self, role: StoredRole) -> None: ...

    async def replace(self, role: StoredRole) -> None: ...

    async def delete_by_name(self, name: str) -> bool: ...
