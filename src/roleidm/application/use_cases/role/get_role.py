"""Get role use case."""

from roleidm.domain.entities import Role
from roleidm.domain.value_objects import RoleKey


class GetRoleUseCase:
    """Fetch a detached role snapshot by name or key."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, name: str) -> Role | None:
        """Return role snapshot, or None if no role has this name."""
        async with self._uow_factory() as uow:
            stored = await uow.roles.get_by_name(name)
        if stored is None:
            return None
        return stored.to_role()

    async def execute_by_key(self, key: str) -> Role | None:
        """Return role snapshot for a ``ROLE://`` key. Raises ValidationError on a malformed key."""
        return await self.execute(RoleKey.parse(key).name)
