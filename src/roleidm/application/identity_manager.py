"""Identity manager - public role management contract."""

from roleidm.application.use_cases.role.create_role import CreateRoleUseCase
from roleidm.application.use_cases.role.get_role import GetRoleUseCase
from roleidm.application.use_cases.role.list_roles import ListRolesUseCase
from roleidm.application.use_cases.role.remove_role import RemoveRoleUseCase
from roleidm.application.use_cases.role.update_role import UpdateRoleUseCase
from roleidm.domain.entities import Role


class IdentityManager:
    """Create, read, update and remove roles over one store.

    Attributes are changed by fetching a role, mutating it locally and
    submitting the whole role to ``update_role``. There is no per-attribute
    remote call.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._create = CreateRoleUseCase(unit_of_work_factory)
        self._get = GetRoleUseCase(unit_of_work_factory)
        self._list = ListRolesUseCase(unit_of_work_factory)
        self._update = UpdateRoleUseCase(unit_of_work_factory)
        self._remove = RemoveRoleUseCase(unit_of_work_factory)

    async def create_role(self, role: Role) -> None:
        await self._create.execute(role)

    async def get_role(self, name: str) -> Role | None:
        return await self._get.execute(name)

    async def get_role_by_key(self, key: str) -> Role | None:
        return await self._get.execute_by_key(key)

    async def list_roles(self) -> list[Role]:
        return await self._list.execute()

    async def update_role(self, role: Role) -> None:
        await self._update.execute(role)

    async def remove_role(self, role: Role) -> None:
        await self._remove.execute(role)
