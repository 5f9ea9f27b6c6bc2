"""List roles use case."""

from roleidm.domain.entities import Role


class ListRolesUseCase:
    """List all roles ordered by name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Role]:
        async with self._uow_factory() as uow:
            stored = await uow.roles.list_all()
        return [s.to_role() for s in sorted(stored, key=lambda s: s.name)]
