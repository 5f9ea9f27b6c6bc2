"""Create role use case."""

import structlog

from roleidm.application.dto import StoredRole
from roleidm.domain.entities import Role
from roleidm.domain.exceptions import DuplicateEntity

logger = structlog.get_logger(__name__)


class CreateRoleUseCase:
    """Persist a new role together with the attributes it already carries."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role: Role) -> None:
        """Create role. Raises DuplicateEntity if the name is taken."""
        stored = StoredRole.from_role(role)
        async with self._uow_factory() as uow:
            if await uow.roles.exists_by_name(role.name):
                logger.info("role_create_rejected", role=role.name, reason="duplicate")
                raise DuplicateEntity("Role", role.name)
            await uow.roles.insert(stored)

        logger.info("role_created", role=role.name, attributes=len(role.attributes))
