"""Remove role use case."""

import structlog

from roleidm.domain.entities import Role
from roleidm.domain.exceptions import EntityNotFound

logger = structlog.get_logger(__name__)


class RemoveRoleUseCase:
    """Delete a role and all its attributes."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role: Role) -> None:
        """Remove role. Raises EntityNotFound if it does not exist."""
        async with self._uow_factory() as uow:
            deleted = await uow.roles.delete_by_name(role.name)
            if not deleted:
                logger.info("role_remove_rejected", role=role.name, reason="not_found")
                raise EntityNotFound("Role", role.name)

        logger.info("role_removed", role=role.name)
