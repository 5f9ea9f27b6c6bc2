"""Update role use case."""

import structlog

from roleidm.application.dto import StoredRole
from roleidm.domain.entities import Role
from roleidm.domain.exceptions import EntityNotFound

logger = structlog.get_logger(__name__)


class UpdateRoleUseCase:
    """Write a role snapshot back to the store.

    The submitted attribute mapping replaces the stored one wholesale:
    attributes missing from the snapshot are deleted, all others are written
    with their current value and arity.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role: Role) -> None:
        """Replace stored attributes. Raises EntityNotFound if the role is absent."""
        stored = StoredRole.from_role(role)
        async with self._uow_factory() as uow:
            if not await uow.roles.exists_by_name(role.name):
                logger.info("role_update_rejected", role=role.name, reason="not_found")
                raise EntityNotFound("Role", role.name)
            await uow.roles.replace(stored)

        logger.info("role_updated", role=role.name, attributes=len(stored.attributes))
