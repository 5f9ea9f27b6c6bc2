"""In-memory role store."""

from roleidm.infrastructure.persistence.memory.role_repository import (
    MemoryRoleRepository,
    MemoryRoleStore,
)
from roleidm.infrastructure.persistence.memory.unit_of_work import (
    MemoryUnitOfWork,
    create_memory_uow_factory,
)

__all__ = [
    "MemoryRoleRepository",
    "MemoryRoleStore",
    "MemoryUnitOfWork",
    "create_memory_uow_factory",
]
