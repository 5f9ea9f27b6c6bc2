"""Application ports - interfaces for external adapters."""

from roleidm.application.ports.repositories import RoleRepository
from roleidm.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "RoleRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
