"""Repository ports."""

from roleidm.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "RoleRepository",
]
