"""Application DTOs."""

from roleidm.application.dto.stored_role import StoredAttribute, StoredRole

__all__ = [
    "StoredAttribute",
    "StoredRole",
]
