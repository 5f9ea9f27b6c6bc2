"""Domain entities."""

from roleidm.domain.entities.attribute import Attribute
from roleidm.domain.entities.role import Role

__all__ = [
    "Attribute",
    "Role",
]
