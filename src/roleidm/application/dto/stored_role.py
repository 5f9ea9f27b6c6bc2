"""Committed store representation of a role.

Store adapters persist and return only these records. Converting back to a
``Role`` always builds fresh objects, so fetched roles never alias store state.
"""

from dataclasses import dataclass, field

from roleidm.domain.entities import Attribute, Role
from roleidm.domain.value_objects import AttributeValueType


@dataclass(frozen=True)
class StoredAttribute:
    """One attribute row: type, arity and ordered values."""

    name: str
    value_type: AttributeValueType
    multi_valued: bool
    values: tuple[object, ...]

    @classmethod
    def from_attribute(cls, attribute: Attribute) -> "StoredAttribute":
        return cls(
            name=attribute.name,
            value_type=attribute.value_type,
            multi_valued=attribute.multi_valued,
            values=tuple(attribute.values),
        )

    def to_attribute(self) -> Attribute:
        values = [self.value_type.coerce(v) for v in self.values]
        if self.multi_valued:
            return Attribute(name=self.name, value=values)
        return Attribute(name=self.name, value=values[0])


@dataclass(frozen=True)
class StoredRole:
    """Role row plus its attribute rows, in insertion order."""

    name: str
    attributes: tuple[StoredAttribute, ...] = field(default_factory=tuple)

    @classmethod
    def from_role(cls, role: Role) -> "StoredRole":
        return cls(
            name=role.name,
            attributes=tuple(
                StoredAttribute.from_attribute(a) for a in role.attributes.values()
            ),
        )

    def to_role(self) -> Role:
        role = Role(name=self.name)
        for stored in self.attributes:
            role.set_attribute(stored.to_attribute())
        return role
