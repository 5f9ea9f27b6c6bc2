"""Role entity - named authorization entity with an attribute mapping."""

from dataclasses import dataclass, field

from roleidm.domain.entities.attribute import Attribute
from roleidm.domain.exceptions import ValidationError
from roleidm.domain.value_objects import RoleKey, check_name


@dataclass(eq=False)
class Role:
    """Role working copy.

    Instances are detached from the store: mutations only reach it when the
    whole role is submitted through ``IdentityManager.update_role``.
    Two roles are the same role iff their keys are equal.
    """

    name: str
    attributes: dict[str, Attribute] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_name("Role", self.name)
        for attr_name, attr in self.attributes.items():
            if attr_name != attr.name:
                raise ValidationError(
                    f"Attribute stored under {attr_name!r} is named {attr.name!r}"
                )
        self.attributes = {n: a.copy() for n, a in self.attributes.items()}

    def __setattr__(self, name: str, value: object) -> None:
        if name == "name" and "name" in self.__dict__:
            raise AttributeError("Role name is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @property
    def key(self) -> str:
        return RoleKey.for_name(self.name).value

    def set_attribute(self, attribute: Attribute) -> None:
        """Insert or replace by name. The previous value is discarded."""
        self.attributes[attribute.name] = attribute.copy()

    def get_attribute(self, name: str) -> Attribute | None:
        return self.attributes.get(name)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)
