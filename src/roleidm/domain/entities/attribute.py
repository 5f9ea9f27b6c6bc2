"""Attribute entity - named single- or multi-valued property of a role."""

from dataclasses import dataclass

from roleidm.domain.exceptions import ValidationError
from roleidm.domain.value_objects import AttributeValueType, check_name

Scalar = str | int | float | bool
AttributeValue = Scalar | list[Scalar] | tuple[Scalar, ...]


@dataclass
class Attribute:
    """Attribute - a scalar value, or an ordered sequence of scalars of one type.

    Arity is part of the attribute's type: a list or tuple value is
    multi-valued even with a single element, a scalar never is.
    """

    name: str
    value: AttributeValue

    def __post_init__(self) -> None:
        check_name("Attribute", self.name)
        self.value_type  # raises ValidationError for unsupported values

    @property
    def multi_valued(self) -> bool:
        return isinstance(self.value, (list, tuple))

    @property
    def values(self) -> list[Scalar]:
        """Value(s) as a list, one element for single-valued attributes."""
        if self.multi_valued:
            return list(self.value)
        return [self.value]

    @property
    def value_type(self) -> AttributeValueType:
        values = self.values
        if not values:
            raise ValidationError(
                f"Multi-valued attribute {self.name!r} needs at least one value"
            )
        value_type = AttributeValueType.of(values[0])
        for v in values[1:]:
            if AttributeValueType.of(v) is not value_type:
                raise ValidationError(
                    f"Attribute {self.name!r} mixes value types"
                )
        return value_type

    def copy(self) -> "Attribute":
        """Independent copy; multi-valued values are copied into a new list."""
        value = list(self.value) if self.multi_valued else self.value
        return Attribute(name=self.name, value=value)
