"""Attribute value type - primitive type of an attribute's value(s)."""

import math
from enum import StrEnum

from roleidm.domain.exceptions import ValidationError


class AttributeValueType(StrEnum):
    """Supported primitive types for attribute values."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"

    @classmethod
    def of(cls, value: object) -> "AttributeValueType":
        """Type of a single scalar value."""
        # bool is a subclass of int and must be checked first
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValidationError("Attribute values must be finite numbers")
            return cls.FLOAT
        if isinstance(value, str):
            if "\x00" in value:
                raise ValidationError("Attribute values must not contain NUL characters")
            return cls.STRING
        raise ValidationError(
            f"Unsupported attribute value type: {type(value).__name__}"
        )

    def coerce(self, value: object) -> object:
        """Restore a value read back from a store that may have widened it."""
        if self is AttributeValueType.FLOAT and isinstance(value, int):
            return float(value)
        return value
