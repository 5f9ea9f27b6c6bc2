"""Domain value objects."""

from roleidm.domain.value_objects.attribute_value_type import AttributeValueType
from roleidm.domain.value_objects.name_rules import MAX_NAME_LENGTH, check_name
from roleidm.domain.value_objects.role_key import ROLE_KEY_PREFIX, RoleKey

__all__ = [
    "MAX_NAME_LENGTH",
    "ROLE_KEY_PREFIX",
    "AttributeValueType",
    "RoleKey",
    "check_name",
]
