"""Unit tests for the committed role representation."""

import pytest

from roleidm.application.dto import StoredAttribute, StoredRole
from roleidm.domain.entities import Attribute, Role
from roleidm.domain.exceptions import ValidationError
from roleidm.domain.value_objects import AttributeValueType


def _role_with(*attributes: Attribute) -> Role:
    role = Role(name="r")
    for a in attributes:
        role.set_attribute(a)
    return role


def test_single_valued_stays_scalar() -> None:
    stored = StoredRole.from_role(_role_with(Attribute("one-valued", "1")))
    assert stored.attributes[0] == StoredAttribute(
        name="one-valued",
        value_type=AttributeValueType.STRING,
        multi_valued=False,
        values=("1",),
    )
    assert stored.to_role().get_attribute("one-valued").value == "1"


def test_one_element_list_stays_multi_valued() -> None:
    restored = StoredRole.from_role(_role_with(Attribute("m", ["1"]))).to_role()
    assert restored.get_attribute("m").value == ["1"]


def test_tuple_restored_as_list() -> None:
    restored = StoredRole.from_role(_role_with(Attribute("m", ("1", "2")))).to_role()
    assert restored.get_attribute("m").value == ["1", "2"]


def test_attribute_order_preserved() -> None:
    role = _role_with(Attribute("b", "1"), Attribute("a", "2"), Attribute("c", "3"))
    assert list(StoredRole.from_role(role).to_role().attributes) == ["b", "a", "c"]


def test_to_role_builds_fresh_objects() -> None:
    stored = StoredRole.from_role(_role_with(Attribute("m", ["1", "2"])))
    first = stored.to_role()
    first.get_attribute("m").value.append("3")
    assert stored.to_role().get_attribute("m").value == ["1", "2"]


def test_float_restored_from_widened_integer() -> None:
    # JSON stores may hand back 2.0 as 2
    stored = StoredAttribute(
        name="f", value_type=AttributeValueType.FLOAT, multi_valued=True, values=(2, 2.5)
    )
    value = stored.to_attribute().value
    assert value == [2.0, 2.5]
    assert all(isinstance(v, float) for v in value)


def test_invalid_attribute_rejected_before_storing() -> None:
    role = _role_with(Attribute("m", ["1"]))
    role.get_attribute("m").value = ["1", 2]
    with pytest.raises(ValidationError):
        StoredRole.from_role(role)
