"""Role key - stable external identifier derived from the role name."""

from dataclasses import dataclass

from roleidm.domain.exceptions import ValidationError

ROLE_KEY_PREFIX = "ROLE://"


@dataclass(frozen=True)
class RoleKey:
    """Key of the form ``ROLE://<name>``."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.startswith(ROLE_KEY_PREFIX):
            raise ValidationError(f"Role key must start with {ROLE_KEY_PREFIX}")
        if len(self.value) == len(ROLE_KEY_PREFIX):
            raise ValidationError("Role key has an empty name")

    @classmethod
    def for_name(cls, name: str) -> "RoleKey":
        return cls(ROLE_KEY_PREFIX + name)

    @classmethod
    def parse(cls, key: str) -> "RoleKey":
        """Validate an externally supplied key."""
        return cls(key)

    @property
    def name(self) -> str:
        return self.value[len(ROLE_KEY_PREFIX) :]

    def __str__(self) -> str:
        return self.value
