"""Limits shared by role and attribute names."""

from roleidm.domain.exceptions import ValidationError

MAX_NAME_LENGTH = 255


def check_name(kind: str, name: str) -> None:
    """Raise ValidationError unless ``name`` fits a name column."""
    if not name:
        raise ValidationError(f"{kind} name must not be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"{kind} name exceeds {MAX_NAME_LENGTH} characters")
    if "\x00" in name:
        raise ValidationError(f"{kind} name must not contain NUL characters")
