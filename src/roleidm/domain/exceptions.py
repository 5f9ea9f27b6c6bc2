"""Domain exceptions."""


class RoleIdmError(Exception):
    """Base exception for roleidm."""

    pass


class EntityNotFound(RoleIdmError):
    """Entity targeted by update or remove does not exist."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class DuplicateEntity(RoleIdmError):
    """Entity with the same identity already exists."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} already exists: {identifier}")
        self.entity = entity
        self.identifier = identifier


class StoreUnavailable(RoleIdmError):
    """Backing store could not be reached."""

    pass


class ValidationError(RoleIdmError):
    """Validation failed for input data."""

    pass
