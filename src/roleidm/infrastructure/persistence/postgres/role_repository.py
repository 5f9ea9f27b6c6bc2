"""PostgreSQL role repository implementation."""

from itertools import groupby

from psycopg import AsyncConnection, AsyncCursor
from psycopg.errors import DataError, UniqueViolation
from psycopg.types.json import Jsonb

from roleidm.application.dto import StoredAttribute, StoredRole
from roleidm.domain.exceptions import DuplicateEntity, EntityNotFound, ValidationError
from roleidm.domain.value_objects import AttributeValueType


def _attribute_from_row(r: tuple) -> StoredAttribute:
    return StoredAttribute(
        name=r[0],
        value_type=AttributeValueType(r[1]),
        multi_valued=r[2],
        values=tuple(r[3]),
    )


class PostgresRoleRepository:
    """Role repository implementation.

    Attribute values are stored as a JSONB array in ``attr_values``; arity is
    kept in ``multi_valued`` so a one-element list is never read back as a
    scalar.
    """

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _execute(self, query: str, params: tuple | None = None) -> AsyncCursor:
        """Execute a statement; values the schema cannot hold raise ValidationError."""
        try:
            return await self._conn.execute(query, params)
        except DataError as e:
            raise ValidationError(f"Value rejected by role store: {e}") from e

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a role with this name exists."""
        cur = await self._execute(
            "SELECT 1 FROM role WHERE name = %s",
            (name,),
        )
        return await cur.fetchone() is not None

    async def get_by_name(self, name: str) -> StoredRole | None:
        """Get role and its attributes by name."""
        if not await self.exists_by_name(name):
            return None
        cur = await self._execute(
            "SELECT name, value_type, multi_valued, attr_values FROM role_attribute "
            "WHERE role_name = %s ORDER BY position",
            (name,),
        )
        rows = await cur.fetchall()
        return StoredRole(name=name, attributes=tuple(_attribute_from_row(r) for r in rows))

    async def list_all(self) -> list[StoredRole]:
        """List all roles with their attributes."""
        cur = await self._execute("SELECT name FROM role ORDER BY name")
        names = [r[0] for r in await cur.fetchall()]
        cur = await self._execute(
            "SELECT role_name, name, value_type, multi_valued, attr_values "
            "FROM role_attribute ORDER BY role_name, position"
        )
        attributes = {
            role_name: tuple(_attribute_from_row(r[1:]) for r in rows)
            for role_name, rows in groupby(await cur.fetchall(), key=lambda r: r[0])
        }
        return [StoredRole(name=n, attributes=attributes.get(n, ())) for n in names]

    async def insert(self, role: StoredRole) -> None:
        """Insert role and its attributes."""
        try:
            await self._execute(
                "INSERT INTO role (name) VALUES (%s)",
                (role.name,),
            )
        except UniqueViolation as e:
            raise DuplicateEntity("Role", role.name) from e
        await self._insert_attributes(role)

    async def replace(self, role: StoredRole) -> None:
        """Replace all attributes of an existing role."""
        cur = await self._execute(
            "SELECT 1 FROM role WHERE name = %s FOR UPDATE",
            (role.name,),
        )
        if await cur.fetchone() is None:
            raise EntityNotFound("Role", role.name)
        await self._execute(
            "DELETE FROM role_attribute WHERE role_name = %s",
            (role.name,),
        )
        await self._insert_attributes(role)

    async def delete_by_name(self, name: str) -> bool:
        """Delete role; attributes go with it via ON DELETE CASCADE."""
        cur = await self._execute(
            "DELETE FROM role WHERE name = %s",
            (name,),
        )
        return cur.rowcount > 0

    async def _insert_attributes(self, role: StoredRole) -> None:
        for position, a in enumerate(role.attributes):
            await self._execute(
                "INSERT INTO role_attribute "
                "(role_name, name, position, value_type, multi_valued, attr_values) "
                "VALUES (%s, %s, %s, %s, %s, %s)",
                (
                    role.name,
                    a.name,
                    position,
                    a.value_type.value,
                    a.multi_valued,
                    Jsonb(list(a.values)),
                ),
            )
