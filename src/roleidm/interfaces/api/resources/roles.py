"""Role API resources."""

from typing import Any

import falcon.asgi

from roleidm.application.identity_manager import IdentityManager
from roleidm.domain.entities import Attribute, Role
from roleidm.domain.exceptions import DuplicateEntity, EntityNotFound, ValidationError


def _role_to_dict(role: Role) -> dict[str, Any]:
    return {
        "key": role.key,
        "name": role.name,
        "attributes": {
            name: attr.values if attr.multi_valued else attr.value
            for name, attr in role.attributes.items()
        },
    }


def _attributes_from_body(body: dict[str, Any]) -> list[Attribute]:
    """Parse ``{"attributes": {name: value}}``; JSON arrays become multi-valued."""
    raw = body.get("attributes") or {}
    if not isinstance(raw, dict):
        raise ValidationError("attributes must be an object")
    return [Attribute(name=name, value=value) for name, value in raw.items()]


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(self, identity_manager: IdentityManager) -> None:
        self._identity_manager = identity_manager

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles."""
        roles = await self._identity_manager.list_roles()
        resp.media = {"items": [_role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role with optional attributes."""
        try:
            body = await req.get_media()
            role = Role(name=(body["name"] or "").strip())
            for attribute in _attributes_from_body(body):
                role.set_attribute(attribute)
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            await self._identity_manager.create_role(role)
        except DuplicateEntity as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = _role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{name} - read, replace attributes, remove."""

    def __init__(self, identity_manager: IdentityManager) -> None:
        self._identity_manager = identity_manager

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Get role by name."""
        role = await self._identity_manager.get_role(name)
        if role is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return
        resp.media = _role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Replace the role's whole attribute set with the submitted one."""
        try:
            body = await req.get_media()
            role = Role(name=name)
            for attribute in _attributes_from_body(body):
                role.set_attribute(attribute)
        except (AttributeError, TypeError, ValidationError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            await self._identity_manager.update_role(role)
        except EntityNotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return

        resp.media = _role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Remove role."""
        try:
            await self._identity_manager.remove_role(Role(name=name))
        except EntityNotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return
        resp.status = falcon.HTTP_204
