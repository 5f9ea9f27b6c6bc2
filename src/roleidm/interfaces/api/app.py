"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from roleidm.application.identity_manager import IdentityManager
from roleidm.domain.exceptions import StoreUnavailable, ValidationError
from roleidm.interfaces.api.resources.health import HealthResource
from roleidm.interfaces.api.resources.roles import RoleResource, RolesResource

logger = structlog.get_logger(__name__)


async def _store_unavailable(req, resp, ex, params) -> None:
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Role store unavailable"}


async def _invalid_value(req, resp, ex, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def _log_exception(req, resp, ex, params) -> None:
    logger.exception("unhandled_error", path=req.path, method=req.method)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    identity_manager: IdentityManager,
    unit_of_work_factory: type,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_error_handler(StoreUnavailable, _store_unavailable)
    app.add_error_handler(ValidationError, _invalid_value)

    health_resource = HealthResource(unit_of_work_factory)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", RolesResource(identity_manager))
    app.add_route("/v1/roles/{name}", RoleResource(identity_manager))
    return app
