from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    DuplicateEvent,
    FaceRejected,
    GeofenceViolation,
)

logger = logging.getLogger(__name__)


def current_role() -> Role:
    try:
        return Role(session.get("role", Role.EMPLOYEE.value))
    except ValueError:
        return Role.EMPLOYEE


def json_error(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def domain_error_response(e: DomainError):
    if isinstance(e, GeofenceViolation):
        return json_error(str(e), 422, distance=round(e.distance, 1))
    if isinstance(e, FaceRejected):
        return json_error(str(e), 422)
    if isinstance(e, DuplicateEvent):
        return json_error(str(e), 409)
    if isinstance(e, AuthenticationError):
        return json_error(str(e), 401)
    if isinstance(e, AuthorizationError):
        return json_error(str(e), 403)
    return json_error(str(e), 400)


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_role() != Role.ADMIN:
            return json_error("Admin access required", 403)
        return view(*args, **kwargs)

    return wrapper


def handle_domain_errors(view):
    """Map domain errors to JSON responses; anything else is a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("unhandled error in %s", view.__name__)
            return json_error("System failure", 500)

    return wrapper
