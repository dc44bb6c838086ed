from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Login required", 401)
        return view(*args, **kwargs)

    return wrapper


def json_errors(view):
    """Map domain errors raised by services to JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except NotFoundError as e:
            return fail(str(e), 404)
        except DomainError as e:
            logger.warning("Unhandled domain error in %s: %s", view.__name__, e)
            return fail(str(e), 400)

    return wrapper
