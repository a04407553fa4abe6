from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ShiftValidationError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int, **extra: Any):
    return jsonify({"message": message, **extra}), status


def json_endpoint(failure_message: str):
    """Map domain errors raised by a view to JSON responses.

    ValidationError -> 400, NotFoundError -> 404, anything else -> 500 (logged).
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ShiftValidationError as e:
                extra = {"kind": e.result.kind.value if e.result.kind else None}
                if e.result.conflict_name:
                    extra["conflictingShift"] = e.result.conflict_name
                return json_error(str(e), 400, **extra)
            except ValidationError as e:
                return json_error(str(e), 400)
            except NotFoundError as e:
                return json_error(str(e), 404)
            except Exception:
                logger.exception("Unhandled error in %s", view.__name__)
                return json_error(failure_message, 500)

        return wrapper

    return decorator


def int_field(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def optional_bool(value: Any, field_name: str) -> Optional[bool]:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value


def json_body() -> dict:
    """The request's JSON object; a missing body counts as empty."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
