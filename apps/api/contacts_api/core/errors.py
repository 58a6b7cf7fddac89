"""Error taxonomy and the exception handlers that shape error responses.

Every error body carries a human readable ``message``. Validation errors add
``errors``: a mapping of field name to the list of messages for that field.
"""

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class Unauthenticated(Exception):
    """No token, or a token that does not resolve to an active user."""

    def __init__(self, reason: str = "Unauthenticated."):
        super().__init__(reason)
        self.reason = reason


class NotFound(Exception):
    """No matching record inside the caller's account."""

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found.")
        self.message = f"{resource} not found."


class ValidationFailed(Exception):
    """One or more field constraints were violated."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(_summary(errors))
        self.errors = errors

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationFailed":
        return cls(format_validation_errors(exc.errors()))


# =============================================================================
# Message formatting
# =============================================================================

def _field_label(field: str) -> str:
    return field.replace("_", " ")


def _message_for(field: str, error: dict[str, Any]) -> str:
    label = _field_label(field)
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing" or (error_type.endswith("_type") and error.get("input") is None):
        return f"The {label} field is required."
    if error_type == "string_too_long":
        return f"The {label} field must not be greater than {ctx.get('max_length')} characters."
    if error_type == "string_type":
        return f"The {label} field must be a string."
    if error_type in ("int_parsing", "int_type", "int_from_float"):
        return f"The {label} field must be an integer."
    if error_type == "greater_than_equal":
        return f"The {label} field must be at least {ctx.get('ge')}."
    if error_type == "value_error":
        # pydantic prefixes messages raised from validators
        return str(error.get("msg", "")).removeprefix("Value error, ")
    return str(error.get("msg", f"The {label} field is invalid."))


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> dict[str, list[str]]:
    """
    Collapse pydantic error dicts into {field: [messages]}.

    The field is the last string element of ``loc`` so body, query and
    path locations all report the bare parameter name.
    """
    formatted: dict[str, list[str]] = {}
    for error in errors:
        loc = [part for part in error.get("loc", ()) if isinstance(part, str)]
        loc = [part for part in loc if part not in ("body", "query", "path")]
        field = loc[-1] if loc else "non_field_errors"
        message = _message_for(field, error)
        messages = formatted.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return formatted


def _summary(errors: dict[str, list[str]]) -> str:
    messages = [m for field_messages in errors.values() for m in field_messages]
    if not messages:
        return "The given data was invalid."
    if len(messages) == 1:
        return messages[0]
    extra = len(messages) - 1
    return f"{messages[0]} (and {extra} more error{'s' if extra > 1 else ''})"


# =============================================================================
# Handlers
# =============================================================================

def validation_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": _summary(errors), "errors": errors},
    )


async def unauthenticated_handler(request: Request, exc: Unauthenticated) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"message": "Unauthenticated."},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": exc.message})


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    return validation_response(exc.errors)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return validation_response(format_validation_errors(exc.errors()))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(
        "Database error on %s %s", request.method, request.url.path
    )
    return JSONResponse(status_code=500, content={"message": "Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers for the error taxonomy to the app."""
    app.add_exception_handler(Unauthenticated, unauthenticated_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
