"""Payload validation for register, login and uniqueness-check requests."""

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from techscope.schemas.auth import LoginRequest
from techscope.schemas.users import RegisterUserRequest, UniqueEmailRequest
from techscope.services.errors import ValidationError


class PayloadKind(str, Enum):
    REGISTER = "register"
    LOGIN = "login"
    UNIQUE = "unique"


SCHEMAS: dict[PayloadKind, type[BaseModel]] = {
    PayloadKind.REGISTER: RegisterUserRequest,
    PayloadKind.LOGIN: LoginRequest,
    PayloadKind.UNIQUE: UniqueEmailRequest,
}

_OBJECT_ERROR_TYPES = frozenset({"model_type", "model_attributes_type", "dict_type"})


def describe_error(error: dict[str, Any]) -> str:
    """Render one pydantic error entry as a client-facing message, e.g. '"name" is required'."""
    loc = error.get("loc") or ()
    label = str(loc[0]) if loc else "value"
    err_type = error.get("type")
    ctx = error.get("ctx") or {}

    if err_type in _OBJECT_ERROR_TYPES:
        return f'"{label}" must be of type object'
    if err_type == "missing":
        return f'"{label}" is required'
    if err_type == "string_type":
        return f'"{label}" must be a string'
    if err_type == "string_too_short":
        if error.get("input") == "":
            return f'"{label}" is not allowed to be empty'
        return f'"{label}" length must be at least {ctx.get("min_length")} characters long'
    if err_type == "string_too_long":
        return (
            f'"{label}" length must be less than or equal to '
            f'{ctx.get("max_length")} characters long'
        )
    if err_type == "extra_forbidden":
        return f'"{label}" is not allowed'
    if err_type == "value_error" and "error" in ctx:
        return f'"{label}" {ctx["error"]}'
    return f'"{label}" {error.get("msg", "is invalid")}'


def first_error(kind: PayloadKind, payload: Any) -> str | None:
    """Return the message for the first failing constraint, or None if the payload is valid."""
    try:
        validate_payload(kind, payload)
    except ValidationError as e:
        return e.message
    return None


def validate_payload(kind: PayloadKind, payload: Any) -> BaseModel:
    """Parse payload into the request model for kind. Raises ValidationError on the first violation."""
    try:
        return SCHEMAS[kind].model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(describe_error(e.errors()[0])) from e
