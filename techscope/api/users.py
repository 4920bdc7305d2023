"""User endpoints: registration and email uniqueness check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from techscope.api.deps import (
    AUTH_TOKEN_HEADER,
    get_user_store,
    json_body_openapi,
    read_json_body,
)
from techscope.core.config import get_settings
from techscope.schemas.users import RegisterUserRequest, UniqueEmailRequest, UserResponse
from techscope.services.accounts import check_email_unique, register_user
from techscope.services.user_store import UserStore

router = APIRouter()


@router.post(
    "",
    response_model=UserResponse,
    summary="Create a new user",
    openapi_extra=json_body_openapi(RegisterUserRequest),
    responses={
        200: {
            "description": "The user was successfully created",
            "headers": {
                AUTH_TOKEN_HEADER: {
                    "description": "Signed token for the new user",
                    "schema": {"type": "string"},
                }
            },
        },
        400: {"description": "Validation failed or user already registered"},
        500: {"description": "Some server error"},
    },
)
async def create_user(
    request: Request,
    response: Response,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserResponse:
    """Register an account and return its public fields; the token is in the x-auth-token header."""
    payload = await read_json_body(request)
    result = await run_in_threadpool(register_user, store, payload, get_settings())
    response.headers[AUTH_TOKEN_HEADER] = result.token
    return result.user


@router.post(
    "/unique",
    response_class=PlainTextResponse,
    summary="Check whether an email is registered",
    openapi_extra=json_body_openapi(UniqueEmailRequest),
    responses={
        200: {"description": "User is not registered before."},
        400: {"description": "Validation failed"},
        409: {"description": "User already exist."},
    },
)
async def check_unique(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> PlainTextResponse:
    payload = await read_json_body(request)
    result = await run_in_threadpool(check_email_unique, store, payload)
    return PlainTextResponse(result.message, status_code=200 if result.available else 409)
