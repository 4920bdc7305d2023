"""Login endpoint: exchange email and password for a signed token."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from techscope.api.deps import get_user_store, json_body_openapi, read_json_body
from techscope.core.config import get_settings
from techscope.schemas.auth import LoginRequest, TokenResponse
from techscope.services.accounts import login_user
from techscope.services.user_store import UserStore

router = APIRouter()


@router.post(
    "",
    response_model=TokenResponse,
    summary="Login user",
    openapi_extra=json_body_openapi(LoginRequest),
    responses={
        400: {"description": "Validation failed or invalid email or password"},
        500: {"description": "Some server error"},
    },
)
async def login(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a signed token.
    Unknown email and wrong password both yield 400 "Invalid email or password.".
    """
    payload = await read_json_body(request)
    token = await run_in_threadpool(login_user, store, payload, get_settings())
    return TokenResponse(token=token)
