"""Shared request dependencies and helpers for API routes."""

import json
from typing import Annotated, Any

from fastapi import Depends, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from techscope.core.database import get_db
from techscope.services.errors import ValidationError
from techscope.services.user_store import SqlUserStore, UserStore

# Response header carrying the token issued on registration.
AUTH_TOKEN_HEADER = "x-auth-token"


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Dependency: user store bound to the request's DB session."""
    return SqlUserStore(db)


async def read_json_body(request: Request) -> Any:
    """
    Return the decoded JSON body. An empty body reads as {} so that field-level
    validation reports the first missing field; undecodable bodies are rejected.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError('"value" must be of type object') from e


def json_body_openapi(model: type[BaseModel]) -> dict[str, Any]:
    """openapi_extra documenting a JSON request body that the route parses itself."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
