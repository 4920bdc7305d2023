"""Response schema for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus the two things accounts depend on: the user table and the signing key."""

    status: Literal["ok"] = "ok"
    version: str = Field(description="Deployed techscope version")
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"]
    signing_key: Literal["configured", "placeholder"] = Field(
        description="'placeholder' while JWT_PRIVATE_KEY is the shipped default",
    )
