"""Request/response schemas for the auth endpoint."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from techscope.schemas.users import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    check_email_syntax,
)


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"email": "b@mail.com", "password": "12345"}},
    )

    email: str = Field(
        ..., min_length=1, max_length=EMAIL_MAX_LEN, description="The user email"
    )
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="The user password",
    )

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v: str) -> str:
        return check_email_syntax(v)


class TokenResponse(BaseModel):
    """Signed token returned after successful login."""

    token: str = Field(..., description="The auto-generated JWT token of the user")
