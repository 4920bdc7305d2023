"""Request/response schemas for user registration and uniqueness checks."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MIN_LEN = 5
NAME_MAX_LEN = 50
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 5
PASSWORD_MAX_LEN = 255


def check_email_syntax(value: str) -> str:
    """Reject strings that are not email addresses. Returns the value unchanged."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError("must be a valid email") from e
    return value


class RegisterUserRequest(BaseModel):
    """Body of POST /users. Unknown keys (e.g. isAdmin) are rejected."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Bashar Khadra",
                "email": "b@mail.com",
                "password": "12345",
            }
        },
    )

    name: str = Field(
        ..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="The user full name"
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


class UniqueEmailRequest(BaseModel):
    """Body of POST /users/unique."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"email": "b@mail.com"}},
    )

    email: str = Field(
        ..., min_length=1, max_length=EMAIL_MAX_LEN, description="Email to look up"
    )

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v: str) -> str:
        return check_email_syntax(v)


class UserRecord(BaseModel):
    """Stored account as returned by a user store (includes the digest; never serialize)."""

    id: int
    name: str
    email: str
    password_hash: str
    is_admin: bool = False

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    """Public projection of an account (no password)."""

    id: int = Field(..., description="The auto-generated id of the user")
    name: str = Field(..., description="The user full name")
    email: str = Field(..., description="The user email")

    class Config:
        from_attributes = True
