"""Account workflows: register, login and email uniqueness check."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from techscope.core.security import create_auth_token, hash_password, verify_password
from techscope.schemas.users import UserResponse
from techscope.services.errors import DuplicateAccountError, InvalidCredentialsError
from techscope.services.user_store import UserStore
from techscope.services.validation import PayloadKind, validate_payload

if TYPE_CHECKING:
    from techscope.core.config import Settings

logger = logging.getLogger(__name__)

EMAIL_AVAILABLE = "User is not registered before."
EMAIL_TAKEN = "User already exist."


@lru_cache
def _dummy_digest(rounds: int) -> str:
    """Digest checked for unknown emails so they cost the same bcrypt work as known ones."""
    return hash_password("techscope-unknown-account", rounds=rounds)


@dataclass(frozen=True)
class RegistrationResult:
    token: str
    user: UserResponse


@dataclass(frozen=True)
class UniquenessResult:
    available: bool
    message: str


def register_user(
    store: UserStore,
    payload: Any,
    settings: "Settings",
    is_admin: bool = False,
) -> RegistrationResult:
    """
    Validate, reject taken emails, hash the password, persist and issue a token.

    Raises ValidationError or DuplicateAccountError. A duplicate that slips past
    the lookup (concurrent registration) is rejected by the store's insert.
    """
    body = validate_payload(PayloadKind.REGISTER, payload)

    if store.find_by_email(body.email) is not None:
        raise DuplicateAccountError()

    password_hash = hash_password(body.password, rounds=settings.BCRYPT_ROUNDS)
    record = store.insert(
        name=body.name,
        email=body.email,
        password_hash=password_hash,
        is_admin=is_admin,
    )
    token = create_auth_token(record.id, record.is_admin, settings)
    logger.info("Registered user id=%s is_admin=%s", record.id, record.is_admin)
    return RegistrationResult(
        token=token,
        user=UserResponse(id=record.id, name=record.name, email=record.email),
    )


def login_user(store: UserStore, payload: Any, settings: "Settings") -> str:
    """Return a token for valid credentials. Unknown email and wrong password raise the same error."""
    body = validate_payload(PayloadKind.LOGIN, payload)

    record = store.find_by_email(body.email)
    if record is None:
        verify_password(body.password, _dummy_digest(settings.BCRYPT_ROUNDS))
        raise InvalidCredentialsError()
    if not verify_password(body.password, record.password_hash):
        logger.info("Login rejected for user id=%s", record.id)
        raise InvalidCredentialsError()

    logger.info("Login succeeded for user id=%s", record.id)
    return create_auth_token(record.id, record.is_admin, settings)


def check_email_unique(store: UserStore, payload: Any) -> UniquenessResult:
    """Report whether the email is free. Read-only."""
    body = validate_payload(PayloadKind.UNIQUE, payload)

    if store.find_by_email(body.email) is None:
        return UniquenessResult(available=True, message=EMAIL_AVAILABLE)
    return UniquenessResult(available=False, message=EMAIL_TAKEN)
