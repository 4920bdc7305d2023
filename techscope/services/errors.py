"""Account errors raised by services and translated to responses by the HTTP layer."""

USER_ALREADY_REGISTERED = "User already registered."
INVALID_CREDENTIALS = "Invalid email or password."
STORAGE_FAULT = "Something failed."


class AccountError(Exception):
    """Base class; carries the client-facing message and HTTP status."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AccountError):
    """Payload failed validation; message describes the first violated rule."""


class DuplicateAccountError(AccountError):
    """Email is already registered (found on lookup or rejected by the unique index)."""

    def __init__(self, message: str = USER_ALREADY_REGISTERED) -> None:
        super().__init__(message)


class InvalidCredentialsError(AccountError):
    """Unknown email or wrong password. Same message for both."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS)


class StorageFault(AccountError):
    """Unexpected store failure. The client only ever sees STORAGE_FAULT."""

    status_code = 500

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(STORAGE_FAULT)
