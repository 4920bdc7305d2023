"""Unit tests for techscope.services.validation: first-error messages and field order."""

import unittest

from techscope.schemas.auth import LoginRequest
from techscope.schemas.users import RegisterUserRequest
from techscope.services.errors import ValidationError
from techscope.services.validation import PayloadKind, first_error, validate_payload


def _register(**overrides: object) -> dict:
    payload = {"name": "Bashar Khadra", "email": "b@mail.com", "password": "12345"}
    payload.update(overrides)
    return payload


class TestRegisterValidation(unittest.TestCase):
    """Registration payloads: name, email, password checked in that order."""

    def test_valid_payload_parses(self) -> None:
        body = validate_payload(PayloadKind.REGISTER, _register())
        self.assertIsInstance(body, RegisterUserRequest)
        self.assertEqual(body.name, "Bashar Khadra")
        self.assertEqual(body.email, "b@mail.com")
        self.assertIsNone(first_error(PayloadKind.REGISTER, _register()))

    def test_empty_payload_reports_name_first(self) -> None:
        self.assertEqual(first_error(PayloadKind.REGISTER, {}), '"name" is required')

    def test_missing_name_before_missing_email(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, {"password": "12345"}),
            '"name" is required',
        )

    def test_missing_email(self) -> None:
        payload = _register()
        del payload["email"]
        self.assertEqual(first_error(PayloadKind.REGISTER, payload), '"email" is required')

    def test_name_too_short(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(name="Bash")),
            '"name" length must be at least 5 characters long',
        )

    def test_name_too_long(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(name="x" * 51)),
            '"name" length must be less than or equal to 50 characters long',
        )

    def test_name_bounds_inclusive(self) -> None:
        self.assertIsNone(first_error(PayloadKind.REGISTER, _register(name="x" * 5)))
        self.assertIsNone(first_error(PayloadKind.REGISTER, _register(name="x" * 50)))

    def test_empty_name(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(name="")),
            '"name" is not allowed to be empty',
        )

    def test_name_not_a_string(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(name=12345)),
            '"name" must be a string',
        )
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(name=None)),
            '"name" must be a string',
        )

    def test_invalid_email_syntax(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(email="not-an-email")),
            '"email" must be a valid email',
        )

    def test_empty_email(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(email="")),
            '"email" is not allowed to be empty',
        )

    def test_email_too_long_checked_before_syntax(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(email="a" * 250 + "@mail.com")),
            '"email" length must be less than or equal to 255 characters long',
        )

    def test_password_bounds(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(password="1234")),
            '"password" length must be at least 5 characters long',
        )
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(password="p" * 256)),
            '"password" length must be less than or equal to 255 characters long',
        )
        self.assertIsNone(first_error(PayloadKind.REGISTER, _register(password="p" * 255)))

    def test_unknown_key_rejected(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, _register(isAdmin=True)),
            '"isAdmin" is not allowed',
        )

    def test_non_object_payload(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.REGISTER, ["Bashar Khadra"]),
            '"value" must be of type object',
        )
        self.assertEqual(
            first_error(PayloadKind.REGISTER, "text"),
            '"value" must be of type object',
        )

    def test_deterministic(self) -> None:
        payload = {"name": "abc", "email": "nope"}
        first = first_error(PayloadKind.REGISTER, payload)
        for _ in range(3):
            self.assertEqual(first_error(PayloadKind.REGISTER, payload), first)


class TestLoginValidation(unittest.TestCase):
    """Login payloads: email then password; name is not accepted."""

    def test_valid_payload_parses(self) -> None:
        body = validate_payload(PayloadKind.LOGIN, {"email": "b@mail.com", "password": "12345"})
        self.assertIsInstance(body, LoginRequest)

    def test_missing_password(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.LOGIN, {"email": "b@mail.com"}),
            '"password" is required',
        )

    def test_empty_email(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.LOGIN, {"email": "", "password": "12345"}),
            '"email" is not allowed to be empty',
        )

    def test_email_reported_before_password(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.LOGIN, {"email": "bad", "password": "1"}),
            '"email" must be a valid email',
        )

    def test_name_not_allowed(self) -> None:
        self.assertEqual(
            first_error(
                PayloadKind.LOGIN,
                {"email": "b@mail.com", "password": "12345", "name": "Bashar Khadra"},
            ),
            '"name" is not allowed',
        )


class TestUniqueValidation(unittest.TestCase):
    """Uniqueness-check payloads carry only email."""

    def test_missing_email(self) -> None:
        self.assertEqual(first_error(PayloadKind.UNIQUE, {}), '"email" is required')

    def test_empty_email(self) -> None:
        self.assertEqual(
            first_error(PayloadKind.UNIQUE, {"email": ""}),
            '"email" is not allowed to be empty',
        )

    def test_valid_email(self) -> None:
        self.assertIsNone(first_error(PayloadKind.UNIQUE, {"email": "b@mail.com"}))


class TestValidatePayloadRaises(unittest.TestCase):
    """validate_payload raises ValidationError carrying the first message and status 400."""

    def test_raises_with_message(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_payload(PayloadKind.REGISTER, {})
        self.assertEqual(ctx.exception.message, '"name" is required')
        self.assertEqual(ctx.exception.status_code, 400)

    def test_first_error_matches_raised_message(self) -> None:
        for kind, payload in (
            (PayloadKind.REGISTER, {"name": "abc"}),
            (PayloadKind.LOGIN, {"email": "b@mail.com", "password": 5}),
            (PayloadKind.UNIQUE, {"email": ""}),
        ):
            with self.assertRaises(ValidationError) as ctx:
                validate_payload(kind, payload)
            self.assertEqual(first_error(kind, payload), ctx.exception.message)


if __name__ == "__main__":
    unittest.main()
