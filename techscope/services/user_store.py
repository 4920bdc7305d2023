"""Credential store: lookup by email and unique insert, backed by SQLAlchemy or memory."""

import logging
import threading
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from techscope.models import User
from techscope.schemas.users import UserRecord
from techscope.services.errors import DuplicateAccountError, StorageFault

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """What the account service needs from persistence."""

    def find_by_email(self, email: str) -> UserRecord | None: ...

    def insert(
        self, name: str, email: str, password_hash: str, is_admin: bool = False
    ) -> UserRecord:
        """Persist a new account. Raises DuplicateAccountError if the email is taken."""
        ...


class SqlUserStore:
    """UserStore over a SQLAlchemy session; uniqueness enforced by the users.email index."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> UserRecord | None:
        try:
            user = self.session.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("User lookup failed")
            raise StorageFault(str(e)) from e
        if user is None:
            return None
        return UserRecord.model_validate(user)

    def insert(
        self, name: str, email: str, password_hash: str, is_admin: bool = False
    ) -> UserRecord:
        user = User(name=name, email=email, password_hash=password_hash, is_admin=is_admin)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            self.session.rollback()
            raise DuplicateAccountError() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("User insert failed")
            raise StorageFault(str(e)) from e
        self.session.refresh(user)
        return UserRecord.model_validate(user)


class InMemoryUserStore:
    """Process-local UserStore with the same uniqueness rule; used in tests and local runs."""

    def __init__(self) -> None:
        self._by_email: dict[str, UserRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> UserRecord | None:
        with self._lock:
            return self._by_email.get(email)

    def insert(
        self, name: str, email: str, password_hash: str, is_admin: bool = False
    ) -> UserRecord:
        with self._lock:
            if email in self._by_email:
                raise DuplicateAccountError()
            record = UserRecord(
                id=self._next_id,
                name=name,
                email=email,
                password_hash=password_hash,
                is_admin=is_admin,
            )
            self._by_email[email] = record
            self._next_id += 1
            return record

    def __len__(self) -> int:
        return len(self._by_email)
