"""
In-memory stores for users, receipts and the shared company state.
API code depends on the Protocols, so a database-backed implementation can
replace these without touching the calculators.
"""

import threading
from dataclasses import replace
from typing import Iterable, Protocol

from app.core.tax_rules.cit import CompanyStatus
from app.core.tax_rules.vat import Receipt
from app.models.user import User, MOCK_USERS


class UserRepository(Protocol):
    def add(self, user: User) -> User: ...

    def update(self, user: User) -> User: ...

    def get(self, user_id: str) -> User | None: ...

    def get_by_email(self, email: str) -> User | None: ...

    def list(self) -> list[User]: ...


class ReceiptRepository(Protocol):
    def add(self, receipt: Receipt) -> Receipt: ...

    def list(self) -> list[Receipt]: ...


class InMemoryUserRepository:
    def __init__(self, users: Iterable[User] = MOCK_USERS):
        self._lock = threading.Lock()
        self._users: dict[str, User] = {u.id: u for u in users}

    def add(self, user: User) -> User:
        with self._lock:
            if user.id in self._users:
                raise ValueError(f"User {user.id} already exists")
            if any(u.email.lower() == user.email.lower() for u in self._users.values()):
                raise ValueError(f"A user with email {user.email} already exists")
            self._users[user.id] = user
        return user

    def update(self, user: User) -> User:
        with self._lock:
            if user.id not in self._users:
                raise KeyError(user.id)
            self._users[user.id] = user
        return user

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        email = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == email:
                return user
        return None

    def list(self) -> list[User]:
        with self._lock:
            return list(self._users.values())


class InMemoryReceiptRepository:
    """Receipt ledger. list() returns newest first."""

    def __init__(self):
        self._lock = threading.Lock()
        self._receipts: list[Receipt] = []

    def add(self, receipt: Receipt) -> Receipt:
        with self._lock:
            self._receipts.append(receipt)
        return receipt

    def list(self) -> list[Receipt]:
        with self._lock:
            return list(reversed(self._receipts))


class CompanyStateStore:
    """Holds the latest classification verdict and the output VAT collected."""

    def __init__(self):
        self._lock = threading.Lock()
        self._status = CompanyStatus.UNKNOWN
        self._output_vat = 0.0

    @property
    def status(self) -> CompanyStatus:
        return self._status

    def set_status(self, status: CompanyStatus) -> CompanyStatus:
        with self._lock:
            self._status = status
        return status

    @property
    def output_vat(self) -> float:
        return self._output_vat

    def set_output_vat(self, amount: float) -> float:
        with self._lock:
            self._output_vat = amount
        return amount


def update_user(repo: UserRepository, user_id: str, **changes) -> User:
    """Apply field changes to a stored user and save the new record."""
    user = repo.get(user_id)
    if user is None:
        raise KeyError(user_id)
    return repo.update(replace(user, **changes))
