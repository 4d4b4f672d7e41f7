"""
Collaborator contracts for the account service.

The service only talks to these structural types, so the Django-backed
defaults can be swapped for fakes in tests.
"""

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from apps.accounts.models import Account


@runtime_checkable
class AccountStore(Protocol):
    """
    Persistence boundary for accounts.

    Lookups return None when absent; mutations return affected row counts.
    Backend faults are raised as AccountStoreError.
    """

    def find_by_email(self, email: str) -> Optional[Account]: ...

    def find_all(self) -> Sequence[Account]: ...

    def insert(self, *, email: str, nickname: str, password: str) -> Account: ...

    def update_by_email(self, email: str, fields: dict[str, Any]) -> int: ...

    def delete_by_email(self, email: str) -> int: ...


@runtime_checkable
class CredentialHasher(Protocol):
    """One-way password hashing with a verification counterpart."""

    def hash(self, plaintext: str) -> str: ...

    def verify(self, plaintext: str, digest: str) -> bool: ...


@runtime_checkable
class FieldValidator(Protocol):
    """Field rules. Each method raises django ValidationError on failure."""

    def validate_email(self, value: str) -> None: ...

    def validate_nickname(self, value: str) -> None: ...

    def validate_password(self, value: str) -> None: ...
