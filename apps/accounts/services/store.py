"""Account persistence on the Django ORM."""

import logging
from typing import Any, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.accounts.models import Account
from .exceptions import AccountStoreError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({'nickname', 'password'})


class DjangoAccountStore:
    """
    Account store over the `accounts` table.

    Email matching is exact. The unique index on email is the only
    guard against concurrent creates of the same account.
    """

    def find_by_email(self, email: str) -> Optional[Account]:
        try:
            return Account.objects.filter(email=email).first()
        except DatabaseError as e:
            raise AccountStoreError(f"find_by_email failed: {e}") from e

    def find_all(self) -> list[Account]:
        try:
            return list(Account.objects.all())
        except DatabaseError as e:
            raise AccountStoreError(f"find_all failed: {e}") from e

    def insert(self, *, email: str, nickname: str, password: str) -> Account:
        # IntegrityError (lost race on the unique email) is a DatabaseError
        try:
            with transaction.atomic():
                return Account.objects.create(email=email, nickname=nickname, password=password)
        except DatabaseError as e:
            raise AccountStoreError(f"insert failed: {e}") from e

    def update_by_email(self, email: str, fields: dict[str, Any]) -> int:
        """
        Apply `fields` to the account with this email.

        Returns:
            Number of matched rows (0 or 1)
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise AccountStoreError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        try:
            return Account.objects.filter(email=email).update(updated_at=timezone.now(), **fields)
        except DatabaseError as e:
            raise AccountStoreError(f"update failed: {e}") from e

    def delete_by_email(self, email: str) -> int:
        try:
            deleted, _ = Account.objects.filter(email=email).delete()
        except DatabaseError as e:
            raise AccountStoreError(f"delete failed: {e}") from e
        logger.debug("Deleted %d account row(s)", deleted)
        return deleted
