"""Account service - lookup, listing, creation, update and deletion of accounts."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _

from apps.accounts.models import Account
from .contracts import AccountStore, CredentialHasher, FieldValidator
from .exceptions import (
    AccountConflictError,
    AccountCreateError,
    AccountDeleteError,
    AccountLookupError,
    AccountNotFoundError,
    AccountStoreError,
    AccountUpdateError,
    AccountsServiceError,
    CredentialHasherError,
    InvalidCredentialError,
    InvalidInputError,
    PasswordVerificationError,
)
from .hashing import DjangoCredentialHasher
from .store import DjangoAccountStore
from .validators import AccountFieldValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountView:
    """Caller-safe projection of an account. Never carries the digest."""
    email: str
    nickname: str

    @classmethod
    def from_account(cls, account: Account) -> 'AccountView':
        return cls(email=account.email, nickname=account.nickname)


def _validation_message(error: ValidationError) -> str:
    return ' '.join(error.messages)


class AccountService:
    """
    Orchestrates the account operations over a store, a hasher and field
    validators.

    Holds no mutable state of its own, so one instance may serve
    concurrent requests. Every check runs before the store is mutated.
    """

    def __init__(
        self,
        *,
        store: AccountStore,
        hasher: CredentialHasher,
        validator: FieldValidator,
        hash_before_validation: bool = True,
    ):
        self.store = store
        self.hasher = hasher
        self.validator = validator
        self.hash_before_validation = hash_before_validation

    # =========================================================================
    # Queries
    # =========================================================================

    def get_account_by_email(self, email: str) -> AccountView:
        """
        Look up one account.

        Raises:
            AccountNotFoundError: If no account has this email
            AccountLookupError: If the store fails
        """
        try:
            account = self.store.find_by_email(email)
        except AccountStoreError as e:
            logger.warning("Account lookup failed: %s", e)
            raise AccountLookupError(_('Failed to look up account.'), cause=e) from e

        if account is None:
            raise AccountNotFoundError(
                _('No account with email %(email)s.') % {'email': email}
            )

        return AccountView.from_account(account)

    def list_accounts(self) -> Sequence[Account]:
        """
        Return every stored account as the store returned it.

        An empty store is an error, not an empty result.

        Raises:
            AccountNotFoundError: If there are no accounts
            AccountLookupError: If the store fails
        """
        try:
            accounts = self.store.find_all()
        except AccountStoreError as e:
            logger.warning("Account listing failed: %s", e)
            raise AccountLookupError(_('Failed to look up accounts.'), cause=e) from e

        if not accounts:
            raise AccountNotFoundError(_('No accounts are registered.'))

        return accounts

    # =========================================================================
    # Mutations
    # =========================================================================

    def create_account(self, *, email: str, nickname: str, password: str) -> AccountView:
        """
        Register a new account.

        Checks run in order and the first failure wins:
        1. Required fields present
        2. Email not yet registered
        3. Email format
        4. Nickname rules
        5. Password strength

        Args:
            email: Account email
            nickname: Display name
            password: Plaintext password (hashed, never stored or logged)

        Returns:
            AccountView of the created account

        Raises:
            InvalidInputError: If a field is empty or invalid
            AccountConflictError: If the email is already registered
            AccountCreateError: If the store fails
        """
        digest = self.hasher.hash(password) if self.hash_before_validation else None

        for field, value in (('email', email), ('nickname', nickname), ('password', password)):
            if not value:
                raise InvalidInputError(
                    _('%(field)s must not be empty.') % {'field': field},
                    field=field,
                )

        try:
            existing = self.store.find_by_email(email)
        except AccountStoreError as e:
            logger.warning("Uniqueness check failed during account creation: %s", e)
            raise AccountCreateError(_('Failed to create account.'), cause=e) from e

        if existing is not None:
            raise AccountConflictError(_('Email is already registered.'))

        self._validate('email', email, self.validator.validate_email)
        self._validate('nickname', nickname, self.validator.validate_nickname)
        self._validate('password', password, self.validator.validate_password)

        if digest is None:
            digest = self.hasher.hash(password)

        try:
            account = self.store.insert(email=email, nickname=nickname, password=digest)
        except AccountStoreError as e:
            logger.warning("Account insert failed: %s", e)
            raise AccountCreateError(_('Failed to create account.'), cause=e) from e

        logger.info("Created account %s", account.email)
        return AccountView.from_account(account)

    def update_account(self, email: str, *, nickname: str, password: Optional[str] = None) -> None:
        """
        Replace the nickname, and the password when one is given.

        Raises:
            InvalidInputError: If the nickname is empty or a field is invalid
            AccountNotFoundError: If no account has this email
            AccountUpdateError: If the store fails
        """
        if not nickname:
            raise InvalidInputError(_('nickname must not be empty.'), field='nickname')

        if not password:
            self._validate('nickname', nickname, self.validator.validate_nickname)
            changes = {'nickname': nickname}
        else:
            digest = self.hasher.hash(password) if self.hash_before_validation else None

            self._validate('password', password, self.validator.validate_password)
            self._validate('nickname', nickname, self.validator.validate_nickname)

            if digest is None:
                digest = self.hasher.hash(password)
            changes = {'nickname': nickname, 'password': digest}

        try:
            modified = self.store.update_by_email(email, changes)
        except AccountStoreError as e:
            logger.warning("Account update failed: %s", e)
            raise AccountUpdateError(
                _('Failed to update account: %(reason)s') % {'reason': e},
                cause=e,
            ) from e

        if not modified:
            raise AccountNotFoundError(
                _('No account with email %(email)s.') % {'email': email}
            )

        logger.info("Updated account %s (fields: %s)", email, ', '.join(sorted(changes)))

    def delete_account(self, email: str, typed_password: str) -> None:
        """
        Delete an account after re-checking its password.

        Any failure is reported as AccountDeleteError; the specific reason
        (not found, wrong password, store fault) is kept as `cause`.

        Raises:
            AccountDeleteError: If the account could not be deleted
        """
        try:
            self._delete_account(email, typed_password)
        except (AccountsServiceError, AccountStoreError) as e:
            logger.warning("Account deletion failed: %r", e)
            raise AccountDeleteError(_('Failed to delete account.'), cause=e) from e

        logger.info("Deleted account %s", email)

    def _delete_account(self, email: str, typed_password: str) -> None:
        account = self.store.find_by_email(email)
        if account is None:
            raise AccountNotFoundError(
                _('No account with email %(email)s.') % {'email': email}
            )

        if not self.verify_password(typed_password, account.password):
            raise InvalidCredentialError(_('Password does not match.'))

        deleted = self.store.delete_by_email(email)
        if not deleted:
            raise AccountNotFoundError(
                _('No account with email %(email)s.') % {'email': email}
            )

    # =========================================================================
    # Credentials
    # =========================================================================

    def verify_password(self, plaintext: str, digest: str) -> bool:
        """
        Check a plaintext password against a stored digest.

        Raises:
            PasswordVerificationError: If the digest cannot be checked
        """
        try:
            return self.hasher.verify(plaintext, digest)
        except CredentialHasherError as e:
            raise PasswordVerificationError(_('Failed to verify password.'), cause=e) from e

    # =========================================================================
    # Helpers
    # =========================================================================

    def _validate(self, field: str, value: str, validate) -> None:
        try:
            validate(value)
        except ValidationError as e:
            raise InvalidInputError(_validation_message(e), field=field, cause=e) from e


def build_account_service() -> AccountService:
    """Wire the service to the Django-backed collaborators from settings."""
    return AccountService(
        store=DjangoAccountStore(),
        hasher=DjangoCredentialHasher(),
        validator=AccountFieldValidator(),
        hash_before_validation=settings.ACCOUNTS_HASH_BEFORE_VALIDATION,
    )
