"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidInputError,
    AccountConflictError,
    AccountNotFoundError,
    InvalidCredentialError,
    PasswordVerificationError,
    AccountLookupError,
    AccountCreateError,
    AccountUpdateError,
    AccountDeleteError,
    AccountStoreError,
    CredentialHasherError,
)
from .contracts import AccountStore, CredentialHasher, FieldValidator
from .account_service import AccountService, AccountView, build_account_service
from .hashing import DjangoCredentialHasher
from .store import DjangoAccountStore
from .validators import AccountFieldValidator

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidInputError',
    'AccountConflictError',
    'AccountNotFoundError',
    'InvalidCredentialError',
    'PasswordVerificationError',
    'AccountLookupError',
    'AccountCreateError',
    'AccountUpdateError',
    'AccountDeleteError',
    'AccountStoreError',
    'CredentialHasherError',
    # Collaborator contracts
    'AccountStore',
    'CredentialHasher',
    'FieldValidator',
    # Services
    'AccountService',
    'AccountView',
    'build_account_service',
    # Default collaborators
    'DjangoCredentialHasher',
    'DjangoAccountStore',
    'AccountFieldValidator',
]
