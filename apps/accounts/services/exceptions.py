"""Domain-specific exceptions for accounts services."""

from typing import Optional


class AccountsServiceError(Exception):
    """
    Base exception for accounts services.

    `code` identifies the error kind for callers that branch on it.
    `cause` keeps the original fault for diagnostics; it is never part
    of the message shown to the caller.
    """
    code = 'accounts_error'

    def __init__(self, message: str = '', *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidInputError(AccountsServiceError):
    """Raised when a field is missing or malformed."""
    code = 'invalid_input'

    def __init__(self, message: str, *, field: str, cause: Optional[BaseException] = None):
        super().__init__(message, cause=cause)
        self.field = field


class AccountConflictError(AccountsServiceError):
    """Raised when the email is already registered."""
    code = 'conflict'


class AccountNotFoundError(AccountsServiceError):
    """Raised when no account matches the given email."""
    code = 'not_found'


class InvalidCredentialError(AccountsServiceError):
    """Raised when the typed password does not match."""
    code = 'invalid_credential'


class PasswordVerificationError(AccountsServiceError):
    """Raised when a password could not be verified at all."""
    code = 'verification_failed'


class AccountLookupError(AccountsServiceError):
    """Raised when account lookup fails."""
    code = 'lookup_failed'


class AccountCreateError(AccountsServiceError):
    """Raised when account creation fails."""
    code = 'create_failed'


class AccountUpdateError(AccountsServiceError):
    """Raised when account update fails."""
    code = 'update_failed'


class AccountDeleteError(AccountsServiceError):
    """Raised when account deletion fails."""
    code = 'delete_failed'


# Collaborator faults

class AccountStoreError(Exception):
    """Raised by an account store when the storage backend fails."""
    pass


class CredentialHasherError(Exception):
    """Raised by a credential hasher when a digest is malformed."""
    pass
