import pytest
from unittest.mock import MagicMock

from apps.accounts.models import Account
from apps.accounts.services import (
    AccountFieldValidator,
    AccountService,
    DjangoAccountStore,
    DjangoCredentialHasher,
)


@pytest.fixture
def hasher():
    """Return the Django-backed credential hasher."""
    return DjangoCredentialHasher()


@pytest.fixture
def store():
    """Return the ORM-backed account store."""
    return DjangoAccountStore()


@pytest.fixture
def validator():
    """Return the default field validator."""
    return AccountFieldValidator()


@pytest.fixture
def account_service(store, hasher, validator):
    """Return a service wired to the real collaborators."""
    return AccountService(store=store, hasher=hasher, validator=validator)


@pytest.fixture
def account(db, hasher):
    """Create and return a stored account (password 'TestPass123!')."""
    return Account.objects.create(
        email='testuser@example.com',
        nickname='tester',
        password=hasher.hash('TestPass123!'),
    )


@pytest.fixture
def other_account(db, hasher):
    """Create and return another stored account."""
    return Account.objects.create(
        email='otheruser@example.com',
        nickname='other',
        password=hasher.hash('OtherPass123!'),
    )


@pytest.fixture
def mock_store():
    """Return a store double; configure return values/side effects per test."""
    return MagicMock(spec=DjangoAccountStore)


@pytest.fixture
def mock_hasher():
    """Return a hasher double that hashes to 'digest:<plaintext>'."""
    hasher = MagicMock(spec=DjangoCredentialHasher)
    hasher.hash.side_effect = lambda plaintext: f'digest:{plaintext}'
    hasher.verify.side_effect = lambda plaintext, digest: digest == f'digest:{plaintext}'
    return hasher


@pytest.fixture
def mock_validator():
    """Return a validator double that accepts everything."""
    return MagicMock(spec=AccountFieldValidator)


@pytest.fixture
def service_with_mocks(mock_store, mock_hasher, mock_validator):
    """Return a service whose collaborators are all doubles."""
    return AccountService(store=mock_store, hasher=mock_hasher, validator=mock_validator)
