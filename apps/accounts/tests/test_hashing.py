import pytest

from apps.accounts.services import DjangoCredentialHasher
from apps.accounts.services.contracts import CredentialHasher
from apps.accounts.services.exceptions import CredentialHasherError


class TestDjangoCredentialHasher:
    """Tests for the Django-backed hasher."""

    def test_hash_is_not_plaintext(self, hasher):
        assert hasher.hash('Secret123!') != 'Secret123!'

    def test_hash_is_salted(self, hasher):
        """Same plaintext gives different digests."""
        assert hasher.hash('Secret123!') != hasher.hash('Secret123!')

    def test_verify_match(self, hasher):
        digest = hasher.hash('Secret123!')

        assert hasher.verify('Secret123!', digest) is True

    def test_verify_mismatch_returns_false(self, hasher):
        digest = hasher.hash('Secret123!')

        assert hasher.verify('wrong', digest) is False

    @pytest.mark.parametrize('digest', ['', 'not-a-digest', 'nosuchalgo$1$abc', 'md5$garbage', None])
    def test_verify_malformed_digest_raises(self, hasher, digest):
        with pytest.raises(CredentialHasherError):
            hasher.verify('Secret123!', digest)

    def test_satisfies_contract(self):
        assert isinstance(DjangoCredentialHasher(), CredentialHasher)

    def test_contract_rejects_partial_hasher(self):
        class HashOnly:
            def hash(self, plaintext):
                return plaintext

        assert not isinstance(HashOnly(), CredentialHasher)
