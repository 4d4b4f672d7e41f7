"""Credential hashing backed by Django's password hashers."""

from django.contrib.auth.hashers import check_password, identify_hasher, make_password

from .exceptions import CredentialHasherError


class DjangoCredentialHasher:
    """
    Salted one-way hashing using the hashers in PASSWORD_HASHERS.

    Two hashes of the same plaintext differ; use verify() to compare.
    """

    def hash(self, plaintext: str) -> str:
        return make_password(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check plaintext against a stored digest.

        Returns False on mismatch.

        Raises:
            CredentialHasherError: If the digest is malformed or its
                algorithm is not installed
        """
        # A known algorithm prefix with a broken body fails in check_password
        try:
            identify_hasher(digest)
            return check_password(plaintext, digest)
        except (TypeError, ValueError) as e:
            raise CredentialHasherError("Malformed password digest") from e
