"""Credential storage and comparison.

Call sites only see ``CredentialVerifier``; switching ``PASSWORD_SCHEME`` from
``plain`` to ``hash`` changes how secrets are stored and checked without
touching them.
"""

from __future__ import annotations

from typing import Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import ValidationError


class CredentialVerifier(Protocol):
    def encode(self, secret: str) -> str:
        """Value to persist for ``secret``."""

        raise NotImplementedError

    def verify(self, stored: str, supplied: str) -> bool:
        raise NotImplementedError


class PlaintextVerifier:
    """Stores secrets as given and compares them exactly."""

    def encode(self, secret: str) -> str:
        return secret

    def verify(self, stored: str, supplied: str) -> bool:
        return stored == supplied


class HashedVerifier:
    """Salted hashes via werkzeug."""

    def encode(self, secret: str) -> str:
        return generate_password_hash(secret)

    def verify(self, stored: str, supplied: str) -> bool:
        try:
            return check_password_hash(stored, supplied)
        except ValueError:
            # plaintext or corrupted values left over from a previous scheme
            return False


def build_verifier(scheme: str) -> CredentialVerifier:
    scheme = (scheme or "plain").lower()
    if scheme == "plain":
        return PlaintextVerifier()
    if scheme == "hash":
        return HashedVerifier()
    raise ValidationError(f"Unknown password scheme: {scheme}")
