"""Credential handling behind a small verifier interface."""
import hmac
from typing import Protocol

from passlib.context import CryptContext

from splitbook.core.config import settings


class CredentialVerifier(Protocol):
    def hash(self, secret: str) -> str:
        ...

    def verify(self, secret: str, stored: str) -> bool:
        ...


class PlaintextVerifier:
    """Stores the secret as given; compatible with existing data files."""

    def hash(self, secret: str) -> str:
        return secret

    def verify(self, secret: str, stored: str) -> bool:
        return hmac.compare_digest(secret.encode("utf-8"), stored.encode("utf-8"))


class HashedVerifier:
    """Salted hashes via passlib."""

    def __init__(self, schemes=("bcrypt",)):
        self.context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, secret: str) -> str:
        return self.context.hash(secret)

    def verify(self, secret: str, stored: str) -> bool:
        try:
            return self.context.verify(secret, stored)
        except ValueError:
            # stored value is not a recognised hash
            return False


def get_verifier(scheme: str | None = None) -> CredentialVerifier:
    """Build the verifier named by CREDENTIAL_SCHEME."""
    scheme = scheme or settings.CREDENTIAL_SCHEME
    if scheme == "plaintext":
        return PlaintextVerifier()
    if scheme == "bcrypt":
        return HashedVerifier()
    raise ValueError(f"Unknown credential scheme: {scheme}")
