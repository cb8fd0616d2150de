"""
Credential cipher for secrets persisted in the api_keys table.

Secrets are encrypted with Fernet (AES-128-CBC with an HMAC-SHA256 tag and
a random IV per call). The key comes from ENCRYPTION_SECRET: a urlsafe
base64 Fernet key is used as-is, any other passphrase is stretched with
PBKDF2. There is no fallback key; startup fails when none is configured.
"""

import base64
import logging
from functools import lru_cache
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from app.config import settings
from app.core.exceptions import CipherConfigurationError, CredentialDecryptError

logger = logging.getLogger(__name__)


class CredentialCipher:
    """Symmetric encrypt/decrypt of opaque secret strings."""

    # Salt for key derivation (constant, not secret)
    _SALT = b"sparti-credential-cipher-v1"
    _ITERATIONS = 480000

    def __init__(self, passphrase: Optional[str]):
        if not passphrase:
            raise CipherConfigurationError(
                "ENCRYPTION_SECRET is not set; refusing to encrypt credentials without a provisioned key"
            )
        self._fernet = self._derive_fernet(passphrase)

    def _derive_fernet(self, passphrase: str) -> Fernet:
        """Use passphrase as a Fernet key when it is one, otherwise derive a key from it."""
        try:
            return Fernet(passphrase.encode())
        except ValueError:
            kdf = PBKDF2HMAC(
                algorithm=hashes.SHA256(),
                length=32,
                salt=self._SALT,
                iterations=self._ITERATIONS,
            )
            derived_key = base64.urlsafe_b64encode(kdf.derive(passphrase.encode()))
            return Fernet(derived_key)

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext produced by `encrypt`.

        Raises CredentialDecryptError for malformed, tampered or foreign ciphertext.
        """
        try:
            return self._fernet.decrypt(ciphertext.encode("ascii")).decode("utf-8")
        except (InvalidToken, UnicodeError, ValueError) as e:
            logger.error("Failed to decrypt credential ciphertext")
            raise CredentialDecryptError("Invalid credential ciphertext") from e


@lru_cache(maxsize=1)
def get_cipher() -> CredentialCipher:
    """Process-wide cipher built from settings on first use."""
    return CredentialCipher(settings.encryption_secret)


def encrypt_token(token: str) -> str:
    return get_cipher().encrypt(token)


def decrypt_token(ciphertext: str) -> str:
    return get_cipher().decrypt(ciphertext)
