"""Tests for the credential cipher."""

import pytest
from cryptography.fernet import Fernet

from app.core import crypto
from app.core.crypto import CredentialCipher
from app.core.exceptions import CipherConfigurationError, CredentialDecryptError


class TestCredentialCipher:

    def test_round_trip(self, cipher):
        secret = "sk-live-0123456789abcdef"
        assert cipher.decrypt(cipher.encrypt(secret)) == secret

    def test_round_trip_unicode_and_empty(self, cipher):
        for secret in ["", "pässwörd ✓", "line\nbreak"]:
            assert cipher.decrypt(cipher.encrypt(secret)) == secret

    def test_ciphertext_is_randomized(self, cipher):
        first = cipher.encrypt("same secret")
        second = cipher.encrypt("same secret")
        assert first != second
        assert cipher.decrypt(first) == cipher.decrypt(second) == "same secret"

    def test_ciphertext_does_not_contain_plaintext(self, cipher):
        assert "ghp_abcdef" not in cipher.encrypt("ghp_abcdef")

    def test_passphrase_is_derived_into_key(self):
        a = CredentialCipher("a plain passphrase")
        b = CredentialCipher("a plain passphrase")
        assert b.decrypt(a.encrypt("token")) == "token"

    def test_fernet_key_used_directly(self):
        key = Fernet.generate_key()
        cipher = CredentialCipher(key.decode())
        assert Fernet(key).decrypt(cipher.encrypt("token").encode()) == b"token"

    @pytest.mark.parametrize("passphrase", [None, ""])
    def test_missing_key_fails_fast(self, passphrase):
        with pytest.raises(CipherConfigurationError):
            CredentialCipher(passphrase)

    def test_malformed_ciphertext_raises(self, cipher):
        with pytest.raises(CredentialDecryptError):
            cipher.decrypt("not-a-token")

    def test_foreign_key_raises(self, cipher):
        other = CredentialCipher("another passphrase")
        with pytest.raises(CredentialDecryptError):
            cipher.decrypt(other.encrypt("token"))


class TestModuleHelpers:

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        crypto.get_cipher.cache_clear()
        yield
        crypto.get_cipher.cache_clear()

    def test_encrypt_token_uses_configured_secret(self, monkeypatch):
        monkeypatch.setattr(crypto.settings, "encryption_secret", "configured secret")
        ciphertext = crypto.encrypt_token("ghp_token")
        assert crypto.decrypt_token(ciphertext) == "ghp_token"
        assert CredentialCipher("configured secret").decrypt(ciphertext) == "ghp_token"

    def test_unset_secret_has_no_default(self, monkeypatch):
        monkeypatch.setattr(crypto.settings, "encryption_secret", None)
        with pytest.raises(CipherConfigurationError):
            crypto.encrypt_token("ghp_token")
