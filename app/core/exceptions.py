"""Startup configuration errors.

These are the only errors allowed to escape at import/startup time; runtime
store failures are reported through :class:`app.core.results.StoreResult`.
"""


class ConfigurationError(RuntimeError):
    """Required configuration is missing or unusable."""


class StoreConfigurationError(ConfigurationError):
    """SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not set."""


class CipherConfigurationError(ConfigurationError):
    """ENCRYPTION_SECRET is not set."""


class CredentialDecryptError(ValueError):
    """Ciphertext was malformed, tampered with, or encrypted under another key."""
