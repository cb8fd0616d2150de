from supabase import create_client, Client
from app.config import Settings, settings
from app.core.exceptions import StoreConfigurationError
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def create_store_client(config: Settings) -> Client:
    """Build the service-role client used by the settings/identity store.

    Raises StoreConfigurationError when the URL or service key is missing.
    """
    if not config.supabase_url or not config.supabase_service_role_key:
        raise StoreConfigurationError("Missing Supabase environment variables: "
                                      "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required")
    return create_client(config.supabase_url, config.supabase_service_role_key)


def create_auth_client(config: Settings) -> Optional[Client]:
    """Build the anon-key client used for Supabase Auth, or None when not configured."""
    if not config.auth_enabled:
        logger.warning("Missing SUPABASE_URL or SUPABASE_ANON_KEY; auth is disabled")
        return None
    return create_client(config.supabase_url, config.supabase_anon_key)


class SupabaseClient:
    """Holds the clients built by the application entry point.

    Nothing here connects at import time; `init` is called from the startup
    hook and `reset_client` from shutdown and tests.
    """
    _client: Optional[Client] = None
    _auth_client: Optional[Client] = None

    @classmethod
    def init(cls, config: Settings = settings) -> None:
        cls._client = create_store_client(config)
        cls._auth_client = create_auth_client(config)
        logger.info("Supabase clients initialized")

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            raise StoreConfigurationError("Store client requested before application startup")
        return cls._client

    @classmethod
    def get_auth_client(cls) -> Optional[Client]:
        """Client with the anon key; None when auth is disabled."""
        return cls._auth_client

    @classmethod
    def set_clients(cls, client: Optional[Client], auth_client: Optional[Client] = None) -> None:
        cls._client = client
        cls._auth_client = auth_client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._auth_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_supabase_auth() -> Optional[Client]:
    return SupabaseClient.get_auth_client()
