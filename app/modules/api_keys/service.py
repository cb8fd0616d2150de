from supabase import Client
from app.core.results import StoreResult, describe_error, from_exception, require
from app.modules.api_keys.schemas import ApiKeyStatus
from typing import List
import logging

logger = logging.getLogger(__name__)

GITHUB_PROVIDER = "github"


class ApiKeyService:
    """Provider API keys, stored and returned as ciphertext only.

    Callers encrypt before `store_api_key` and decrypt after `get_api_key`
    (see app.core.crypto).
    """

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def store_api_key(self, user_id: str, provider: str, key_ciphertext: str) -> StoreResult[None]:
        invalid = require(user_id=user_id, provider=provider, key_ciphertext=key_ciphertext)
        if invalid is not None:
            return invalid
        try:
            self.supabase.table("api_keys").upsert({
                "user_id": user_id,
                "provider": provider,
                "key_ciphertext": key_ciphertext,
            }, on_conflict="user_id,provider").execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error storing API key: {describe_error(e)}")
            return from_exception(e)

    def get_api_key(self, user_id: str, provider: str) -> StoreResult[str]:
        invalid = require(user_id=user_id, provider=provider)
        if invalid is not None:
            return invalid
        try:
            result = self.supabase.table("api_keys")\
                .select("key_ciphertext")\
                .eq("user_id", user_id)\
                .eq("provider", provider)\
                .maybe_single()\
                .execute()
            if result is None or not result.data or not result.data.get("key_ciphertext"):
                return StoreResult.missing("API key not found")
            return StoreResult.success(result.data["key_ciphertext"])
        except Exception as e:
            logger.error(f"Error fetching API key: {describe_error(e)}")
            return from_exception(e)

    def delete_api_key(self, user_id: str, provider: str) -> StoreResult[None]:
        invalid = require(user_id=user_id, provider=provider)
        if invalid is not None:
            return invalid
        try:
            self.supabase.table("api_keys")\
                .delete()\
                .eq("user_id", user_id)\
                .eq("provider", provider)\
                .execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error deleting API key: {describe_error(e)}")
            return from_exception(e)

    def list_api_key_providers(self, user_id: str) -> StoreResult[List[ApiKeyStatus]]:
        """Providers the user has a key for; ciphertext is not selected"""
        invalid = require(user_id=user_id)
        if invalid is not None:
            return invalid
        try:
            result = self.supabase.table("api_keys")\
                .select("provider, updated_at")\
                .eq("user_id", user_id)\
                .execute()
            return StoreResult.success([
                ApiKeyStatus(provider=row["provider"], configured=True, updated_at=row.get("updated_at"))
                for row in result.data or []
            ])
        except Exception as e:
            logger.error(f"Error listing API keys: {describe_error(e)}")
            return from_exception(e)

    # GitHub token helpers: same rows, provider fixed to "github"

    def store_github_token(self, user_id: str, token_ciphertext: str) -> StoreResult[None]:
        return self.store_api_key(user_id, GITHUB_PROVIDER, token_ciphertext)

    def get_github_token(self, user_id: str) -> StoreResult[str]:
        return self.get_api_key(user_id, GITHUB_PROVIDER)

    def delete_github_token(self, user_id: str) -> StoreResult[None]:
        return self.delete_api_key(user_id, GITHUB_PROVIDER)
