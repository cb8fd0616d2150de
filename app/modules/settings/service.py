from supabase import Client
from app.core.results import StoreResult, describe_error, from_exception, require
from app.modules.settings.schemas import UserSettingResponse
from typing import List
import logging

logger = logging.getLogger(__name__)


class UserSettingsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_user_setting(self, user_id: str, setting_name: str) -> StoreResult[str]:
        """Get the value of a named setting"""
        invalid = require(user_id=user_id, name=setting_name)
        if invalid is not None:
            return invalid
        try:
            result = self.supabase.table("user_settings")\
                .select("value")\
                .eq("user_id", user_id)\
                .eq("name", setting_name)\
                .maybe_single()\
                .execute()
            if result is None or not result.data or result.data.get("value") is None:
                return StoreResult.missing("Setting not found")
            return StoreResult.success(result.data["value"])
        except Exception as e:
            logger.error(f"Error fetching user setting: {describe_error(e)}")
            return from_exception(e)

    def set_user_setting(self, user_id: str, setting_name: str, value: str) -> StoreResult[None]:
        """Create or replace a named setting (last write wins)"""
        invalid = require(user_id=user_id, name=setting_name)
        if invalid is not None:
            return invalid
        if value is None:
            return StoreResult.invalid("value is required")
        try:
            self.supabase.table("user_settings").upsert({
                "user_id": user_id,
                "name": setting_name,
                "value": value,
            }, on_conflict="user_id,name").execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error setting user setting: {describe_error(e)}")
            return from_exception(e)

    def list_user_settings(self, user_id: str) -> StoreResult[List[UserSettingResponse]]:
        """List every setting stored for a user"""
        invalid = require(user_id=user_id)
        if invalid is not None:
            return invalid
        try:
            result = self.supabase.table("user_settings")\
                .select("name, value, updated_at")\
                .eq("user_id", user_id)\
                .execute()
            return StoreResult.success([UserSettingResponse(**row) for row in result.data or []])
        except Exception as e:
            logger.error(f"Error listing user settings: {describe_error(e)}")
            return from_exception(e)

    def delete_user_setting(self, user_id: str, setting_name: str) -> StoreResult[None]:
        """Delete a named setting"""
        invalid = require(user_id=user_id, name=setting_name)
        if invalid is not None:
            return invalid
        try:
            self.supabase.table("user_settings")\
                .delete()\
                .eq("user_id", user_id)\
                .eq("name", setting_name)\
                .execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error deleting user setting: {describe_error(e)}")
            return from_exception(e)
