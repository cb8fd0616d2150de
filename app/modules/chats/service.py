from supabase import Client
from app.core.results import StoreResult, describe_error, from_exception, require
from typing import List
import logging

logger = logging.getLogger(__name__)


class ChatIdService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def link_chat_id_to_user(self, user_id: str, chat_id: str) -> StoreResult[None]:
        """Insert a user/chat link. Not idempotent: repeated calls add rows."""
        invalid = require(user_id=user_id, chat_id=chat_id)
        if invalid is not None:
            return invalid
        try:
            self.supabase.table("chat_ids").insert({
                "user_id": user_id,
                "chat_id": chat_id,
            }).execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error linking chat ID to user: {describe_error(e)}")
            return from_exception(e)

    def get_user_chat_ids(self, user_id: str) -> StoreResult[List[str]]:
        """All chat ids linked to a user; an empty list when there are none"""
        invalid = require(user_id=user_id)
        if invalid is not None:
            return invalid
        try:
            result = self.supabase.table("chat_ids")\
                .select("chat_id")\
                .eq("user_id", user_id)\
                .execute()
            return StoreResult.success([item["chat_id"] for item in result.data or []])
        except Exception as e:
            logger.error(f"Error fetching user chat IDs: {describe_error(e)}")
            return from_exception(e)

    def delete_user_chat_id(self, user_id: str, chat_id: str) -> StoreResult[None]:
        invalid = require(user_id=user_id, chat_id=chat_id)
        if invalid is not None:
            return invalid
        try:
            self.supabase.table("chat_ids")\
                .delete()\
                .eq("user_id", user_id)\
                .eq("chat_id", chat_id)\
                .execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error deleting user chat ID: {describe_error(e)}")
            return from_exception(e)
