from supabase import Client
from app.core.results import StoreResult, describe_error, from_exception, require
from app.modules.profiles.schemas import ProfileResponse
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_profile(self, user_id: str, email: str) -> StoreResult[None]:
        """Insert the profile row for a newly registered identity"""
        invalid = require(user_id=user_id, email=email)
        if invalid is not None:
            return invalid
        try:
            self.supabase.table("profiles").insert({
                "id": user_id,
                "email": email,
            }).execute()
            return StoreResult.success()
        except Exception as e:
            logger.error(f"Error creating profile: {describe_error(e)}")
            return from_exception(e)

    def get_profile(self, user_id: str) -> StoreResult[ProfileResponse]:
        """Get profile by user ID"""
        invalid = require(user_id=user_id)
        if invalid is not None:
            return invalid
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()
            if result is None or not result.data:
                return StoreResult.missing("Profile not found")
            return StoreResult.success(ProfileResponse(**result.data))
        except Exception as e:
            logger.error(f"Error fetching profile: {describe_error(e)}")
            return from_exception(e)
