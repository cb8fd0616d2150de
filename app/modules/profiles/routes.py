from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id, raise_for_result
from app.database.supabase_client import get_supabase
from app.modules.profiles.schemas import ProfileResponse
from app.modules.profiles.service import ProfileService
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("", response_model=ProfileResponse)
async def get_profile(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the current user's profile"""
    return raise_for_result(service.get_profile(user_data["id"]), "Profile not found").value
