from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id, raise_for_result
from app.database.supabase_client import get_supabase
from app.modules.settings.schemas import UserSettingUpdate, UserSettingResponse
from app.modules.settings.service import UserSettingsService
from supabase import Client
from typing import Dict, List

router = APIRouter(prefix="/settings", tags=["settings"])


def get_settings_service(supabase: Client = Depends(get_supabase)) -> UserSettingsService:
    return UserSettingsService(supabase)


@router.get("", response_model=List[UserSettingResponse])
async def list_settings(
    user_data: Dict = Depends(get_current_user_id),
    service: UserSettingsService = Depends(get_settings_service)
):
    return raise_for_result(service.list_user_settings(user_data["id"])).value


@router.get("/{name}", response_model=UserSettingResponse)
async def get_setting(
    name: str,
    user_data: Dict = Depends(get_current_user_id),
    service: UserSettingsService = Depends(get_settings_service)
):
    value = raise_for_result(service.get_user_setting(user_data["id"], name), "Setting not found").value
    return UserSettingResponse(name=name, value=value)


@router.put("/{name}", response_model=UserSettingResponse)
async def set_setting(
    name: str,
    body: UserSettingUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: UserSettingsService = Depends(get_settings_service)
):
    """Create or replace a setting"""
    raise_for_result(service.set_user_setting(user_data["id"], name, body.value))
    return UserSettingResponse(name=name, value=body.value)


@router.delete("/{name}", status_code=204)
async def delete_setting(
    name: str,
    user_data: Dict = Depends(get_current_user_id),
    service: UserSettingsService = Depends(get_settings_service)
):
    raise_for_result(service.delete_user_setting(user_data["id"], name))
    return None
