from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id, raise_for_result
from app.database.supabase_client import get_supabase
from app.modules.chats.schemas import ChatLinkCreate, ChatIdsResponse
from app.modules.chats.service import ChatIdService
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/chats", tags=["chats"])


def get_chat_service(supabase: Client = Depends(get_supabase)) -> ChatIdService:
    return ChatIdService(supabase)


@router.get("", response_model=ChatIdsResponse)
async def list_chat_ids(
    user_data: Dict = Depends(get_current_user_id),
    service: ChatIdService = Depends(get_chat_service)
):
    """Chat ids linked to the current user"""
    return ChatIdsResponse(chat_ids=raise_for_result(service.get_user_chat_ids(user_data["id"])).value)


@router.post("", status_code=201)
async def link_chat_id(
    body: ChatLinkCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: ChatIdService = Depends(get_chat_service)
):
    raise_for_result(service.link_chat_id_to_user(user_data["id"], body.chat_id))
    return {"chat_id": body.chat_id}


@router.delete("/{chat_id}", status_code=204)
async def unlink_chat_id(
    chat_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ChatIdService = Depends(get_chat_service)
):
    raise_for_result(service.delete_user_chat_id(user_data["id"], chat_id))
    return None
