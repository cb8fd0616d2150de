from fastapi import APIRouter, Depends, HTTPException
from app.core.crypto import CredentialCipher
from app.core.dependencies import get_current_user_id, get_credential_cipher, raise_for_result
from app.core.exceptions import CredentialDecryptError
from app.core.results import StoreStatus
from app.database.supabase_client import get_supabase
from app.modules.api_keys.schemas import ApiKeyStore, ApiKeyStatus
from app.modules.api_keys.service import ApiKeyService
from supabase import Client
from typing import Dict, List

router = APIRouter(prefix="/api-keys", tags=["api-keys"])


def get_api_key_service(supabase: Client = Depends(get_supabase)) -> ApiKeyService:
    return ApiKeyService(supabase)


def mask_key(plaintext: str) -> str:
    """Keep only the last four characters of a secret for display"""
    if len(plaintext) <= 8:
        return "*" * len(plaintext)
    return "*" * 4 + plaintext[-4:]


@router.get("", response_model=List[ApiKeyStatus])
async def list_api_keys(
    user_data: Dict = Depends(get_current_user_id),
    service: ApiKeyService = Depends(get_api_key_service)
):
    """Providers the current user has stored a key for"""
    return raise_for_result(service.list_api_key_providers(user_data["id"])).value


@router.put("/{provider}", response_model=ApiKeyStatus)
async def store_api_key(
    provider: str,
    body: ApiKeyStore,
    user_data: Dict = Depends(get_current_user_id),
    service: ApiKeyService = Depends(get_api_key_service),
    cipher: CredentialCipher = Depends(get_credential_cipher)
):
    """Encrypt and store a provider API key"""
    raise_for_result(service.store_api_key(user_data["id"], provider, cipher.encrypt(body.api_key)))
    return ApiKeyStatus(provider=provider, configured=True, hint=mask_key(body.api_key))


@router.get("/{provider}", response_model=ApiKeyStatus)
async def get_api_key_status(
    provider: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ApiKeyService = Depends(get_api_key_service),
    cipher: CredentialCipher = Depends(get_credential_cipher)
):
    """Whether a key is stored for the provider; the plaintext is never returned"""
    result = service.get_api_key(user_data["id"], provider)
    if result.status == StoreStatus.NOT_FOUND:
        return ApiKeyStatus(provider=provider, configured=False)
    raise_for_result(result)
    try:
        hint = mask_key(cipher.decrypt(result.value))
    except CredentialDecryptError:
        raise HTTPException(status_code=409, detail="Stored key cannot be decrypted; store it again")
    return ApiKeyStatus(provider=provider, configured=True, hint=hint)


@router.delete("/{provider}", status_code=204)
async def delete_api_key(
    provider: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ApiKeyService = Depends(get_api_key_service)
):
    raise_for_result(service.delete_api_key(user_data["id"], provider))
    return None
