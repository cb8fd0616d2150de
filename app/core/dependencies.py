"""
Core dependencies for route protection and store access
"""

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.crypto import CredentialCipher, get_cipher
from app.core.results import StoreResult, StoreStatus
from app.database.supabase_client import get_supabase, get_supabase_auth
from app.modules.auth.service import AuthService
from supabase import Client
from typing import Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

_STATUS_CODES = {
    StoreStatus.NOT_FOUND: 404,
    StoreStatus.VALIDATION_ERROR: 400,
    StoreStatus.PERMISSION_DENIED: 403,
    StoreStatus.TRANSPORT_ERROR: 502,
}


def get_auth_service(
    auth_client: Optional[Client] = Depends(get_supabase_auth),
    supabase: Client = Depends(get_supabase)
) -> AuthService:
    return AuthService(auth_client, supabase)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )
    token = credentials.credentials
    return auth_service.get_current_user(token)


def get_credential_cipher() -> CredentialCipher:
    return get_cipher()


def raise_for_result(result: StoreResult, not_found_detail: Optional[str] = None) -> StoreResult:
    """Turn a failed StoreResult into an HTTPException; pass successes through"""
    if result.ok:
        return result
    status_code = _STATUS_CODES.get(result.status, 500)
    if result.status == StoreStatus.TRANSPORT_ERROR:
        logger.error(f"Store unavailable: {result.error}")
        raise HTTPException(status_code=status_code, detail="Settings store unavailable")
    detail = not_found_detail if result.not_found and not_found_detail else result.error
    raise HTTPException(status_code=status_code, detail=detail or result.status.value)
