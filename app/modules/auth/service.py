from supabase import Client
from app.modules.auth.schemas import LoginRequest, SignupRequest, SessionResponse
from app.modules.profiles.service import ProfileService
from fastapi import HTTPException
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

AUTH_DISABLED_MESSAGE = "Missing SUPABASE_URL or SUPABASE_ANON_KEY. Configure your environment and reload."
MISSING_CREDENTIALS_MESSAGE = "Email and password are required."
DEFAULT_DISPLAY_NAME = "User"


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def first_name_from(user: Any) -> str:
    """Display name for a Supabase user.

    first_name metadata, else the first word of full_name (or name)
    metadata, else the local part of the email, else "User".
    """
    meta = _field(user, "user_metadata")
    if not isinstance(meta, dict):
        meta = {}
    full_name = _text(meta.get("full_name")) or _text(meta.get("name"))
    first_meta = _text(meta.get("first_name")) or (full_name.split()[0] if full_name else "")
    if first_meta:
        return first_meta

    email = _text(_field(user, "email"))
    prefix = email.split("@")[0]
    return prefix or DEFAULT_DISPLAY_NAME


class AuthService:
    def __init__(self, supabase: Optional[Client], store: Optional[Client] = None):
        self.supabase = supabase
        self.store = store

    @property
    def enabled(self) -> bool:
        return self.supabase is not None

    def _require_enabled(self, email: Optional[str], password: Optional[str]) -> None:
        if not self.enabled:
            raise HTTPException(status_code=503, detail=AUTH_DISABLED_MESSAGE)
        if not email or not password:
            raise HTTPException(status_code=400, detail=MISSING_CREDENTIALS_MESSAGE)

    def _session_response(self, auth_response: Any, fallback_email: Optional[str]) -> SessionResponse:
        user = auth_response.user
        session = getattr(auth_response, "session", None)
        return SessionResponse(
            user_id=user.id,
            email=user.email or fallback_email or "",
            display_name=first_name_from(user),
            access_token=session.access_token if session else None,
        )

    def login(self, login_data: LoginRequest) -> SessionResponse:
        """Authenticate user using Supabase Auth"""
        self._require_enabled(login_data.email, login_data.password)
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            logger.info(f"Login failed for {login_data.email}: {e}")
            raise HTTPException(status_code=401, detail=str(e) or "Authentication failed")

        if not auth_response.user:
            raise HTTPException(status_code=401, detail="Authentication failed")
        return self._session_response(auth_response, login_data.email)

    def signup(self, signup_data: SignupRequest) -> SessionResponse:
        """Register a new user and create their profile row"""
        self._require_enabled(signup_data.email, signup_data.password)
        user_metadata = {}
        if signup_data.full_name:
            user_metadata["full_name"] = signup_data.full_name
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": signup_data.email,
                "password": signup_data.password,
                "options": {
                    "data": user_metadata
                }
            })
        except Exception as e:
            logger.info(f"Sign up failed for {signup_data.email}: {e}")
            raise HTTPException(status_code=400, detail=str(e) or "Authentication failed")

        if not auth_response.user:
            raise HTTPException(status_code=400, detail="Authentication failed")

        response = self._session_response(auth_response, signup_data.email)
        if self.store is not None:
            result = ProfileService(self.store).create_profile(response.user_id, response.email)
            if not result.ok:
                logger.warning(f"Profile not created for {response.user_id}: {result.error}")
        return response

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from a Supabase access token"""
        client = self.supabase or self.store
        if client is None:
            raise HTTPException(status_code=503, detail=AUTH_DISABLED_MESSAGE)
        try:
            user_response = client.auth.get_user(jwt=token)
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")

        if not user_response or not user_response.user:
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        user = user_response.user
        return {
            "id": user.id,
            "email": user.email,
            "display_name": first_name_from(user),
            "user_metadata": user.user_metadata or {},
        }
