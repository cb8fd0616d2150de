from fastapi import APIRouter, Depends
from app.core.dependencies import get_auth_service, get_current_user_id
from app.modules.auth.schemas import (
    LoginRequest, SignupRequest, SessionResponse, AuthStatusResponse
)
from app.modules.auth.service import AuthService, AUTH_DISABLED_MESSAGE
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(service: AuthService = Depends(get_auth_service)):
    """Whether login/signup is available; carries the configuration warning when it is not"""
    if service.enabled:
        return AuthStatusResponse(enabled=True)
    return AuthStatusResponse(enabled=False, message=AUTH_DISABLED_MESSAGE)


@router.post("/signup", response_model=SessionResponse, status_code=201)
async def signup(
    signup_data: SignupRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return service.signup(signup_data)


@router.post("/login", response_model=SessionResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.get("/me")
async def get_current_user(current_user: Dict = Depends(get_current_user_id)):
    """Get current authenticated user"""
    return current_user
