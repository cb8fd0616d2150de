from pydantic import BaseModel, EmailStr
from typing import Optional


class LoginRequest(BaseModel):
    # Optional so a missing field reaches the service and gets its message
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class SignupRequest(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    full_name: Optional[str] = None


class SessionResponse(BaseModel):
    user_id: str
    email: str
    display_name: str
    access_token: Optional[str] = None
    token_type: str = "bearer"


class AuthStatusResponse(BaseModel):
    enabled: bool
    message: Optional[str] = None
